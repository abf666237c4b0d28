"""
random-lines CLI Entry Point.

This module implements the command-line interface for random-lines, a small
sampling tool that prints a random line of real source code taken from a local
corpus of files in a chosen programming language.

The corpus is located through environment variables:

- `RUST_LINES` / `JAVA_LINES`: base directory searched recursively for files
  with the language's extension.
- `HOME`: Rust falls back to the cargo registry sources under
  `~/.cargo/registry/src` when `RUST_LINES` is not set.

Usage:
    Run directly as a script or via the installed entry point.

    $ python main.py --language rust
    $ JAVA_LINES=~/src/jdk random-lines -l java -n 5

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal colors and diagnostics.
    - Inquirer: Interactive language selection.
"""

from typing import Annotated
import typer
from rich import print as pr
from rich.markup import escape
import inquirer  # type: ignore
from inquirer.themes import GreenPassion  # type: ignore
from core.enumeration import list_files
from core.exceptions import (
    FileAccessError,
    LinesError,
    NoFilesFoundError,
    NoFolderConfiguredError,
    UnsupportedLanguageError,
)
from core.languages import display_name, parse_language
from core.lines import get_random_lines
from core.resolution import resolve_folder
from constants import LANGUAGES_HEURISTICS
from models import LineConfig, SupportedLanguage
from utils import debug

app = typer.Typer()


@app.command()
def main(
    language: Annotated[
        str | None,
        typer.Option(
            "--language",
            "-l",
            help=f"Available languages: {', '.join(list(SupportedLanguage))}",
        ),
    ] = None,
    count: Annotated[
        int,
        typer.Option("--count", "-n", min=1, help="Number of lines to print."),
    ] = 1,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help=(
                "Show the resolved search pattern and how many files it matches. "
                "Scans the corpus one extra time."
            ),
        ),
    ] = False,
):
    """
    Print random lines of code from the local corpus of a language.

    If the language is not given or not recognised, the user is prompted to
    pick one interactively. Each printed line comes from its own random file.

    Raises:
        typer.Exit: With code 1 if any line cannot be produced.
    """
    try:
        selected = parse_language(language)
    except UnsupportedLanguageError:
        if language is not None:
            pr(f"\n[red bold]Not a valid language: {escape(language)}")
        selected = make_language_selection()

    config = LineConfig(language=selected)

    try:
        if verbose:
            pattern = resolve_folder(selected)
            debug(f"Search pattern: {escape(pattern)}")
            debug(f"Matching files: {len(list_files(pattern))}")

        for line in get_random_lines(config, count):
            typer.echo(line)
    except FileAccessError as e:
        print_file_access_err(e)
    except LinesError as e:
        print_lines_err(e, selected)
    except Exception as e:  # noqa: BLE001
        # Catch-all so users see a friendly message instead of a stack trace
        print_unexpected_err(e)


def print_lines_err(e: LinesError, language: SupportedLanguage) -> None:
    """
    Displays a user-friendly message for a failed line lookup.

    Configuration problems get a hint naming the environment variable that
    points random-lines at a corpus.

    Args:
        e (LinesError): The exception that was raised.
        language (SupportedLanguage): The language being sampled.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr(f"❌ [bold red]Could not get a random {display_name(language)} line[/bold red]")
    pr(escape(e.message))

    override_env = LANGUAGES_HEURISTICS[language]["override_env"]
    if isinstance(e, NoFolderConfiguredError):
        pr(
            f"\n[yellow]Quick Fix:[/yellow] Set [green]{override_env}[/green] "
            "to a folder containing source files."
        )
    elif isinstance(e, NoFilesFoundError):
        pr(
            f"\n[yellow]Quick Fix:[/yellow] Check that [green]{override_env}[/green] "
            f"points to a folder with .{LANGUAGES_HEURISTICS[language]['extension']} files."
        )

    raise typer.Exit(code=1) from e


def print_file_access_err(e: FileAccessError) -> None:
    """
    Displays a user-friendly error message for a file that could not be read.

    Args:
        e (FileAccessError): The exception that was raised, containing the file
            path and diagnostic information.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]File Access Error[/bold red]")
    pr(f"The app couldn't read a file from the corpus: {escape(e.message)}")
    pr(f"File path: [yellow]{escape(e.file_path)}[/yellow]")

    pr("\n[yellow]Quick Fix:[/yellow] Check file permissions in the corpus folder.")
    pr(f"\nDiagnostics: {escape(str(e.diagnostic_info))}")

    raise typer.Exit(code=1) from e


def print_unexpected_err(e: Exception) -> None:
    """
    Displays a user-friendly error message for unexpected errors.

    Args:
        e (Exception): The unexpected exception that was raised.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Unexpected Error[/bold red]")
    pr("An unexpected error occurred while processing your request.")
    pr(f"\n[yellow]Error Type:[/yellow] {type(e).__name__}")
    pr(f"[yellow]Error Message:[/yellow] {escape(str(e))}")

    pr("\n--- PLEASE REPORT THIS ---")
    if e.__cause__:
        pr(f"Caused by: {escape(str(e.__cause__))}")

    raise typer.Exit(code=1) from e


def make_language_selection() -> SupportedLanguage:
    """
    Interactively prompts the user to select a supported programming language.
    This is invoked when the user does not provide a valid `--language` option.

    Returns:
    SupportedLanguage: The enum member corresponding to the user's selection.
    """

    pr("\n[bold green]Select the language to pick a random line from.[/bold green]")

    questions = [
        inquirer.List(
            "language",
            message="Hit [ENTER] to make your selection",
            choices=list(SupportedLanguage),
        ),
    ]

    answers = inquirer.prompt(questions, theme=GreenPassion())

    if not answers:
        raise typer.Exit()

    return SupportedLanguage(answers["language"])


if __name__ == "__main__":
    app()
