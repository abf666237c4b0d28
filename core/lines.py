"""
Random line sampling pipeline.

Composes the pieces of random-lines into its single entry point:

    resolve pattern -> list files -> pick a file -> read it -> filter lines
    -> pick a line

Selection is uniform per file and then per line within that file, so lines
in short files are more likely than lines in long ones. Any failure aborts the
call with a LinesError subclass; nothing is retried.
"""

from adapters.environment import EnvironmentProvider
from core.enumeration import list_files
from core.exceptions import NoFilesFoundError, NoMatchingLinesError
from core.file_io import FilesystemLineReader, LineReader
from core.filtering import filter_code_lines
from core.resolution import resolve_folder
from core.selection import RandomSource, choose_uniform
from models import LineConfig


def get_random_line(
    config: LineConfig,
    environment: EnvironmentProvider | None = None,
    reader: LineReader | None = None,
    rng: RandomSource | None = None,
) -> str:
    """
    Return one random line of code from the configured language's corpus.

    Args:
        config: Which language to sample.
        environment: Optional environment provider used to resolve the corpus.
            If None, the process environment is read.
        reader: Optional line reader. If None, creates a FilesystemLineReader.
        rng: Optional random source for both picks. If None, the default
            generator of core.selection is used.

    Returns:
        A trimmed line of code.

    Raises:
        NoFolderConfiguredError: If no corpus location is configured.
        GlobError: If the corpus pattern cannot be expanded.
        NoFilesFoundError: If the pattern matches no files.
        FileAccessError: If the chosen file cannot be read.
        NoMatchingLinesError: If no line of the chosen file passes the filter.
    """
    if reader is None:
        reader = FilesystemLineReader()

    language = config.language
    pattern = resolve_folder(language, environment)

    file_path = choose_uniform(list_files(pattern), rng)
    if file_path is None:
        raise NoFilesFoundError(language, pattern=pattern)

    lines = filter_code_lines(language, reader.read_lines(file_path))

    line = choose_uniform(lines, rng)
    if line is None:
        raise NoMatchingLinesError(file_path)

    return line


def get_random_lines(
    config: LineConfig,
    count: int,
    environment: EnvironmentProvider | None = None,
    reader: LineReader | None = None,
    rng: RandomSource | None = None,
) -> list[str]:
    """
    Sample `count` lines, each from an independent get_random_line call.

    Raises:
        ValueError: If count is smaller than 1.
        LinesError: The first failure of any individual call.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    return [
        get_random_line(config, environment=environment, reader=reader, rng=rng)
        for _ in range(count)
    ]
