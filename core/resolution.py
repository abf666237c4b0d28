"""
Search pattern resolution.

Turns a language into the single glob pattern describing its local corpus.
The precedence is fixed:

1. **Override**: the language's `<LANG>_LINES` environment variable names a
   base directory; every file with the language's extension below it is a
   candidate.
2. **Built-in default**: languages with a well-known local source cache (Rust's
   cargo registry) fall back to it, relative to the home directory.
3. **Failure**: NoFolderConfiguredError.

Nothing is cached; the environment is consulted on every call.
"""

from adapters.environment import EnvironmentProvider, OsEnvironment
from constants import HOME_ENV, LANGUAGES_HEURISTICS
from core.exceptions import NoFolderConfiguredError
from models import SupportedLanguage


def resolve_folder(
    language: SupportedLanguage,
    environment: EnvironmentProvider | None = None,
) -> str:
    """
    Resolve the glob pattern to search for files of the given language.

    Args:
        language: The language whose corpus should be located.
        environment: Optional environment provider. If None, reads the real
            process environment via OsEnvironment.

    Returns:
        A glob pattern such as "/home/me/.cargo/registry/src/**/*.rs".

    Raises:
        NoFolderConfiguredError: If there is no override and no usable default.
    """
    if environment is None:
        environment = OsEnvironment()

    heuristics = LANGUAGES_HEURISTICS[language]

    override = environment.get(heuristics["override_env"])
    if override:
        return f"{_strip_separators(override)}/**/*.{heuristics['extension']}"

    default_pattern = heuristics["default_pattern"]
    if default_pattern is not None:
        home = environment.get(HOME_ENV)
        if home:
            return f"{_strip_separators(home)}/{default_pattern}"

    raise NoFolderConfiguredError(language)


def _strip_separators(folder: str) -> str:
    # "/" collapses to "", leaving the pattern rooted at "/"
    return folder.rstrip("/\\")
