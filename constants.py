"""
Application-wide constants and configuration mappings.

This module defines the heuristics used to locate a language's local corpus
and to sieve its files down to lines that look like real code.
"""

from typing import Final, Mapping
from models import SupportedLanguage, LanguageHeuristics


# Environment variable holding the user's home directory. Built-in default
# corpora are resolved relative to it.
HOME_ENV: Final[str] = "HOME"

# A kept line must be strictly longer than this once trimmed. Shorter lines are
# mostly braces, bare keywords and short declarations.
MIN_LINE_LENGTH: Final[int] = 10

# Per-language heuristics for corpus resolution and line filtering.
# "/" is excluded for every language: it catches line and doc comments, paths
# and anything with division in it. Java also drops import statements, which
# are long enough to pass the length check on their own.
LANGUAGES_HEURISTICS: Final[Mapping[SupportedLanguage, LanguageHeuristics]] = {
    SupportedLanguage.RUST: {
        "extension": "rs",
        "override_env": "RUST_LINES",
        # Sources of every crate cargo has downloaded
        "default_pattern": ".cargo/registry/src/**/*.rs",
        "excluded_substrings": frozenset({"/"}),
    },
    SupportedLanguage.JAVA: {
        "extension": "java",
        "override_env": "JAVA_LINES",
        "default_pattern": None,
        "excluded_substrings": frozenset({"/", "import"}),
    },
}
