"""
Type definitions and data models used across the random-lines CLI.

This module contains shared type definitions including enums, TypedDict
structures and the per-call configuration value that is handed to the
line sampling pipeline.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import TypedDict


class SupportedLanguage(StrEnum):
    """
    Enumeration of programming languages random-lines can sample from.

    Each value is the canonical, human-readable name of the language. It is
    shown in prompts and error messages, and the members are used as keys in
    the LANGUAGES_HEURISTICS mapping to look up per-language behaviour
    (file extension, environment override, default corpus, line filters).
    """

    RUST = "Rust"
    JAVA = "Java"


class LanguageHeuristics(TypedDict):
    """
    Type definition for language-specific corpus and filtering configuration.

    Attributes:
        extension: Conventional source file extension without the dot (e.g. "rs").
        override_env: Name of the environment variable holding a base directory
            that overrides the default corpus location (e.g. "RUST_LINES").
        default_pattern: Glob pattern relative to the user's home directory used
            when no override is set, or None if the language has no well-known
            local source cache.
        excluded_substrings: Lines containing any of these substrings are never
            considered code lines for this language.
    """

    extension: str
    override_env: str
    default_pattern: str | None
    excluded_substrings: frozenset[str]


@dataclass(frozen=True)
class LineConfig:
    """Configuration for a single random line lookup."""

    language: SupportedLanguage
