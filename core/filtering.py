"""
Language-specific line filtering.

A cheap, line-level approximation of "this is a real line of code". It is a
heuristic, not a parser: it knows nothing about block comments spanning
several lines or string literals that contain a slash.
"""

from typing import Iterable

from constants import LANGUAGES_HEURISTICS, MIN_LINE_LENGTH
from models import SupportedLanguage


def filter_code_lines(
    language: SupportedLanguage, lines: Iterable[str]
) -> list[str]:
    """
    Keep only the lines that look like code for the given language.

    A line survives when:
        1. It contains none of the language's excluded substrings. "/" is
           excluded for every language (comments, paths, division); Java also
           excludes "import".
        2. It is longer than MIN_LINE_LENGTH characters once trimmed.

    Surviving lines are returned trimmed, in their original order.

    Args:
        language: The language whose rules apply.
        lines: Raw lines of one file.

    Returns:
        The filtered, trimmed lines.

    Example:
        >>> filter_code_lines(
        ...     SupportedLanguage.RUST,
        ...     ["///", "let thing", "    let thing = do_this_long_thing(hello)"],
        ... )
        ['let thing = do_this_long_thing(hello)']
    """
    excluded = LANGUAGES_HEURISTICS[language]["excluded_substrings"]

    kept: list[str] = []
    for line in lines:
        if any(substring in line for substring in excluded):
            continue
        trimmed = line.strip()
        if len(trimmed) > MIN_LINE_LENGTH:
            kept.append(trimmed)
    return kept
