"""
File enumeration for a resolved search pattern.

Expands a recursive glob pattern into the list of candidate files. Patterns
are checked up front so that a malformed pattern fails loudly instead of
silently matching nothing.
"""

import glob
import os
import re

from core.exceptions import GlobError

# Splits a pattern into path components on either separator
_COMPONENT_SPLIT = re.compile(r"[\\/]")


def list_files(pattern: str) -> list[str]:
    """
    Expand a glob pattern into the regular files it matches.

    `**` matches any number of directories, and wildcards also match names
    starting with ".". Matches that are not regular files, or whose metadata
    can't be read (broken symlinks, entries removed during the walk, permission
    problems), are skipped rather than aborting the listing.

    Args:
        pattern: A glob pattern such as "/src/java/**/*.java".

    Returns:
        The matching file paths in sorted order. An empty list is a valid result.

    Raises:
        GlobError: If the pattern is malformed or the traversal itself fails.
    """
    validate_pattern(pattern)

    try:
        matches = glob.glob(pattern, recursive=True, include_hidden=True)
    except (OSError, ValueError) as e:
        raise GlobError(pattern, original_exception=e) from e

    return sorted(path for path in matches if os.path.isfile(path))


def validate_pattern(pattern: str) -> None:
    """
    Reject patterns that cannot be expanded meaningfully.

    A pattern is malformed when it is empty, when `**` appears anywhere other
    than as a whole path component (e.g. "src/a**/b", "***"), or when a
    character class `[` is never closed.

    Raises:
        GlobError: Describing the first problem found.
    """
    if not pattern:
        raise GlobError(pattern, message="Empty search pattern")

    for component in _COMPONENT_SPLIT.split(pattern):
        if "**" in component and component != "**":
            raise GlobError(
                pattern,
                message=f"'**' must be a whole path component in pattern: {pattern}",
            )
        if _has_unclosed_class(component):
            raise GlobError(
                pattern,
                message=f"Unterminated character class in pattern: {pattern}",
            )


def _has_unclosed_class(component: str) -> bool:
    i = 0
    while i < len(component):
        if component[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < len(component) and component[j] == "!":
            j += 1
        # The first member may itself be "]", as in "[]a]"
        close = component.find("]", j + 1)
        if close == -1:
            return True
        i = close + 1
    return False
