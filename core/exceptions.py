"""
Custom exception classes for the random-lines CLI.

This module defines the errors raised while resolving a language's corpus,
enumerating its files, reading one of them and picking a line. Every failure
is terminal: the core raises, nothing is retried, and the CLI turns these
exceptions into user-facing messages.
"""

import os
from typing import Optional

from models import SupportedLanguage


class LinesError(Exception):
    """
    Base exception for every failure of the line sampling pipeline.

    Attributes:
        message: A human-readable error message describing what went wrong.
    """

    def __init__(self, message: Optional[str] = None):
        self.message = message or "Could not get a random line"
        super().__init__(self.message)


class UnsupportedLanguageError(LinesError):
    """
    Raised when a string does not name any supported language.

    Attributes:
        language: The text that failed to parse.
    """

    def __init__(self, language: Optional[str], message: Optional[str] = None):
        self.language = language
        super().__init__(message or f"Unsupported language: {language!r}")


class NoFolderConfiguredError(LinesError):
    """
    Raised when neither an environment override nor a built-in default
    yields a folder to search for the language.

    Attributes:
        language: The language whose corpus could not be located.
    """

    def __init__(self, language: SupportedLanguage, message: Optional[str] = None):
        self.language = language
        super().__init__(message or f"No folder configured for {language}")


class GlobError(LinesError):
    """
    Raised when a search pattern cannot be expanded.

    This covers structurally malformed patterns as well as filesystem errors
    that abort the traversal itself.

    Attributes:
        pattern: The glob pattern that failed.
        original_exception: The underlying exception, if any.
    """

    def __init__(
        self,
        pattern: str,
        message: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.pattern = pattern
        self.original_exception = original_exception
        super().__init__(message or f"Could not expand pattern: {pattern}")


class NoFilesFoundError(LinesError):
    """
    Raised when a pattern expands successfully but matches no files.

    Attributes:
        language: The language being sampled.
        pattern: The pattern that matched nothing, if known.
    """

    def __init__(
        self,
        language: SupportedLanguage,
        pattern: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.language = language
        self.pattern = pattern
        default = f"No {language} files found"
        if pattern:
            default += f" matching {pattern}"
        super().__init__(message or default)


class FileAccessError(LinesError):
    """
    Raised when the chosen file cannot be opened or read.

    Attributes:
        file_path: The path of the file that could not be read.
        original_exception: The underlying OS error.
        diagnostic_info: A dictionary containing diagnostic information including
            exception type, details, and OS name.
    """

    def __init__(
        self,
        file_path: str,
        message: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.file_path = file_path
        self.original_exception = original_exception
        self.diagnostic_info = {
            "type": (
                type(original_exception).__name__ if original_exception else "Unknown"
            ),
            "details": str(original_exception) if original_exception else "No details",
            "os_name": os.name,
        }
        super().__init__(message or f"Failed to read file: {file_path}")


class NoMatchingLinesError(LinesError):
    """
    Raised when a file was read but none of its lines survived filtering.

    Attributes:
        file_path: The file that had no usable lines, if known.
    """

    def __init__(self, file_path: Optional[str] = None, message: Optional[str] = None):
        self.file_path = file_path
        default = "No code lines left after filtering"
        if file_path:
            default += f" in {file_path}"
        super().__init__(message or default)
