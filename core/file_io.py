from pathlib import Path
from typing import Callable, Protocol

from core.exceptions import FileAccessError


class LineReader(Protocol):
    """
    Protocol defining the interface for reading a file as lines.

    This protocol allows different implementations for production (filesystem)
    and testing (mocks).
    """

    def read_lines(self, file_path: str | Path) -> list[str]:
        """
        Read a text file into a list of lines without line terminators.

        Args:
            file_path: The path to the file to read.

        Returns:
            The decodable lines of the file, in order.

        Raises:
            FileAccessError: If the file cannot be opened or read.
        """


class FilesystemLineReader:

    def read_lines(self, file_path: str | Path) -> list[str]:
        """
        Read a file line by line as UTF-8.

        Each line is decoded on its own; a line that isn't valid UTF-8 is dropped
        without affecting the rest of the file. "\\n" and "\\r\\n" terminators
        are removed.

        Args:
            file_path: The path to the file to read.

        Returns:
            The decodable lines of the file, in order.

        Raises:
            FileAccessError: If the file cannot be opened or an I/O error occurs
                while reading it.
        """
        lines: list[str] = []
        try:
            with open(file_path, "rb") as f:
                for raw_line in f:
                    try:
                        line = raw_line.decode("utf-8")
                    except UnicodeDecodeError:
                        continue
                    lines.append(line.removesuffix("\n").removesuffix("\r"))
        except OSError as e:
            raise FileAccessError(
                file_path=str(file_path),
                original_exception=e,
            ) from e

        return lines


class MockLineReader:
    """
    Mock implementation of LineReader for testing.

    Returns configurable lines, allowing tests to control file reading
    behavior without requiring filesystem operations or actual file I/O.
    """

    def __init__(
        self,
        return_value: list[str] | None = None,
        read_lines_fn: Callable[[str | Path], list[str]] | None = None,
    ):
        """
        Initialize MockLineReader with configurable reading behavior.

        Args:
            return_value: If provided, always returns this value regardless of input.
                Takes precedence over read_lines_fn if both are provided.
            read_lines_fn: Optional callable that takes a file path and returns its
                lines. May raise to simulate read failures. If both are None,
                defaults to returning an empty list.

        Attributes (for test inspection):
            read_lines_calls: List of file paths passed to read_lines()
        """
        self.return_value = return_value
        self.read_lines_fn = read_lines_fn

        self.read_lines_calls: list[str | Path] = []

    def read_lines(self, file_path: str | Path) -> list[str]:
        """Read a file (returns configured value, tracks call)."""
        self.read_lines_calls.append(file_path)
        if self.return_value is not None:
            return list(self.return_value)
        if self.read_lines_fn is not None:
            return self.read_lines_fn(file_path)
        return []
