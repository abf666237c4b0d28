"""
General utility functions for the CLI application.
"""

from rich.console import Console

console: Console = Console(stderr=True)


def debug(
    *values: object,
    sep: str = " ",
    end: str = "\n",
) -> None:
    """
    Print debug message with orange bold formatting.

    Messages go to stderr so that sampled lines on stdout stay pipeable.

    Args:
        *values: Variable number of objects to print. All values are converted to strings.
        sep: Separator string between values. Defaults to a single space.
        end: String appended after the last value. Defaults to newline.
    """
    if not values:
        console.print(end=end)
        return

    message = sep.join(str(v) for v in values)

    console.print(f"DEBUG: {message}", end=end, style="orange1")
