"""
Environment adapter for corpus configuration lookups.

Process environment variables are the only configuration source of
random-lines. This module hides them behind a narrow provider so that the
core reads them fresh on every resolution while tests inject fixed values
instead of mutating the real process environment.
"""

import os
from typing import Mapping, Protocol


class EnvironmentProvider(Protocol):
    """Protocol for reading configuration values from the environment."""

    def get(self, name: str) -> str | None:
        """
        Return the value of an environment variable.

        Args:
            name: The variable name (e.g. "HOME").

        Returns:
            The value, or None if the variable is unset or empty.
        """


class OsEnvironment:
    """Production EnvironmentProvider backed by os.environ."""

    def get(self, name: str) -> str | None:
        # An empty variable is as good as unset
        return os.environ.get(name) or None


class MockEnvironment:
    """
    Mock implementation of EnvironmentProvider for testing.

    Serves values from a fixed mapping and records every lookup.

    Attributes (for test inspection):
        get_calls: List of variable names passed to get()
    """

    def __init__(self, values: Mapping[str, str] | None = None):
        self.values = dict(values or {})
        self.get_calls: list[str] = []

    def get(self, name: str) -> str | None:
        self.get_calls.append(name)
        return self.values.get(name) or None
