"""
Shared fixtures for core module tests.

This module provides reusable pytest fixtures for testing core functionality,
including environment providers, seeded random sources and on-disk corpora.
"""

import random
import pytest

from adapters.environment import MockEnvironment
from models import LineConfig, SupportedLanguage


@pytest.fixture
def rust_source():
    return """\
//! Crate docs
use std::fmt;

/// Adds two numbers.
pub fn add(left: usize, right: usize) -> usize {
    left + right
}
"""


@pytest.fixture
def java_source():
    return """\
package com.example;

import java.util.List;

public class Greeter {
    // says hello
    private final String greeting = "hello";
}
"""


@pytest.fixture
def rust_config():
    return LineConfig(language=SupportedLanguage.RUST)


@pytest.fixture
def java_config():
    return LineConfig(language=SupportedLanguage.JAVA)


@pytest.fixture
def seeded_rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def mock_environment_factory():
    """Factory for creating MockEnvironment instances."""

    def _factory(**values: str) -> MockEnvironment:
        return MockEnvironment(values)

    return _factory


@pytest.fixture
def corpus_factory(tmp_path):
    """
    Factory writing a corpus of files below a fresh directory.

    Keys are paths relative to the corpus root, values are file contents.
    Returns the corpus root.
    """

    def _factory(files: dict[str, str]):
        root = tmp_path / "corpus"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _factory
