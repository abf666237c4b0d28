"""
Tests for the random line pipeline.

Tests cover:
- get_random_line: end-to-end sampling against on-disk corpora, and each
  terminal failure (configuration, no files, unreadable file, no lines)
- get_random_lines: repeated sampling and count validation
"""

import pytest

from core.exceptions import (
    FileAccessError,
    GlobError,
    NoFilesFoundError,
    NoFolderConfiguredError,
    NoMatchingLinesError,
)
from core.file_io import MockLineReader
from core.lines import get_random_line, get_random_lines


# ============================================================================
# Tests for get_random_line
# ============================================================================


@pytest.mark.unit
def test_rust_line_from_corpus(
    rust_config, corpus_factory, mock_environment_factory, rust_source, seeded_rng
):
    root = corpus_factory({"src/lib.rs": rust_source})
    env = mock_environment_factory(RUST_LINES=str(root))

    line = get_random_line(rust_config, environment=env, rng=seeded_rng)

    assert line in {
        "use std::fmt;",
        "pub fn add(left: usize, right: usize) -> usize {",
        "left + right",
    }


@pytest.mark.unit
def test_java_line_from_corpus(
    java_config, corpus_factory, mock_environment_factory, java_source, seeded_rng
):
    root = corpus_factory({"com/example/Greeter.java": java_source})
    env = mock_environment_factory(JAVA_LINES=str(root))

    for _ in range(20):
        line = get_random_line(java_config, environment=env, rng=seeded_rng)
        assert line in {
            "package com.example;",
            "public class Greeter {",
            'private final String greeting = "hello";',
        }


@pytest.mark.unit
def test_rust_default_corpus_under_home(
    rust_config, tmp_path, mock_environment_factory
):
    crate = tmp_path / ".cargo" / "registry" / "src" / "index" / "serde-1.0.0"
    crate.mkdir(parents=True)
    (crate / "lib.rs").write_text("pub struct Serializer {\n", encoding="utf-8")
    env = mock_environment_factory(HOME=str(tmp_path))

    assert get_random_line(rust_config, environment=env) == "pub struct Serializer {"


@pytest.mark.unit
def test_only_files_of_the_language_are_read(
    rust_config, corpus_factory, mock_environment_factory, seeded_rng
):
    root = corpus_factory(
        {
            "lib.rs": "let value = compute_value();\n",
            "Main.java": "public static void main(String[] args) {\n",
        }
    )
    env = mock_environment_factory(RUST_LINES=str(root))

    for _ in range(10):
        assert (
            get_random_line(rust_config, environment=env, rng=seeded_rng)
            == "let value = compute_value();"
        )


@pytest.mark.unit
def test_every_file_can_be_picked(
    rust_config, corpus_factory, mock_environment_factory, seeded_rng
):
    root = corpus_factory(
        {
            "a.rs": "let first_value = 1;\n",
            "b.rs": "let second_value = 2;\n",
        }
    )
    env = mock_environment_factory(RUST_LINES=str(root))

    seen = {
        get_random_line(rust_config, environment=env, rng=seeded_rng)
        for _ in range(100)
    }

    assert seen == {"let first_value = 1;", "let second_value = 2;"}


@pytest.mark.unit
def test_uses_injected_reader(rust_config, corpus_factory, mock_environment_factory):
    root = corpus_factory({"lib.rs": ""})
    env = mock_environment_factory(RUST_LINES=str(root))
    reader = MockLineReader(return_value=["    let from_reader = true;"])

    line = get_random_line(rust_config, environment=env, reader=reader)

    assert line == "let from_reader = true;"
    assert reader.read_lines_calls == [str(root / "lib.rs")]


@pytest.mark.unit
def test_no_folder_configured(rust_config, mock_environment_factory):
    reader = MockLineReader()

    with pytest.raises(NoFolderConfiguredError):
        get_random_line(
            rust_config, environment=mock_environment_factory(), reader=reader
        )

    assert reader.read_lines_calls == []


@pytest.mark.unit
def test_malformed_override_raises_glob_error(rust_config, mock_environment_factory):
    env = mock_environment_factory(RUST_LINES="/src/broken[")

    with pytest.raises(GlobError):
        get_random_line(rust_config, environment=env)


@pytest.mark.unit
def test_no_files_found(java_config, corpus_factory, mock_environment_factory):
    root = corpus_factory({"lib.rs": "let not_java = true;"})
    env = mock_environment_factory(JAVA_LINES=str(root))
    reader = MockLineReader()

    with pytest.raises(NoFilesFoundError) as exc_info:
        get_random_line(java_config, environment=env, reader=reader)

    assert exc_info.value.pattern == f"{root}/**/*.java"
    assert "Java" in exc_info.value.message
    assert reader.read_lines_calls == []


@pytest.mark.unit
def test_file_access_error_propagates(
    rust_config, corpus_factory, mock_environment_factory
):
    root = corpus_factory({"lib.rs": "let x = 1;"})
    env = mock_environment_factory(RUST_LINES=str(root))

    def fail(path):
        raise FileAccessError(str(path), original_exception=PermissionError("denied"))

    with pytest.raises(FileAccessError) as exc_info:
        get_random_line(
            rust_config, environment=env, reader=MockLineReader(read_lines_fn=fail)
        )

    assert exc_info.value.file_path == str(root / "lib.rs")


@pytest.mark.unit
def test_no_matching_lines(rust_config, corpus_factory, mock_environment_factory):
    root = corpus_factory({"lib.rs": "// only a comment here\n}\n"})
    env = mock_environment_factory(RUST_LINES=str(root))

    with pytest.raises(NoMatchingLinesError) as exc_info:
        get_random_line(rust_config, environment=env)

    assert exc_info.value.file_path == str(root / "lib.rs")


# ============================================================================
# Tests for get_random_lines
# ============================================================================


@pytest.mark.unit
def test_get_random_lines_count(rust_config, corpus_factory, mock_environment_factory):
    root = corpus_factory({"lib.rs": "let only_line = 1;\n"})
    env = mock_environment_factory(RUST_LINES=str(root))

    result = get_random_lines(rust_config, 3, environment=env)

    assert result == ["let only_line = 1;"] * 3


@pytest.mark.unit
@pytest.mark.parametrize("count", [0, -1])
def test_get_random_lines_invalid_count(rust_config, count):
    with pytest.raises(ValueError):
        get_random_lines(rust_config, count)


@pytest.mark.unit
def test_override_reaches_hidden_directories(
    rust_config, tmp_path, mock_environment_factory
):
    """Pointing the override at a home directory still finds the cargo cache."""
    crate = tmp_path / ".cargo" / "registry" / "src" / "serde-1.0.0"
    crate.mkdir(parents=True)
    (crate / "lib.rs").write_text("pub struct Serializer {\n", encoding="utf-8")
    env = mock_environment_factory(RUST_LINES=str(tmp_path))

    assert get_random_line(rust_config, environment=env) == "pub struct Serializer {"
