"""Tests for the environment-driven configuration."""

import importlib
from collections.abc import Iterator

import pytest

from poseidon_spec import config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Reload the config module under a patched environment, then restore it."""
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(config)


def test_test_environment_is_active() -> None:
    """The test suite runs with POSEIDON_ENV=test."""
    assert config.POSEIDON_ENV == "test"


def test_environment_is_case_insensitive(reload_config: pytest.MonkeyPatch) -> None:
    """The flag is normalized to lower case."""
    reload_config.setenv("POSEIDON_ENV", "PROD")

    assert importlib.reload(config).POSEIDON_ENV == "prod"


def test_invalid_environment(reload_config: pytest.MonkeyPatch) -> None:
    """Unknown environments are rejected at import."""
    reload_config.setenv("POSEIDON_ENV", "staging")

    with pytest.raises(ValueError, match="Invalid POSEIDON_ENV"):
        importlib.reload(config)


def test_trace_rounds_flag(reload_config: pytest.MonkeyPatch) -> None:
    """POSEIDON_TRACE_ROUNDS=1 enables per-round tracing."""
    reload_config.setenv("POSEIDON_TRACE_ROUNDS", "1")

    assert importlib.reload(config).TRACE_ROUNDS is True


def test_invalid_trace_flag(reload_config: pytest.MonkeyPatch) -> None:
    """Only 0 and 1 are accepted for the tracing flag."""
    reload_config.setenv("POSEIDON_TRACE_ROUNDS", "yes")

    with pytest.raises(ValueError, match="Invalid POSEIDON_TRACE_ROUNDS"):
        importlib.reload(config)
