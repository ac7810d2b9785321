# tests/unit/test_config.py

import pytest

from gridwalk.config import DEFAULT_MAX_HEIGHT, DEFAULT_MAX_WIDTH, GridConfig


def test_defaults() -> None:
    config = GridConfig()
    assert (config.max_width, config.max_height) == (DEFAULT_MAX_WIDTH, DEFAULT_MAX_HEIGHT) == (1024, 1024)
    assert config.checked is False


def test_from_env() -> None:
    config = GridConfig.from_env(
        {"GRIDWALK_MAX_WIDTH": "32", "GRIDWALK_MAX_HEIGHT": "16", "GRIDWALK_CHECKED": "yes"}
    )
    assert config == GridConfig(max_width=32, max_height=16, checked=True)


def test_from_env_reads_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRIDWALK_MAX_WIDTH", "5")
    monkeypatch.delenv("GRIDWALK_MAX_HEIGHT", raising=False)
    monkeypatch.delenv("GRIDWALK_CHECKED", raising=False)
    config = GridConfig.from_env()
    assert config == GridConfig(max_width=5)


def test_non_positive_maximum_raises() -> None:
    with pytest.raises(ValueError):
        GridConfig(max_width=0)
