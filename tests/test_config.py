from __future__ import annotations

import pytest

from buffer_engine.runtime.config import DEFAULT_TAB_WIDTH, EngineConfig


def test_defaults() -> None:
    config = EngineConfig()

    assert config.tab_width == DEFAULT_TAB_WIDTH == 4
    assert config.encoding == "utf-8"


def test_from_env_reads_tab_width() -> None:
    config = EngineConfig.from_env({"BUFFER_ENGINE_TAB_WIDTH": "8"})

    assert config.tab_width == 8


def test_from_env_ignores_blank_value() -> None:
    assert EngineConfig.from_env({"BUFFER_ENGINE_TAB_WIDTH": " "}) == EngineConfig()


@pytest.mark.parametrize("raw", ["zero", "0", "-2"])
def test_from_env_rejects_bad_tab_width(raw: str) -> None:
    with pytest.raises(ValueError):
        EngineConfig.from_env({"BUFFER_ENGINE_TAB_WIDTH": raw})


def test_from_env_uses_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUFFER_ENGINE_TAB_WIDTH", "2")

    assert EngineConfig.from_env().tab_width == 2
