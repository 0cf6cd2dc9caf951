from __future__ import annotations

import pytest

from buffer_engine.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose-ish")


def test_get_logger_is_cached() -> None:
    telemetry.configure(preset="quiet")
    try:
        assert telemetry.get_logger("buffer_engine.test") is telemetry.get_logger(
            "buffer_engine.test"
        )
    finally:
        telemetry.configure()


def test_span_reraises_block_errors() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with telemetry.span("test::span", component=True, metadata={"k": 1}) as handle:
            handle.add_metadata("extra", [1, 2])
            assert handle.metadata == {"k": "1", "extra": "[1, 2]"}
            raise RuntimeError("boom")
