"""Engine settings resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .telemetry import ENV_PREFIX

DEFAULT_TAB_WIDTH = 4
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Display and persistence settings shared by rows and documents."""

    tab_width: int = DEFAULT_TAB_WIDTH
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if self.tab_width <= 0:
            raise ValueError("tab_width must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        env = os.environ if environ is None else environ
        raw = env.get(f"{ENV_PREFIX}TAB_WIDTH")
        if raw is None or not raw.strip():
            return cls()
        try:
            tab_width = int(raw)
        except ValueError as exc:
            raise ValueError(f"Invalid {ENV_PREFIX}TAB_WIDTH '{raw}'") from exc
        return cls(tab_width=tab_width)


__all__ = ["DEFAULT_ENCODING", "DEFAULT_TAB_WIDTH", "EngineConfig"]
