"""Runtime settings.

Environment-first: TTT_SEED, TTT_CLEAR_SCREEN and TTT_LOG_LEVEL are read here;
command-line flags override them in the CLI.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

_FALSEY = {"0", "false", "no", "off"}


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logging.warning("Ignoring non-integer %s=%r", name, raw)
        return None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSEY


@dataclass
class Settings:
    seed: Optional[int] = None
    clear_screen: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            seed=_env_int("TTT_SEED"),
            clear_screen=_env_flag("TTT_CLEAR_SCREEN", True),
            log_level=(os.getenv("TTT_LOG_LEVEL") or "INFO").upper(),
        )

    def level(self) -> int:
        value = logging.getLevelName(self.log_level)
        return value if isinstance(value, int) else logging.INFO
