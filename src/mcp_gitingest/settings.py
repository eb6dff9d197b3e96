# File: src/mcp_gitingest/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass


def _truthy(v: str | None) -> bool:
    return str(v or "").strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass
class Settings:
    # Analyzer
    gitingest_bin: str = "gitingest"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        binary = (os.getenv("GITINGEST_BIN") or "").strip() or "gitingest"
        level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
        return cls(
            gitingest_bin=binary,
            log_level=level,
            log_json=_truthy(os.getenv("LOG_JSON", "true")),
        )
