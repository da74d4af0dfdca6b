"""Environment-driven settings for the telemetry layer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "CHUNK_TEXT_"
TRUTHY = {"1", "true", "yes", "on"}


def _lookup(env: Mapping[str, str], name: str) -> Optional[str]:
    return env.get(f"{ENV_PREFIX}{name}")


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _lookup(env, name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Snapshot of the ``CHUNK_TEXT_*`` variables that shape logging."""

    logger_name: str = "chunk_text"
    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json_format: bool = False
    log_file: str = ""
    buffered: bool = False
    buffer_size: int = 2048

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "TelemetrySettings":
        source = os.environ if env is None else env
        raw_size = _lookup(source, "LOG_BUFFER_SIZE") or "2048"
        try:
            buffer_size = int(raw_size)
        except ValueError as exc:
            raise ValueError(
                f"{ENV_PREFIX}LOG_BUFFER_SIZE must be an integer, got {raw_size!r}"
            ) from exc
        return cls(
            logger_name=_lookup(source, "LOGGER") or "chunk_text",
            level=(_lookup(source, "LOG_LEVEL") or "INFO").upper(),
            console=not _flag(source, "DISABLE_CONSOLE", False),
            colored=not _flag(source, "NO_COLOR", False),
            json_format=_flag(source, "LOG_JSON", False),
            log_file=_lookup(source, "LOG_FILE") or "",
            buffered=_flag(source, "LOG_BUFFERED", False),
            buffer_size=buffer_size,
        )


__all__ = ["ENV_PREFIX", "TelemetrySettings"]
