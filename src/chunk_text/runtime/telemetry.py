"""Thin telelog layer used by the chunk buffer.

Chunks only ever log two things: contract violations (as structured events)
and the cost of bulk edits such as ``replace`` (as profiled spans). Loggers
are configured lazily from ``TelemetrySettings`` on first use.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

from .settings import TelemetrySettings

tl = cast(Any, telelog)

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None
_SETTINGS: Optional[TelemetrySettings] = None


def _settings() -> TelemetrySettings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = TelemetrySettings.from_env()
    return _SETTINGS


def build_config(settings: TelemetrySettings) -> Any:
    """Translate ``settings`` into a ``telelog.Config`` with profiling on."""

    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.colored)
    if settings.json_format:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    config.with_profiling(True)
    return config


def configure(
    *, config: Optional[Any] = None, settings: Optional[TelemetrySettings] = None
) -> None:
    """Adopt ``config`` (or one built from ``settings``) and drop cached loggers."""

    global _CONFIG, _SETTINGS
    if config is not None and settings is not None:
        raise ValueError("Provide either `config` or `settings`, not both.")
    if settings is not None:
        _SETTINGS = settings
    _CONFIG = config if config is not None else build_config(_settings())
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _CONFIG
    logger_name = name or _settings().logger_name
    logger = _LOGGERS.get(logger_name)
    if logger is None:
        if _CONFIG is None:
            _CONFIG = build_config(_settings())
        logger = tl.Logger.with_config(logger_name, _CONFIG)
        _LOGGERS[logger_name] = logger
    return logger


def _emit(logger: Any, level: str, message: str, payload: Mapping[str, Any]) -> None:
    """Log ``payload`` as key/value pairs, or inline if the level has no ``*_with``."""

    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(key), str(value)) for key, value in payload.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(payload)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@contextmanager
def span(
    name: str,
    *,
    metadata: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[None]:
    """Profile the block as component ``name`` with ``metadata`` as context.

    An exception escaping the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    context = {key: str(value) for key, value in (metadata or {}).items()}

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        stack.enter_context(log.track_component(name))
        stack.enter_context(log.profile(name))
        try:
            yield
        except Exception as exc:
            _emit(log, "error", "span::fail", {"span": name, "reason": exc, **context})
            raise


__all__ = ["build_config", "configure", "get_logger", "record_event", "span"]
