"""Base structured logging utilities for the parser layer.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Parsers never configure handlers themselves; they call ``get_logger`` and
  emit events through ``log_event``.

All parser loggers are children of the shared ``forge`` logger, which owns a
single stderr handler. Level and format come from ``FORGE_LOG_LEVEL`` and
``FORGE_LOG_JSON`` (see ``forge_providers.config.env``).
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from ..config.defaults import FORGE_LOGGER_NAME
from ..config.env import get_log_json, get_log_level, parse_level
from .log_support import JsonFormatter, LogContext

_BASE_LOGGER_ATTR = "_forge_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_forge_console_handler"
_FILE_HANDLER_ATTR = "_forge_file_handler"

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger() -> logging.Logger:
    """Initialize (once) and return the shared ``forge`` logger."""
    logger = logging.getLogger(FORGE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger
    level = get_log_level()
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(get_log_json()))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [h for h in logger.handlers if not getattr(h, _CONSOLE_HANDLER_ATTR, False)]
    logger.addHandler(handler)
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = FORGE_LOGGER_NAME) -> logging.Logger:
    """Return a logger under the shared ``forge`` hierarchy.

    Module names such as ``forge_providers.openai.parser`` are re-rooted to
    ``forge.openai.parser`` so every parser inherits the base handler.
    """
    base_logger = _ensure_base_logger()
    if name == FORGE_LOGGER_NAME:
        return base_logger
    if name.startswith("forge_providers."):
        name = f"{FORGE_LOGGER_NAME}.{name[len('forge_providers.'):]}"
    elif not name.startswith(f"{FORGE_LOGGER_NAME}."):
        name = f"{FORGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: Optional[bool] = None,
) -> logging.Logger:
    """Reconfigure the shared ``forge`` logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired level, numeric or by name. ``None`` keeps the current level.
    file_path: Optional[str]
        When provided, attach (or retarget) a rotating file handler writing to
        this path. When ``None``, remove any file handler managed here.
    json_mode: Optional[bool]
        Formatter selection for all managed handlers. ``None`` keeps the
        environment-derived default.

    Returns
    -------
    logging.Logger
        The configured base logger. Handlers not created by this module are
        left untouched.
    """
    logger = _ensure_base_logger()
    if level is not None:
        logger.setLevel(parse_level(level, default=logger.level) if isinstance(level, str) else level)
    use_json = get_log_json() if json_mode is None else json_mode

    for h in list(logger.handlers):
        if getattr(h, _FILE_HANDLER_ATTR, False):
            logger.removeHandler(h)
            with contextlib.suppress(Exception):
                h.close()

    if file_path is not None:
        abs_path = os.path.abspath(os.path.expanduser(file_path))
        os.makedirs(os.path.dirname(abs_path), exist_ok=True)
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        logger.addHandler(fh)

    for h in logger.handlers:
        if getattr(h, _CONSOLE_HANDLER_ATTR, False) or getattr(h, _FILE_HANDLER_ATTR, False):
            h.setLevel(logger.level)
            h.setFormatter(_formatter(use_json))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON message.

    Parameters
    ----------
    logger: logging.Logger
        Logger obtained from ``get_logger``.
    event: str
        Event name (e.g. ``parser.reject``).
    ctx: LogContext | None
        Provider/model context; merged shallowly.
    level: int
        Logging level for the record.
    keep_none: bool
        When ``True``, keys whose value is ``None`` are kept as JSON ``null``.
    **fields: Any
        Serializable key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
