"""Structured logging helpers shared by the extractor and its CLI."""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Iterator

UTC = getattr(datetime, "UTC", timezone.utc)
_LOGGER_NAME = "adcard_extractor"
_base_context: ContextVar[dict[str, Any]] = ContextVar("adcard_base_context", default={})
_context_stack: ContextVar[tuple[dict[str, Any], ...]] = ContextVar("adcard_context_stack", default=())


def configure_logging(level: int = logging.INFO) -> None:
    """Configure the root formatter once; later calls only adjust the package level."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")
    logging.getLogger(_LOGGER_NAME).setLevel(level)


def set_global_context(**fields: Any) -> None:
    """Add persistent context fields that appear on every structured log."""

    merged = dict(_base_context.get())
    merged.update({k: v for k, v in fields.items() if v is not None})
    _base_context.set(merged)


@contextmanager
def logging_context(**fields: Any) -> Iterator[None]:
    """Push a temporary logging context for the duration of the ``with`` block."""

    ctx = {k: v for k, v in fields.items() if v is not None}
    token = _context_stack.set(_context_stack.get() + (ctx,))
    try:
        yield
    finally:
        _context_stack.reset(token)


def _merged_context() -> dict[str, Any]:
    merged: dict[str, Any] = {}
    merged.update(_base_context.get())
    for ctx in _context_stack.get():
        merged.update(ctx)
    return merged


def _utcnow_iso() -> str:
    return datetime.now(UTC).isoformat()


def jlog(level: str, /, **fields: Any) -> None:
    """Emit a structured JSON log payload under the ``adcard_extractor`` logger."""

    log = logging.getLogger(_LOGGER_NAME)
    method = getattr(log, level.lower())
    if not log.isEnabledFor(logging.getLevelName(level.upper())):
        return
    record = {"ts": _utcnow_iso(), **_merged_context(), **fields}
    method(json.dumps(record, ensure_ascii=False, sort_keys=True, default=str))


__all__ = ["configure_logging", "jlog", "logging_context", "set_global_context"]
