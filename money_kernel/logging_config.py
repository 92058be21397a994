"""
Structured logging for the money packages.

Every logger lives under the ``money_kernel`` namespace. Once
``configure_logging`` has run, each record is written as one JSON line:

    {"ts": "...", "level": "DEBUG", "logger": "money_kernel.json.module",
     "message": "money module configured", "amount_field": "amount", ...}

Values passed through ``extra`` are encoded with simplejson, the same way
documents are: Decimal stays an exact JSON number, Money renders as
``"29.95 EUR"`` and Currency as its code. Exceptions that carry a ``code``
contribute it, plus their public attributes, as ``exc_*`` keys.
"""

from __future__ import annotations

import logging
import sys
import threading
from datetime import UTC, datetime
from typing import Any

import simplejson

from money_kernel.domain.values import Currency, Money

__all__ = [
    "StructuredFormatter",
    "get_logger",
    "configure_logging",
    "reset_logging",
]

_NAMESPACE = "money_kernel"

# Attributes every LogRecord has; anything else arrived through ``extra``.
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "taskName"}


def _log_default(obj: Any) -> Any:
    if isinstance(obj, (Money, Currency)):
        return str(obj)
    if isinstance(obj, datetime):
        return obj.isoformat()
    return repr(obj)


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in payload
        )
        if record.exc_info and record.exc_info[1] is not None:
            payload.update(self._exception_fields(record.exc_info[1]))
            payload["traceback"] = self.formatException(record.exc_info)
        return simplejson.dumps(payload, default=_log_default, use_decimal=True)

    @staticmethod
    def _exception_fields(exc: BaseException) -> dict[str, Any]:
        fields: dict[str, Any] = {"exc_type": type(exc).__name__, "exc_message": str(exc)}
        code = getattr(exc, "code", None)
        if code is not None:
            fields["exc_code"] = code
        fields.update(
            (f"exc_{name}", value) for name, value in vars(exc).items() if not name.startswith("_")
        )
        return fields


def get_logger(name: str) -> logging.Logger:
    """Return the ``money_kernel.<name>`` logger."""
    return logging.getLogger(f"{_NAMESPACE}.{name}")


_configured = False
_lock = threading.Lock()


def configure_logging(
    *,
    level: int | str = logging.INFO,
    stream: Any = None,
    handler: logging.Handler | None = None,
) -> bool:
    """
    Attach a JSON handler to the ``money_kernel`` namespace.

    $level may be a number or a name such as ``"debug"``. Only the first
    call has any effect until ``reset_logging``; the return value tells the
    caller whether this call did the configuring.
    """
    global _configured
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved
    with _lock:
        if _configured:
            return False
        _configured = True

    namespace = logging.getLogger(_NAMESPACE)
    namespace.setLevel(level)
    namespace.propagate = False
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter())
    namespace.addHandler(handler)
    return True


def reset_logging() -> None:
    """Undo ``configure_logging``. Used by tests."""
    global _configured
    with _lock:
        _configured = False
    namespace = logging.getLogger(_NAMESPACE)
    namespace.handlers.clear()
    namespace.setLevel(logging.NOTSET)
    namespace.propagate = True
