"""Level control for the ``mvcore`` logger hierarchy.

The framework never touches the root logger. Applications keep their own
handlers and decide how much of the framework's output they want:

* ``set_framework_level`` sets the level of the ``mvcore`` parent logger.
* ``enable_dispatch_tracing`` turns on the per-dispatch DEBUG records of the
  View, the Controller and macro commands without making the rest of the
  framework chatty.

``MVCORE_LOG_LEVEL`` (level name or number) and ``MVCORE_TRACE`` (truthy)
are read by :func:`apply_env_overrides`, which every new
:class:`~mvcore.core.registry.CoreRegistry` calls.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

FRAMEWORK_LOGGER = "mvcore"
DISPATCH_LOGGERS = (
    "mvcore.core.view",
    "mvcore.core.controller",
    "mvcore.patterns.command",
)
LEVEL_ENV_VAR = "MVCORE_LOG_LEVEL"
TRACE_ENV_VAR = "MVCORE_TRACE"


def _coerce_level(value: int | str | None) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    candidate = getattr(logging, text.upper(), None) if text else None
    return candidate if isinstance(candidate, int) else None


def set_framework_level(level: int | str) -> int:
    """Set the level of the ``mvcore`` logger and return it as an int.

    Unknown level names leave the logger untouched and return its current
    level.
    """
    logger = logging.getLogger(FRAMEWORK_LOGGER)
    coerced = _coerce_level(level)
    if coerced is not None:
        logger.setLevel(coerced)
    return logger.level


def enable_dispatch_tracing(enabled: bool = True) -> None:
    """Emit (or stop emitting) DEBUG records for every dispatch and command run.

    Disabling resets the dispatch loggers to inherit from ``mvcore`` again.
    """
    level = logging.DEBUG if enabled else logging.NOTSET
    for name in DISPATCH_LOGGERS:
        logging.getLogger(name).setLevel(level)


def apply_env_overrides() -> Optional[int]:
    """Apply ``MVCORE_LOG_LEVEL`` / ``MVCORE_TRACE`` if set.

    Returns the level applied to the ``mvcore`` logger, or ``None`` when the
    environment does not ask for one.
    """
    applied = None
    level = _coerce_level(os.getenv(LEVEL_ENV_VAR) or None)
    if level is not None:
        applied = set_framework_level(level)
    trace = os.getenv(TRACE_ENV_VAR)
    if trace is not None and trace.strip().lower() in {"1", "true", "yes", "on"}:
        enable_dispatch_tracing()
    return applied


__all__ = [
    "DISPATCH_LOGGERS",
    "FRAMEWORK_LOGGER",
    "apply_env_overrides",
    "enable_dispatch_tracing",
    "set_framework_level",
]
