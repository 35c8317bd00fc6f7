"""Opt-in step tracing for Actions.

Tracing is switched on with the ``DOACTION_TRACE`` environment variable (or the
``enabled`` argument) and emits loguru records bound to
``component="doaction.trace"``. The records carry the input state, the output
state and the result; the ``(state, result)`` pair itself is never altered.
"""

from __future__ import annotations

import logging
import os
from typing import TypeVar

from loguru import logger

from doaction.action import Action

T = TypeVar("T")
S = TypeVar("S")

TRACE_ENV_VAR = "DOACTION_TRACE"
TRACE_LEVEL_ENV_VAR = "DOACTION_TRACE_LEVEL"
DEFAULT_TRACE_LEVEL = "DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})

_log = logging.getLogger(__name__)

trace_logger = logger.bind(component="doaction.trace")


def trace_enabled() -> bool:
    """Return whether ``DOACTION_TRACE`` asks for tracing."""

    return os.environ.get(TRACE_ENV_VAR, "").strip().lower() in _TRUTHY


def trace_level() -> str:
    """Return the loguru level named by ``DOACTION_TRACE_LEVEL``.

    Unknown level names fall back to ``DEBUG`` with a warning.
    """

    name = os.environ.get(TRACE_LEVEL_ENV_VAR, DEFAULT_TRACE_LEVEL).strip().upper()
    if not name:
        return DEFAULT_TRACE_LEVEL
    try:
        logger.level(name)
    except ValueError:
        _log.warning(
            "Unknown %s=%r; tracing at %s instead", TRACE_LEVEL_ENV_VAR, name, DEFAULT_TRACE_LEVEL
        )
        return DEFAULT_TRACE_LEVEL
    return name


def traced(action: Action[T, S], label: str, *, enabled: bool | None = None) -> Action[T, S]:
    """Wrap ``action`` so each run logs its input state, output state and result.

    When tracing is disabled the action is returned unchanged.
    """

    if not isinstance(action, Action):
        raise TypeError(f"traced expects an Action; got {type(action).__name__}")
    if enabled is None:
        enabled = trace_enabled()
    if not enabled:
        return action

    level = trace_level()

    def step(state: S) -> tuple[S, T]:
        trace_logger.log(level, "{} <- state={!r}", label, state)
        try:
            new_state, result = action.run(state)
        except Exception:
            trace_logger.opt(exception=True).log(level, "{} raised", label)
            raise
        trace_logger.log(level, "{} -> state={!r} result={!r}", label, new_state, result)
        return new_state, result

    return Action(step)


__all__ = ["TRACE_ENV_VAR", "TRACE_LEVEL_ENV_VAR", "trace_enabled", "trace_level", "traced"]
