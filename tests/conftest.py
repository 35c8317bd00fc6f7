"""
Pytest configuration for doaction tests.

Provides a recorder fixture whose actions log every invocation, so tests can
verify ordering and short-circuit behaviour directly.
"""

from __future__ import annotations

from typing import Any

import pytest

from doaction import Action, Err, Ok, Result


class StepRecorder:
    """Builds integer-state actions that remember when they ran."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def step(self, label: str, value: Any = None, *, delta: int = 1) -> Action[Any, int]:
        """Action adding ``delta`` to the state and returning ``value``."""

        def run_step(state: int) -> tuple[int, Any]:
            self.calls.append(label)
            return state + delta, value

        return Action(run_step)

    def ok(self, label: str, value: Any, *, delta: int = 1) -> Action[Result[Any, Any], int]:
        return self.step(label, Ok(value), delta=delta)

    def err(self, label: str, error: Any, *, delta: int = 1) -> Action[Result[Any, Any], int]:
        return self.step(label, Err(error), delta=delta)


@pytest.fixture
def recorder() -> StepRecorder:
    return StepRecorder()


@pytest.fixture
def sample_states() -> list[Any]:
    """A handful of unrelated states used to check behaviour for all inputs."""

    return [0, 4, -7, "text", (1, 2), None]
