from __future__ import annotations

from typing import Any, Protocol

from mocell.foundation.solution import Solution


class Evaluator(Protocol):
    """Evaluates solutions in place; ``evaluate`` blocks until every result is written back."""

    def evaluate(self, solutions: list[Solution], problem: Any) -> None: ...

    def close(self) -> None:  # pragma: no cover - optional for pooled evaluators
        return None


from .backends import MultiprocessingEvaluator, SerialEvaluator, resolve_evaluator  # noqa: E402

__all__ = ["Evaluator", "MultiprocessingEvaluator", "SerialEvaluator", "resolve_evaluator"]
