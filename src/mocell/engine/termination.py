from __future__ import annotations

from mocell.exceptions import ConfigurationError


class StoppingCondition:
    """Stop once the evaluation budget or the generation budget is exhausted.

    Checked by the engine between sweeps only, so the last sweep may overshoot
    ``max_evaluations`` by up to ``pop_size - 1`` evaluations.
    """

    def __init__(self, max_evaluations: int | None = None, max_generations: int | None = None) -> None:
        if max_evaluations is None and max_generations is None:
            raise ConfigurationError(
                "No stopping condition configured.",
                suggestion="Set max_evaluations and/or max_generations",
            )
        if max_evaluations is not None and max_evaluations <= 0:
            raise ConfigurationError(f"max_evaluations must be positive, got {max_evaluations}.")
        if max_generations is not None and max_generations < 0:
            raise ConfigurationError(f"max_generations must be non-negative, got {max_generations}.")
        self.max_evaluations = max_evaluations
        self.max_generations = max_generations

    def __call__(self, evaluations: int, generations: int) -> bool:
        if self.max_evaluations is not None and evaluations >= self.max_evaluations:
            return True
        return self.max_generations is not None and generations >= self.max_generations

    def __repr__(self) -> str:
        return f"StoppingCondition(max_evaluations={self.max_evaluations}, max_generations={self.max_generations})"


__all__ = ["StoppingCondition"]
