"""
Experiment runner: build a problem and a MOCell engine, run it, persist the front.

This keeps the algorithm run loop isolated from persistence and reporting
concerns; the engine itself performs no I/O.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np

from mocell.engine.config import MOCellConfig, MOCellConfigData
from mocell.engine.mocell import MOCell
from mocell.engine.result import MOCellResult
from mocell.foundation.metrics import (
    generational_distance,
    hypervolume,
    inverted_generational_distance,
    pareto_filter,
)
from mocell.foundation.problem import make_problem

from .io import load_front, write_front, write_metadata


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass
class ExperimentResult:
    """Engine result plus timing, indicators and the artifacts written."""

    result: MOCellResult
    elapsed_ms: float
    problem: str
    seed: int | None
    indicators: dict[str, float] = field(default_factory=dict)
    output_dir: Path | None = None
    artifacts: dict[str, str] = field(default_factory=dict)


def hypervolume_reference(reference_front: np.ndarray, offset: float = 0.1) -> np.ndarray:
    """Nadir of the reference front pushed out by ``offset`` times its extent."""
    ref = np.asarray(reference_front, dtype=float)
    upper = ref.max(axis=0)
    span = upper - ref.min(axis=0)
    span[span <= 0.0] = 1.0
    return upper + offset * span


def compute_indicators(F: np.ndarray, reference_front: np.ndarray) -> dict[str, float]:
    F = np.asarray(F, dtype=float)
    reference_front = np.asarray(reference_front, dtype=float)
    if F.size == 0:
        return {"gd": float("inf"), "igd": float("inf")}
    indicators = {
        "gd": generational_distance(F, reference_front),
        "igd": inverted_generational_distance(F, reference_front),
    }
    if F.shape[1] == 2:
        ref_point = hypervolume_reference(reference_front)
        hv = hypervolume(pareto_filter(F), ref_point)
        hv_ref = hypervolume(pareto_filter(reference_front), ref_point)
        indicators["hv"] = hv
        if hv_ref > 0.0:
            indicators["hv_ratio"] = hv / hv_ref
    return indicators


def run_experiment(
    problem: str | Any,
    config: MOCellConfigData | MOCellConfig,
    *,
    seed: int | None = None,
    problem_params: dict[str, Any] | None = None,
    output_dir: str | Path | None = None,
    reference_front: str | Path | np.ndarray | None = None,
    observer: Any = None,
) -> ExperimentResult:
    """
    Run MOCell once on ``problem`` (a registry name or a problem instance).

    When ``output_dir`` is given, FUN.tsv, VAR.tsv and metadata.json are
    written there. When ``reference_front`` is given (array or file path),
    GD, IGD and, for two objectives, hypervolume are computed.
    """
    if isinstance(config, MOCellConfig):
        config = config.fixed()
    if isinstance(problem, str):
        problem_name = problem
        problem = make_problem(problem, **(problem_params or {}))
    else:
        problem_name = getattr(problem, "name", type(problem).__name__)

    engine = MOCell(config, problem, observer=observer)
    _logger().info(
        "Running MOCell on %s (pop_size=%d, archive_size=%d, max_evaluations=%s, seed=%s)",
        problem_name,
        config.pop_size,
        config.archive_size,
        config.max_evaluations,
        seed,
    )
    start = time.perf_counter()
    result = engine.run(seed)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    _logger().info("Total execution time: %.0f ms", elapsed_ms)

    indicators: dict[str, float] = {}
    if reference_front is not None:
        ref = reference_front if isinstance(reference_front, np.ndarray) else load_front(reference_front)
        indicators = compute_indicators(result.F, ref)
        for name, value in indicators.items():
            _logger().info("%s: %.6g", name.upper(), value)

    experiment = ExperimentResult(
        result=result,
        elapsed_ms=elapsed_ms,
        problem=problem_name,
        seed=seed,
        indicators=indicators,
    )
    if output_dir is not None:
        out = Path(output_dir)
        experiment.artifacts = write_front(out, result.X, result.F)
        write_metadata(
            out,
            {
                "problem": problem_name,
                "seed": seed,
                "elapsed_ms": elapsed_ms,
                "evaluations": result.n_eval,
                "generations": result.n_gen,
                "archive_size": len(result),
                "indicators": indicators,
                "config": config.to_dict(),
            },
        )
        experiment.output_dir = out
        _logger().info("Objectives values have been written to %s", out / experiment.artifacts["fun"])
        _logger().info("Variables values have been written to %s", out / experiment.artifacts["var"])
    return experiment


__all__ = ["ExperimentResult", "compute_indicators", "hypervolume_reference", "run_experiment"]
