from __future__ import annotations

import logging
import math
import os
from concurrent.futures import ProcessPoolExecutor
from typing import Any, Optional

import numpy as np

from mocell.exceptions import ConfigurationError, EvaluationError
from mocell.foundation.problem.base import evaluate_arrays, write_evaluation
from mocell.foundation.solution import Solution


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _eval_chunk(problem, X_chunk: np.ndarray) -> tuple[np.ndarray, Optional[np.ndarray]]:
    """Worker helper to evaluate a chunk; kept at module level for pickling."""
    return evaluate_arrays(problem, X_chunk)


def _check_outputs(problem, F: np.ndarray, G: np.ndarray | None, n: int) -> None:
    F = np.asarray(F)
    if F.shape != (n, problem.n_obj):
        raise EvaluationError(f"Problem returned objectives of shape {F.shape}, expected {(n, problem.n_obj)}.")
    if not np.all(np.isfinite(F)):
        raise EvaluationError("Problem returned non-finite objective values.", solution=F)
    if G is not None and np.asarray(G).shape[0] != n:
        raise EvaluationError(f"Problem returned constraints for {np.asarray(G).shape[0]} solutions, expected {n}.")


class SerialEvaluator:
    """Synchronous in-process evaluation (default)."""

    def evaluate(self, solutions: list[Solution], problem: Any) -> None:
        if not solutions:
            return
        X = np.vstack([s.variables for s in solutions])
        try:
            F, G = evaluate_arrays(problem, X)
        except EvaluationError:
            raise
        except Exception as exc:
            raise EvaluationError(f"Evaluation of {len(solutions)} solution(s) failed: {exc}", solution=X) from exc
        _check_outputs(problem, F, G, len(solutions))
        write_evaluation(solutions, F, G)

    def close(self) -> None:
        return None


class MultiprocessingEvaluator:
    """
    Parallel evaluation using a process pool.

    Notes:
        - Requires the problem instance to be picklable.
        - Results are reassembled in submission order, so callers observe the
          same outcome as with SerialEvaluator.
        - Batches of a single solution are evaluated in-process. MOCell evaluates
          one offspring per cell update, so within a run only the initial
          population is spread over the pool.
    """

    def __init__(self, n_workers: Optional[int] = None, chunk_size: Optional[int] = None):
        self.n_workers = max(1, n_workers or os.cpu_count() or 1)
        self.chunk_size = chunk_size
        self._executor: ProcessPoolExecutor | None = None

    def _pool(self) -> ProcessPoolExecutor:
        if self._executor is None:
            _logger().debug("Starting evaluation pool with %d workers", self.n_workers)
            self._executor = ProcessPoolExecutor(max_workers=self.n_workers)
        return self._executor

    def evaluate(self, solutions: list[Solution], problem: Any) -> None:
        n = len(solutions)
        if self.n_workers <= 1 or n <= 1:
            SerialEvaluator().evaluate(solutions, problem)
            return

        X = np.vstack([s.variables for s in solutions])
        if self.chunk_size is not None and self.chunk_size > 0:
            chunk_size = self.chunk_size
        else:
            chunk_size = max(1, math.ceil(n / self.n_workers))
        slices = [(i, min(i + chunk_size, n)) for i in range(0, n, chunk_size)]

        pool = self._pool()
        futures = [pool.submit(_eval_chunk, problem, X[start:end]) for start, end in slices]
        F_parts: list[np.ndarray] = []
        G_parts: list[np.ndarray | None] = []
        try:
            for fut in futures:
                F_chunk, G_chunk = fut.result()
                F_parts.append(np.asarray(F_chunk, dtype=float))
                G_parts.append(None if G_chunk is None else np.asarray(G_chunk, dtype=float))
        except EvaluationError:
            raise
        except Exception as exc:
            raise EvaluationError(f"Parallel evaluation of {n} solution(s) failed: {exc}", solution=X) from exc

        F = np.vstack(F_parts)
        G = None if any(part is None for part in G_parts) else np.vstack(G_parts)
        _check_outputs(problem, F, G, n)
        write_evaluation(solutions, F, G)

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None


def resolve_evaluator(name: str | None, *, n_workers: Optional[int] = None, chunk_size: Optional[int] = None):
    key = (name or "serial").lower()
    if key == "serial":
        return SerialEvaluator()
    if key == "multiprocessing":
        return MultiprocessingEvaluator(n_workers=n_workers, chunk_size=chunk_size)
    raise ConfigurationError(
        f"Unknown evaluation backend '{name}'.",
        suggestion="Available backends: serial, multiprocessing",
    )


__all__ = ["MultiprocessingEvaluator", "SerialEvaluator", "resolve_evaluator"]
