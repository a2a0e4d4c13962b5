"""Real-coded variation kernels working on plain NumPy vectors."""

from __future__ import annotations

from typing import Tuple

import numpy as np

_EPS = 1.0e-14


def _ensure_bounds(lower, upper) -> Tuple[np.ndarray, np.ndarray]:
    """Validate bounds and return float arrays of identical shape."""
    lower_arr = np.asarray(lower, dtype=float)
    upper_arr = np.asarray(upper, dtype=float)
    if lower_arr.shape != upper_arr.shape:
        raise ValueError("lower and upper bounds must have the same shape.")
    if lower_arr.ndim != 1:
        raise ValueError("Bounds must be one-dimensional arrays.")
    if np.any(lower_arr > upper_arr):
        raise ValueError("Each lower bound must be <= corresponding upper bound.")
    return lower_arr, upper_arr


class SBXKernel:
    """Simulated Binary Crossover on one pair of parent vectors."""

    def __init__(
        self,
        prob_crossover: float = 0.9,
        eta: float = 20.0,
        prob_var: float = 0.5,
        *,
        lower,
        upper,
    ) -> None:
        if not 0.0 <= prob_crossover <= 1.0:
            raise ValueError("prob_crossover must be in [0, 1].")
        if eta < 0.0:
            raise ValueError("eta must be non-negative.")
        self.prob = float(prob_crossover)
        self.eta = float(eta)
        self.prob_var = float(prob_var)
        self.lower, self.upper = _ensure_bounds(lower, upper)

    def _betaq(self, rand: np.ndarray, beta: np.ndarray) -> np.ndarray:
        alpha = 2.0 - np.power(np.maximum(beta, _EPS), -(self.eta + 1.0))
        alpha = np.maximum(alpha, _EPS)
        inv_eta = 1.0 / (self.eta + 1.0)
        return np.where(
            rand <= 1.0 / alpha,
            np.power(rand * alpha, inv_eta),
            np.power(1.0 / (2.0 - rand * alpha), inv_eta),
        )

    def __call__(self, x1: np.ndarray, x2: np.ndarray, rng: np.random.Generator) -> tuple[np.ndarray, np.ndarray]:
        c1 = np.array(x1, dtype=float)
        c2 = np.array(x2, dtype=float)
        if c1.shape != self.lower.shape or c2.shape != self.lower.shape:
            raise ValueError("Bounds dimensionality does not match the individual size.")
        if rng.random() > self.prob:
            return c1, c2

        var_mask = rng.random(c1.shape) <= self.prob_var
        y1 = np.minimum(c1, c2)
        y2 = np.maximum(c1, c2)
        diff = y2 - y1
        active = var_mask & (diff > _EPS)
        if not np.any(active):
            return c1, c2

        rand = rng.random(c1.shape)
        safe = np.where(active, diff, 1.0)
        beta_low = 1.0 + 2.0 * (y1 - self.lower) / safe
        beta_high = 1.0 + 2.0 * (self.upper - y2) / safe
        child_low = 0.5 * ((y1 + y2) - self._betaq(rand, beta_low) * diff)
        child_high = 0.5 * ((y1 + y2) + self._betaq(rand, beta_high) * diff)
        np.clip(child_low, self.lower, self.upper, out=child_low)
        np.clip(child_high, self.lower, self.upper, out=child_high)

        swap = (rng.random(c1.shape) <= 0.5) & active
        new1 = np.where(swap, child_high, child_low)
        new2 = np.where(swap, child_low, child_high)
        c1[active] = new1[active]
        c2[active] = new2[active]
        return c1, c2


class PolynomialMutationKernel:
    """Polynomial mutation of one vector, applied in place."""

    def __init__(self, prob_mutation: float, eta: float = 20.0, *, lower, upper) -> None:
        if not 0.0 <= prob_mutation <= 1.0:
            raise ValueError("prob_mutation must be in [0, 1].")
        self.prob = float(prob_mutation)
        self.eta = float(eta)
        self.lower, self.upper = _ensure_bounds(lower, upper)

    def __call__(self, x: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        if x.shape != self.lower.shape:
            raise ValueError("Bounds dimensionality does not match the individual size.")
        # Two full draws keep RNG consumption independent of how many genes mutate.
        rnd_mask = rng.random(x.shape)
        rnd_delta = rng.random(x.shape)
        mut_pow = 1.0 / (self.eta + 1.0)
        for j in np.flatnonzero(rnd_mask <= self.prob):
            y = x[j]
            yl = self.lower[j]
            yu = self.upper[j]
            if yu <= yl:
                continue
            delta1 = (y - yl) / (yu - yl)
            delta2 = (yu - y) / (yu - yl)
            rnd = rnd_delta[j]
            if rnd <= 0.5:
                xy = 1.0 - delta1
                val = 2.0 * rnd + (1.0 - 2.0 * rnd) * (xy ** (self.eta + 1.0))
                deltaq = val**mut_pow - 1.0
            else:
                xy = 1.0 - delta2
                val = 2.0 * (1.0 - rnd) + 2.0 * (rnd - 0.5) * (xy ** (self.eta + 1.0))
                deltaq = 1.0 - val**mut_pow
            x[j] = min(max(y + deltaq * (yu - yl), yl), yu)
        return x


__all__ = ["PolynomialMutationKernel", "SBXKernel"]
