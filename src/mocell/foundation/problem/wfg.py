"""
WFG4 from the WFG toolkit.

Reference: S. Huband, L. Barone, L. While, P. Hingston, "A Scalable
Multi-objective Test Problem Toolkit", EMO 2005.

Vectorized NumPy implementation of the normalise -> t1 (multi-modal shift)
-> t2 (weighted-sum reduction) -> concave shape pipeline.
"""

from __future__ import annotations

import numpy as np

from .base import Problem


def _correct_to_01(a: np.ndarray) -> np.ndarray:
    return np.clip(a, 0.0, 1.0)


def s_multi(y: np.ndarray, A: int, B: float, C: float) -> np.ndarray:
    tmp1 = np.abs(y - C) / (2.0 * (np.floor(C - y) + C))
    tmp2 = (4.0 * A + 2.0) * np.pi * (0.5 - tmp1)
    return _correct_to_01((1.0 + np.cos(tmp2) + 4.0 * B * tmp1**2) / (B + 2.0))


def r_sum(y: np.ndarray, w: np.ndarray) -> np.ndarray:
    return _correct_to_01(y @ w / np.sum(w))


def concave(x: np.ndarray, m: int) -> np.ndarray:
    """Concave shape function h_m for a (N, M) matrix of position values, m in 1..M."""
    M = x.shape[1]
    h = np.ones(x.shape[0])
    for i in range(M - m):
        h = h * np.sin(x[:, i] * np.pi / 2.0)
    if m != 1:
        h = h * np.cos(x[:, M - m] * np.pi / 2.0)
    return _correct_to_01(h)


class WFG4Problem(Problem):
    """WFG4 with ``k`` position parameters, ``l`` distance parameters and ``n_obj`` objectives."""

    name = "wfg4"

    def __init__(self, k: int = 2, l: int = 4, n_obj: int = 2) -> None:  # noqa: E741
        if n_obj < 2:
            raise ValueError("WFG problems need at least two objectives.")
        if k <= 0 or k % (n_obj - 1) != 0:
            raise ValueError("k must be a positive multiple of (n_obj - 1).")
        if l <= 0:
            raise ValueError("l must be positive.")
        self.k = int(k)
        self.l = int(l)
        self.n_obj = int(n_obj)
        self.n_var = self.k + self.l
        self.xl = 0.0
        self.xu = 2.0 * np.arange(1, self.n_var + 1, dtype=float)
        self.d = 1.0
        self.s = 2.0 * np.arange(1, self.n_obj + 1, dtype=float)
        self.a = np.ones(self.n_obj - 1)

    def _t1(self, y: np.ndarray) -> np.ndarray:
        return s_multi(y, 30, 10.0, 0.35)

    def _t2(self, y: np.ndarray) -> np.ndarray:
        M, k = self.n_obj, self.k
        out = np.empty((y.shape[0], M))
        for i in range(1, M):
            head = (i - 1) * k // (M - 1)
            tail = i * k // (M - 1)
            out[:, i - 1] = r_sum(y[:, head:tail], np.ones(tail - head))
        out[:, M - 1] = r_sum(y[:, k:], np.ones(self.n_var - k))
        return out

    def _calculate_x(self, t: np.ndarray) -> np.ndarray:
        x = np.empty_like(t)
        last = t[:, -1:]
        x[:, :-1] = np.maximum(last, self.a) * (t[:, :-1] - 0.5) + 0.5
        x[:, -1] = t[:, -1]
        return x

    def objectives(self, X: np.ndarray) -> np.ndarray:
        y = _correct_to_01(X / self.xu)
        y = self._t1(y)
        t = self._t2(y)
        x = self._calculate_x(t)
        F = np.empty((X.shape[0], self.n_obj))
        for m in range(1, self.n_obj + 1):
            F[:, m - 1] = self.d * x[:, -1] + self.s[m - 1] * concave(x, m)
        return F


__all__ = ["WFG4Problem", "concave", "r_sum", "s_multi"]
