"""
Persistence helpers for MOCell run artifacts.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np


def ensure_dir(path: str | Path) -> Path:
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_front(output_dir: str | Path, X: np.ndarray, F: np.ndarray) -> dict[str, str]:
    """
    Save objectives to FUN.tsv and decision variables to VAR.tsv (tab separated). Returns artifact map.
    """
    output_dir = ensure_dir(output_dir)
    fun_path = output_dir / "FUN.tsv"
    var_path = output_dir / "VAR.tsv"
    np.savetxt(fun_path, np.atleast_2d(F) if np.size(F) else np.empty((0, 0)), delimiter="\t")
    np.savetxt(var_path, np.atleast_2d(X) if np.size(X) else np.empty((0, 0)), delimiter="\t")
    return {"fun": fun_path.name, "var": var_path.name}


def write_metadata(output_dir: str | Path, metadata: dict[str, Any]) -> None:
    output_dir = ensure_dir(output_dir)
    with (output_dir / "metadata.json").open("w", encoding="utf-8") as f:
        json.dump(metadata, f, indent=2, sort_keys=True, default=_json_default)


def load_front(path: str | Path) -> np.ndarray:
    """Read a whitespace or tab separated front (one point per row)."""
    path = Path(path).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Reference front '{path}' does not exist.")
    return np.atleast_2d(np.loadtxt(path, dtype=float))


def _json_default(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Path):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


__all__ = ["ensure_dir", "load_front", "write_front", "write_metadata"]
