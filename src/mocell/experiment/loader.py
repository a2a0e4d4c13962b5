"""
Run-spec loading shared by the CLI and programmatic entrypoints.

A run spec is a YAML or JSON mapping::

    problem: zdt1
    problem_params: {n_var: 30}
    seed: 1
    output: results/zdt1
    reference_front: fronts/ZDT1.pf
    mocell:
      pop_size: 100
      archive_size: 100
      max_evaluations: 25000
      crossover: {method: sbx, prob: 0.9, eta: 20}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from mocell.engine.config import MOCellConfigData
from mocell.exceptions import ConfigurationError

RUN_SPEC_KEYS = frozenset({"problem", "problem_params", "seed", "output", "reference_front", "mocell"})
CONFIG_DEFAULTS: Dict[str, Any] = {"pop_size": 100, "archive_size": 100}


def load_run_spec(path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML or JSON run specification.
    """
    spec_path = Path(path).expanduser().resolve()
    if not spec_path.exists():
        raise FileNotFoundError(f"Config file '{spec_path}' does not exist.")
    suffix = spec_path.suffix.lower()
    with spec_path.open("r", encoding="utf-8") as fh:
        try:
            if suffix in {".yaml", ".yml"}:
                raw = yaml.safe_load(fh)
            else:
                raw = json.load(fh)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Could not parse run spec '{spec_path}': {exc}") from exc
    return validate_run_spec(raw or {}, source=str(spec_path))


def validate_run_spec(raw: Any, *, source: str = "<run spec>") -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Run spec {source} must be a mapping (YAML/JSON object).")
    unknown = sorted(set(raw) - RUN_SPEC_KEYS)
    if unknown:
        raise ConfigurationError(
            f"Unknown run spec keys in {source}: {', '.join(unknown)}.",
            suggestion=f"Valid keys: {', '.join(sorted(RUN_SPEC_KEYS))}",
        )
    for block in ("problem_params", "mocell"):
        value = raw.get(block)
        if value is not None and not isinstance(value, dict):
            raise ConfigurationError(f"Run spec '{block}' must be a mapping when provided.")
    return dict(raw)


def config_from_spec(spec: Dict[str, Any], **overrides: Any) -> MOCellConfigData:
    """Merge defaults, the spec's ``mocell`` block and non-None overrides into a frozen config."""
    data = dict(CONFIG_DEFAULTS)
    data.update(spec.get("mocell") or {})
    data.update({k: v for k, v in overrides.items() if v is not None})
    return MOCellConfigData.from_dict(data)


__all__ = ["config_from_spec", "load_run_spec", "validate_run_spec"]
