"""
Experiment layer: run specs, the runner, result persistence and the CLI.
"""

from .io import ensure_dir, load_front, write_front, write_metadata
from .loader import config_from_spec, load_run_spec, validate_run_spec
from .runner import ExperimentResult, compute_indicators, hypervolume_reference, run_experiment

__all__ = [
    "ExperimentResult",
    "compute_indicators",
    "config_from_spec",
    "ensure_dir",
    "hypervolume_reference",
    "load_front",
    "load_run_spec",
    "run_experiment",
    "validate_run_spec",
    "write_front",
    "write_metadata",
]
