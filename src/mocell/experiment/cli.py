from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from mocell.exceptions import MOCellError
from mocell.foundation.problem import available_problem_names
from mocell.logging import configure_mocell_logging

from .loader import config_from_spec, load_run_spec
from .runner import run_experiment

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mocell",
        description="Run the asynchronous cellular MOEA (MOCell) on a benchmark problem.",
    )
    parser.add_argument(
        "--problem",
        choices=available_problem_names(),
        default=None,
        help="Benchmark problem (default: kursawe).",
    )
    parser.add_argument("--n-var", type=int, default=None, help="Number of decision variables, when the problem takes it.")
    parser.add_argument("--pop-size", type=int, default=None, help="Cells in the toroidal grid (default: 100).")
    parser.add_argument("--archive-size", type=int, default=None, help="External archive capacity (default: 100).")
    parser.add_argument("--max-evaluations", type=int, default=None, help="Evaluation budget (default: 25000).")
    parser.add_argument("--max-generations", type=int, default=None, help="Optional sweep budget.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument(
        "--neighborhood",
        choices=["c9", "l5"],
        default=None,
        help="c9: 8 surrounding cells; l5: north, south, east, west.",
    )
    parser.add_argument("--output", default=None, help="Directory for FUN.tsv, VAR.tsv and metadata.json.")
    parser.add_argument("--reference-front", default=None, help="Reference front file for GD/IGD/HV.")
    parser.add_argument("--config", default=None, help="YAML or JSON run spec; command-line flags take precedence.")
    parser.add_argument(
        "--eval-backend",
        choices=["serial", "multiprocessing"],
        default=None,
        help="Evaluation backend (default: serial).",
    )
    parser.add_argument("--n-workers", type=int, default=None, help="Worker processes for the multiprocessing backend.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-generation progress.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_mocell_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        spec = load_run_spec(args.config) if args.config else {}
        config = config_from_spec(
            spec,
            pop_size=args.pop_size,
            archive_size=args.archive_size,
            max_evaluations=args.max_evaluations,
            max_generations=args.max_generations,
            neighborhood=args.neighborhood,
            eval_backend=args.eval_backend,
            n_workers=args.n_workers,
        )
        problem_params = dict(spec.get("problem_params") or {})
        if args.n_var is not None:
            problem_params["n_var"] = args.n_var
        seed = args.seed if args.seed is not None else spec.get("seed")
        run_experiment(
            args.problem or spec.get("problem") or "kursawe",
            config,
            seed=seed,
            problem_params=problem_params,
            output_dir=args.output or spec.get("output"),
            reference_front=args.reference_front or spec.get("reference_front"),
        )
    except (MOCellError, FileNotFoundError) as exc:
        _logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
