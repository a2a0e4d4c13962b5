import json

import numpy as np
import pytest

from mocell.experiment.cli import build_parser, main


def test_parser_defaults_are_left_to_the_config_layer():
    args = build_parser().parse_args([])
    assert args.problem is None
    assert args.pop_size is None
    assert args.max_evaluations is None
    assert not args.verbose


def test_cli_runs_and_writes_artifacts(tmp_path):
    out = tmp_path / "run"
    code = main(
        [
            "--problem",
            "zdt1",
            "--n-var",
            "4",
            "--pop-size",
            "9",
            "--archive-size",
            "5",
            "--max-evaluations",
            "45",
            "--seed",
            "1",
            "--output",
            str(out),
        ]
    )
    assert code == 0
    fun = np.loadtxt(out / "FUN.tsv", delimiter="\t", ndmin=2)
    assert 1 <= fun.shape[0] <= 5
    metadata = json.loads((out / "metadata.json").read_text(encoding="utf-8"))
    assert metadata["config"]["archive_size"] == 5
    assert metadata["evaluations"] == 45


def test_cli_reads_run_spec_and_flags_take_precedence(tmp_path):
    spec = tmp_path / "run.yaml"
    out = tmp_path / "from-spec"
    spec.write_text(
        "problem: schaffer\n"
        f"output: {out.as_posix()}\n"
        "seed: 4\n"
        "mocell:\n"
        "  pop_size: 9\n"
        "  archive_size: 4\n"
        "  max_evaluations: 5000\n",
        encoding="utf-8",
    )
    assert main(["--config", str(spec), "--max-generations", "2", "--max-evaluations", "1000"]) == 0
    metadata = json.loads((out / "metadata.json").read_text(encoding="utf-8"))
    assert metadata["problem"] == "schaffer"
    assert metadata["seed"] == 4
    assert metadata["generations"] == 2
    assert metadata["config"]["max_evaluations"] == 1000


def test_cli_reports_configuration_errors():
    assert main(["--problem", "schaffer", "--n-var", "3", "--max-evaluations", "10"]) == 1
    assert main(["--pop-size", "10", "--max-evaluations", "10"]) == 1
    assert main(["--config", "does-not-exist.yaml"]) == 1


def test_cli_rejects_unknown_problem():
    with pytest.raises(SystemExit):
        main(["--problem", "nope"])


def test_cli_reports_non_integral_sizes_from_run_spec(tmp_path):
    spec = tmp_path / "bad.yaml"
    spec.write_text("mocell:\n  pop_size: nine\n  archive_size: 4.5\n", encoding="utf-8")
    assert main(["--config", str(spec)]) == 1
