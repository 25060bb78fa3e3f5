# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from unittest.mock import patch

from click.testing import CliRunner

from pathgc_lib.core.config import CFG
from pathgc_lib.core.error import ParameterError
from pathgc_lib.prepare.cli import prepare
from pathgc_lib.step import PathGCStep


def test_prepare_creates_step_file(tmp_path):
    step_file = tmp_path / "step.yaml"

    runner = CliRunner()
    result = runner.invoke(
        prepare,
        [
            str(step_file),
            "/wd/job1/stats*",
            "/wd/job1/hfiles",
            "--job-id",
            "job1",
            "--name",
            "Cleanup",
        ],
    )

    assert result.exit_code == 0

    step = PathGCStep.fromFile(step_file)
    assert step.getDeletePaths() == ["/wd/job1/stats*", "/wd/job1/hfiles"]
    assert step.getJobId() == "job1"
    assert step.getName() == "Cleanup"


def test_prepare_rejects_path_with_comma(tmp_path):
    step_file = tmp_path / "step.yaml"

    runner = CliRunner()
    result = runner.invoke(prepare, [str(step_file), "/wd/a,b", "--job-id", "job1"])

    assert result.exit_code == CFG.exit_codes.default
    assert not step_file.exists()


def test_prepare_requires_job_id(tmp_path):
    runner = CliRunner()
    result = runner.invoke(prepare, [str(tmp_path / "step.yaml"), "/wd/a"])

    assert result.exit_code == 2


def test_prepare_requires_paths(tmp_path):
    runner = CliRunner()
    result = runner.invoke(prepare, [str(tmp_path / "step.yaml"), "--job-id", "x"])

    assert result.exit_code == 2


def test_prepare_unwritable_step_file(tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        prepare,
        [str(tmp_path / "missing" / "step.yaml"), "/wd/a", "--job-id", "job1"],
    )

    assert result.exit_code == CFG.exit_codes.default


@patch("pathgc_lib.prepare.cli.PathGCStep.toFile")
def test_prepare_error_exits_with_exception_exit_code(
    mock_to_file, tmp_path, monkeypatch
):
    monkeypatch.setattr(ParameterError, "exit_code", 65)
    mock_to_file.side_effect = ParameterError("cannot write")

    runner = CliRunner()
    result = runner.invoke(
        prepare, [str(tmp_path / "step.yaml"), "/wd/a", "--job-id", "job1"]
    )

    assert result.exit_code == 65
