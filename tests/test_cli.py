"""Tests for the infraid command line interface."""

from __future__ import annotations

import json
import os

from click.testing import CliRunner

from infraid import __version__
from infraid.cli import app


def _write_install_config(install_dir, name="poc"):
    (install_dir / "install-config.yaml").write_text(f"apiVersion: v1\nmetadata:\n  name: {name}\n")


def test_normalize_command():
    result = CliRunner().invoke(app, ["normalize", "qwe.rty.@iop!"])
    assert result.exit_code == 0
    assert result.output == "qwe-rty-iop\n"


def test_normalize_command_rejects_invalid_input():
    result = CliRunner().invoke(app, ["normalize", "!!!"])
    assert result.exit_code == 1
    assert "at least 1 alphanum character" in result.output


def test_version_command():
    result = CliRunner().invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_generate_writes_state(clean_env, work_dir):
    _write_install_config(work_dir, "qwertyuiop")

    result = CliRunner().invoke(app, ["generate", str(work_dir)])
    assert result.exit_code == 0, result.output

    payload = json.loads(result.output)
    assert payload["infra_id"].startswith("qwertyuiop-")
    assert len(payload["infra_id"]) == 16

    stored = json.loads((work_dir / ".state" / "cluster-id.json").read_text())
    assert stored["uuid"] == payload["uuid"]
    assert stored["infra_id"] == payload["infra_id"]
    assert stored["generated_at"].endswith("Z")
    assert not (work_dir / ".state" / "cluster-id.json.tmp").exists()


def test_generate_refuses_existing_state_without_resume(clean_env, work_dir):
    _write_install_config(work_dir)
    runner = CliRunner()
    assert runner.invoke(app, ["generate", str(work_dir)]).exit_code == 0

    result = runner.invoke(app, ["generate", str(work_dir)])
    assert result.exit_code == 1
    assert "--resume" in result.output


def test_generate_resume_reuses_state(clean_env, work_dir):
    _write_install_config(work_dir)
    runner = CliRunner()
    first = json.loads(runner.invoke(app, ["generate", str(work_dir)]).output)

    result = runner.invoke(app, ["generate", str(work_dir), "--resume"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == first


def test_generate_uses_dot_files_in_install_dir(clean_env, work_dir):
    _write_install_config(work_dir)
    (work_dir / ".infra_id_suffix").write_text(".")

    result = CliRunner().invoke(app, ["generate", str(work_dir)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["infra_id"] == "poc-installconfig"
    assert os.environ["INFRA_ID"] == "poc-installconfig"


def test_generate_does_not_leak_written_back_id():
    # runs after the dot-file test above, whose write-back must have been undone
    assert os.environ.get("INFRA_ID") != "poc-installconfig"


def test_generate_honours_max_length(clean_env, work_dir):
    _write_install_config(work_dir, "qwertyuiopasdfghjklzxcvbnm")

    result = CliRunner().invoke(app, ["generate", str(work_dir), "--max-length", "12"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["infra_id"].startswith("qwerty-")


def test_generate_reports_invalid_cluster_name(clean_env, work_dir):
    _write_install_config(work_dir, "'...'")

    result = CliRunner().invoke(app, ["generate", str(work_dir)])
    assert result.exit_code == 1
    assert "at least 1 alphanum character" in result.output
    assert not (work_dir / ".state").exists()


def test_generate_requires_install_config(clean_env, work_dir):
    result = CliRunner().invoke(app, ["generate", str(work_dir)])
    assert result.exit_code == 1
    assert "Install config not found" in result.output


def test_generate_reports_malformed_install_config(clean_env, work_dir):
    (work_dir / "install-config.yaml").write_text("metadata: [unclosed\n")

    result = CliRunner().invoke(app, ["generate", str(work_dir)])
    assert result.exit_code == 1
    assert "Invalid install config" in result.output
    assert isinstance(result.exception, SystemExit)
