"""Shared fixtures for infraid tests."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from infraid.core.context import GenerationContext, reset_process_context


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    path = tmp_path / "installconfig"
    path.mkdir()
    return path


@pytest.fixture
def context(work_dir: Path) -> GenerationContext:
    """Context isolated from the process environment."""
    return GenerationContext(environ={}, work_dir=work_dir, export_env=True, rng=random.Random(1234))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, work_dir: Path):
    """Strip process-level overrides and run from an empty working directory."""
    for name in ("INFRA_ID", "INFRA_ID_SUFFIX"):
        # setenv first so the undo removes values written during the test
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(work_dir)
    reset_process_context()
    yield
    reset_process_context()
