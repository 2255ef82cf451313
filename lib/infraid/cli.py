"""Command line interface for infraid."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from infraid.config import INSTALL_CONFIG_FILENAME, InstallConfig
from infraid.core.cluster import MAX_LEN, ClusterID
from infraid.core.context import GenerationContext
from infraid.errors import InvalidInputError
from infraid.utils import load_json_file, normalize_string, write_state

STATE_DIRNAME = ".state"
STATE_FILENAME = "cluster-id.json"


def _state_path(install_dir: Path) -> Path:
    return install_dir / STATE_DIRNAME / STATE_FILENAME


def _load_install_config(install_dir: Path) -> InstallConfig:
    config_path = install_dir / INSTALL_CONFIG_FILENAME
    if not config_path.exists():
        raise click.ClickException(f"Install config not found at {config_path}.")
    try:
        return InstallConfig.load(config_path)
    except (ValidationError, yaml.YAMLError) as exc:
        raise click.ClickException(f"Invalid install config {config_path}: {exc}") from exc


def _load_state(state_path: Path) -> ClusterID:
    try:
        return ClusterID.from_dict(load_json_file(state_path))
    except (json.JSONDecodeError, KeyError, TypeError) as exc:
        raise click.ClickException(f"Failed to parse state file {state_path}: {exc}") from exc


def _generate_cluster_id(install_dir: Path, max_length: int, resume: bool) -> ClusterID:
    state_path = _state_path(install_dir)
    if state_path.exists():
        if not resume:
            raise click.ClickException(
                f"Cluster ID already generated in {state_path}. Use --resume to reuse it."
            )
        cluster_id = _load_state(state_path)
        logging.info("Reusing cluster ID from %s", state_path)
        return cluster_id

    install_config = _load_install_config(install_dir)
    context = GenerationContext.from_process(work_dir=install_dir)
    try:
        cluster_id = ClusterID.generate(install_config, context, max_len=max_length)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    write_state(state_path, cluster_id.to_state())
    logging.info("Wrote cluster ID to %s", state_path)
    return cluster_id


@click.group()
def app() -> None:
    """Derive infrastructure identifiers for provisioned clusters."""


@app.command()
@click.argument("value", type=str)
def normalize(value: str) -> None:
    """Print VALUE normalized into an identifier fragment."""
    try:
        click.echo(normalize_string(value))
    except InvalidInputError as exc:
        raise click.ClickException(str(exc)) from exc


@app.command()
@click.argument(
    "install_dir",
    type=click.Path(path_type=Path, exists=True, file_okay=False, dir_okay=True, resolve_path=True),
)
@click.option(
    "--max-length",
    type=click.IntRange(min=1),
    default=MAX_LEN,
    show_default=True,
    help="Maximum length of the generated infrastructure ID.",
)
@click.option(
    "--log-level",
    type=click.Choice(["warning", "info", "debug"], case_sensitive=False),
    default="warning",
    help="Set logging verbosity (warning/info/debug).",
)
@click.option(
    "--resume/--no-resume",
    default=False,
    help="Reuse a cluster ID previously generated for INSTALL_DIR.",
)
def generate(install_dir: Path, max_length: int, log_level: str, resume: bool) -> None:
    """Generate the cluster ID for the install config in INSTALL_DIR."""
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.WARNING))
    cluster_id = _generate_cluster_id(install_dir, max_length, resume)
    click.echo(json.dumps(cluster_id.to_dict(), indent=2))


@app.command()
def version() -> None:
    """Print infraid version."""
    from infraid import __version__

    click.echo(__version__)


if __name__ == "__main__":
    app(prog_name="infraid")
