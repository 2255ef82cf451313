"""Reading install configs and reading/writing state files."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

import yaml


def load_yaml_file(path: Path) -> Any:
    """Load a YAML file and return the parsed object."""
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def load_json_file(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def write_state(path: Path, payload: Mapping[str, Any]) -> None:
    """Write a state file, replacing any previous copy in one step.

    The payload is written to a sibling ``.tmp`` file and then moved into place.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as handle:
        json.dump(dict(payload), handle, indent=2, sort_keys=True)
        handle.write("\n")
    os.replace(tmp_path, path)
