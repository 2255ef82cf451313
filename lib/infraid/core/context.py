"""Generation context carrying override state for a single run."""

from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, MutableMapping


@dataclass
class GenerationContext:
    """Runtime bookkeeping for identifier generation.

    ``environ`` is the mapping overrides are read from and, when
    ``export_env`` is set, written back to. ``values`` memoizes identifiers
    chosen during this run so repeated generation returns the same result.

    Sharing one context between threads is not synchronized: the lookup and
    write-back of ``INFRA_ID`` can race, last writer wins.
    """

    environ: MutableMapping[str, str] = field(default_factory=dict)
    work_dir: Path = field(default_factory=Path.cwd)
    export_env: bool = False
    rng: random.Random = field(default_factory=random.Random)
    values: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.work_dir = Path(self.work_dir)

    @classmethod
    def from_process(cls, work_dir: Path | None = None) -> "GenerationContext":
        """Build a context bound to ``os.environ`` that exports chosen values."""
        return cls(
            environ=os.environ,
            work_dir=Path(work_dir) if work_dir is not None else Path.cwd(),
            export_env=True,
        )

    def recall(self, name: str) -> str:
        return self.values.get(name, "")

    def remember(self, name: str, value: str) -> None:
        self.values[name] = value
        if self.export_env:
            self.environ[name] = value
        logging.debug("Persisted %s=%s", name, value)


_process_context: GenerationContext | None = None


def process_context() -> GenerationContext:
    """Return the context shared by callers that do not supply their own."""
    global _process_context
    if _process_context is None:
        _process_context = GenerationContext.from_process()
    return _process_context


def reset_process_context() -> None:
    global _process_context
    _process_context = None
