"""Core identifier generation primitives."""

from __future__ import annotations

from .cluster import MAX_LEN, ClusterID
from .context import GenerationContext, process_context, reset_process_context
from .infra import INFRA_ID_ENV, INFRA_ID_SUFFIX_ENV, RANDOM_LEN, generate_infra_id

__all__ = [
    "ClusterID",
    "GenerationContext",
    "INFRA_ID_ENV",
    "INFRA_ID_SUFFIX_ENV",
    "MAX_LEN",
    "RANDOM_LEN",
    "generate_infra_id",
    "process_context",
    "reset_process_context",
]
