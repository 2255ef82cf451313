"""Infrastructure identifier derivation for provisioned clusters."""

from __future__ import annotations

__version__ = "0.1.0"

from .core.cluster import ClusterID
from .core.context import GenerationContext
from .core.infra import generate_infra_id
from .errors import InfraIDError, InvalidInputError
from .utils.naming import normalize_string

__all__ = [
    "ClusterID",
    "GenerationContext",
    "InfraIDError",
    "InvalidInputError",
    "generate_infra_id",
    "normalize_string",
]
