"""Cluster identity record."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Type

from infraid.config import InstallConfig
from infraid.core.context import GenerationContext
from infraid.core.infra import generate_infra_id
from infraid.utils.time import generated_at

# Resources named after the InfraID usually carry suffixes like `-int`, `_ext`
# or `-ctlp`, and most providers cap resource names at about 32 characters.
MAX_LEN = 27


@dataclass(frozen=True)
class ClusterID:
    """Unique identity of a cluster, immutable for the cluster's lifetime."""

    uuid: str
    infra_id: str

    @staticmethod
    def name() -> str:
        return "Cluster ID"

    @staticmethod
    def dependencies() -> List[Type[InstallConfig]]:
        return [InstallConfig]

    @classmethod
    def generate(
        cls,
        install_config: InstallConfig,
        context: GenerationContext | None = None,
        *,
        max_len: int = MAX_LEN,
    ) -> "ClusterID":
        """Derive a new ClusterID from the install config's cluster name."""
        infra_id = generate_infra_id(install_config.cluster_name, max_len, context)
        return cls(uuid=str(uuid.uuid4()), infra_id=infra_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"uuid": self.uuid, "infra_id": self.infra_id}

    def to_state(self) -> Dict[str, Any]:
        """Return the payload persisted for resumed runs."""
        return {**self.to_dict(), "generated_at": generated_at()}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ClusterID":
        return cls(uuid=str(payload["uuid"]), infra_id=str(payload["infra_id"]))
