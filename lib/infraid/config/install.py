"""Install configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from infraid.utils.io import load_yaml_file

from .base import ObjectMeta

INSTALL_CONFIG_FILENAME = "install-config.yaml"


class InstallConfig(BaseModel):
    """Install configuration; only the cluster name is consumed here."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_version: Optional[str] = Field(default=None, alias="apiVersion", description="Config schema version.")
    metadata: ObjectMeta
    base_domain: Optional[str] = Field(
        default=None, alias="baseDomain", description="Base DNS domain of the cluster."
    )

    @property
    def cluster_name(self) -> str:
        return self.metadata.name

    @classmethod
    def load(cls, path: Path) -> "InstallConfig":
        raw_config = load_yaml_file(path)
        return cls.model_validate(raw_config or {})
