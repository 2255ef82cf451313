"""Base configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ObjectMeta(BaseModel):
    """Object metadata attached to configuration documents."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Name of the object, used as the cluster name.")
