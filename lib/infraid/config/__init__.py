"""Configuration models for infraid."""

from __future__ import annotations

from .base import ObjectMeta
from .install import INSTALL_CONFIG_FILENAME, InstallConfig

__all__ = ["INSTALL_CONFIG_FILENAME", "InstallConfig", "ObjectMeta"]
