"""FastAPI dependency injection."""

from __future__ import annotations

from radarscale.config import Settings, settings
from radarscale.engine.registry import CoordinateSystemRegistry, build_default_registry


def get_settings() -> Settings:
    return settings


def get_registry() -> CoordinateSystemRegistry:
    return build_default_registry()
