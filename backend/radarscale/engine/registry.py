"""Coordinate system registry: maps a type tag to the factory that builds it.

The table is assembled explicitly at start-up; importing a coordinate system
module never registers anything by itself:

    registry = build_default_registry()
    registry.get("radar").factory(chart_model, viewport)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from radarscale.engine.chart_model import ChartModel
    from radarscale.models.options import Viewport

logger = logging.getLogger(__name__)

CoordinateSystemFactory = Callable[["ChartModel", "Viewport"], list[Any]]


@dataclass
class CoordinateSystemSpec:
    type: str
    factory: CoordinateSystemFactory
    dimensions: list[str] = field(default_factory=list)
    description: str = ""


class CoordinateSystemRegistry:
    """Registry of coordinate system factories keyed by type tag."""

    def __init__(self) -> None:
        self._systems: dict[str, CoordinateSystemSpec] = {}

    def register(self, spec: CoordinateSystemSpec) -> None:
        if spec.type in self._systems:
            raise ValueError(f"Duplicate coordinate system type: {spec.type}")
        self._systems[spec.type] = spec
        logger.debug("Registered coordinate system %s", spec.type)

    def get(self, type_: str) -> CoordinateSystemSpec:
        return self._systems[type_]

    def all(self) -> list[CoordinateSystemSpec]:
        return list(self._systems.values())

    @property
    def count(self) -> int:
        return len(self._systems)


def build_default_registry() -> CoordinateSystemRegistry:
    """Registry with every built-in coordinate system."""
    from radarscale.engine.radar import Radar

    registry = CoordinateSystemRegistry()
    registry.register(
        CoordinateSystemSpec(
            type=Radar.type,
            factory=Radar.create,
            dimensions=[],
            description="Polar coordinates over N indicator axes",
        )
    )
    return registry
