"""Coordinate system manager: creates and updates every registered coordinate system."""

from __future__ import annotations

import logging
import time
from typing import Any

from radarscale.engine.chart_model import ChartModel
from radarscale.engine.registry import CoordinateSystemRegistry, build_default_registry
from radarscale.models.options import Viewport

logger = logging.getLogger(__name__)


class CoordinateSystemManager:
    """Owns the coordinate systems of one chart."""

    def __init__(self, registry: CoordinateSystemRegistry | None = None) -> None:
        self.registry = registry or build_default_registry()
        self._coordinate_systems: list[Any] = []

    def create(self, chart_model: ChartModel, viewport: Viewport) -> list[Any]:
        """Run every registered factory; replaces anything created before."""
        systems: list[Any] = []
        for spec in self.registry.all():
            created = spec.factory(chart_model, viewport) or []
            logger.debug("Created %d %s coordinate system(s)", len(created), spec.type)
            systems.extend(created)
        self._coordinate_systems = systems
        return systems

    def update(self, chart_model: ChartModel, viewport: Viewport) -> None:
        """Refit every coordinate system to the chart's current data."""
        start = time.perf_counter()
        for cs in self._coordinate_systems:
            cs.update(chart_model, viewport)
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Updated %d coordinate system(s) in %.1fms",
            len(self._coordinate_systems),
            elapsed,
        )

    def get_coordinate_systems(self) -> list[Any]:
        return list(self._coordinate_systems)


def build_chart(
    chart_model: ChartModel,
    viewport: Viewport,
    registry: CoordinateSystemRegistry | None = None,
) -> CoordinateSystemManager:
    """Create and fit all coordinate systems of a chart in one step."""
    manager = CoordinateSystemManager(registry)
    manager.create(chart_model, viewport)
    manager.update(chart_model, viewport)
    return manager
