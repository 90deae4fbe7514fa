"""IndicatorAxis: one radial spoke of the radar."""

from __future__ import annotations

from radarscale.engine.chart_model import IndicatorModel
from radarscale.engine.scale import IntervalScale
from radarscale.utils.number import linear_map


class IndicatorAxis:
    """A spoke with its own linear scale, pixel-radius extent and angle."""

    def __init__(self, dim: str, scale: IntervalScale, model: IndicatorModel) -> None:
        self.dim = dim
        self.scale = scale
        self.model = model
        self.name = model.name
        self.angle = 0.0
        self._extent = [0.0, 0.0]

    def get_extent(self) -> list[float]:
        return list(self._extent)

    def set_extent(self, start: float, end: float) -> None:
        self._extent = [start, end]

    def data_to_coord(self, value: float) -> float:
        """Radial pixel distance for a data value. Values outside the extent extrapolate."""
        return linear_map(self.scale.normalize(value), [0, 1], self._extent)

    def coord_to_data(self, coord: float) -> float:
        return self.scale.scale(linear_map(coord, self._extent, [0, 1]))

    def __repr__(self) -> str:
        return f"IndicatorAxis(dim={self.dim!r}, name={self.name!r}, angle={self.angle:.4f})"
