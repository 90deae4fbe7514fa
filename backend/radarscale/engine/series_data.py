"""SeriesData: columnar value store behind one radar series.

One row per data item, one column per indicator dimension. Missing values
are stored as nan and ignored by extent queries.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray


class SeriesData:
    def __init__(
        self,
        rows: Sequence[Sequence[float | None]],
        dimensions: Sequence[str],
        names: Sequence[str] | None = None,
    ) -> None:
        self.dimensions = list(dimensions)
        self.names = list(names) if names is not None else [""] * len(rows)
        self._dim_index = {dim: i for i, dim in enumerate(self.dimensions)}

        width = len(self.dimensions)
        values = np.full((len(rows), width), np.nan, dtype=np.float64)
        for row_idx, row in enumerate(rows):
            for col_idx, value in enumerate(list(row)[:width]):
                if value is not None:
                    values[row_idx, col_idx] = value
        self._values: NDArray[np.float64] = values

    @classmethod
    def from_indicator_rows(
        cls,
        rows: Sequence[Sequence[float | None]],
        names: Sequence[str] | None = None,
    ) -> SeriesData:
        """Build a store whose columns are ``indicator_0 .. indicator_{n-1}``."""
        width = max((len(r) for r in rows), default=0)
        dims = [f"indicator_{i}" for i in range(width)]
        return cls(rows, dims, names)

    def map_dimension(self, dim: str) -> int | None:
        """Column index for a dimension name, or None when the series lacks it."""
        return self._dim_index.get(dim)

    def count(self) -> int:
        return self._values.shape[0]

    def get(self, column: int | None, row: int) -> float:
        if column is None or column >= self._values.shape[1]:
            return float("nan")
        return float(self._values[row, column])

    def get_approximate_extent(self, column: int | None) -> list[float]:
        """[min, max] of a column ignoring nan; [inf, -inf] when there is nothing."""
        if column is None or column >= self._values.shape[1]:
            return [float("inf"), float("-inf")]
        col = self._values[:, column]
        col = col[~np.isnan(col)]
        if col.size == 0:
            return [float("inf"), float("-inf")]
        return [float(col.min()), float(col.max())]
