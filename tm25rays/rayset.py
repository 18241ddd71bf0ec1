"""Row major storage of ray data and the ray set that pairs it with a header."""

from __future__ import annotations

import math
import random
from array import array
from typing import Iterable, Optional, Sequence

from .header import TM25Header
from .items import RaySetItems, TM25Error

FLT_MAX = 3.4028234663852886e38
"""Largest finite single precision value."""


def _nan_filled(n: int) -> array:
    return array("f", [math.nan]) * n


class RayArray:
    """Single precision ray data, one row per ray and one column per item."""

    def __init__(
        self,
        n_rays: int = 0,
        n_items: int = 0,
        data: Optional[Iterable[float]] = None,
    ) -> None:
        if n_rays < 0 or n_items < 0:
            raise ValueError("RayArray: n_rays and n_items must not be negative")
        if data is None:
            values = _nan_filled(n_rays * n_items)
        else:
            values = array("f", data)
            if len(values) != n_rays * n_items:
                raise TM25Error("RayArray: data has wrong size")
        self._n_rays = n_rays
        self._n_items = n_items
        self._data = values

    @property
    def n_rays(self) -> int:
        """Number of rays (rows)."""
        return self._n_rays

    @property
    def n_items(self) -> int:
        """Number of items per ray (columns)."""
        return self._n_items

    @property
    def data(self) -> array:
        """The flat row major data; treat it as read only."""
        return self._data

    def __len__(self) -> int:
        return self._n_rays

    def _row(self, i: int) -> slice:
        return slice(i * self._n_items, (i + 1) * self._n_items)

    def _check_ray_index(self, i: int, where: str, name: str = "i") -> None:
        if not 0 <= i < self._n_rays:
            raise TM25Error(f"RayArray.{where}: {name} ({i}) >= NRays() ({self._n_rays})")

    def _check_item_index(self, j: int, where: str, name: str = "j") -> None:
        if not 0 <= j < self._n_items:
            raise TM25Error(f"RayArray.{where}: {name} ({j}) >= NItems() ({self._n_items})")

    def resize(self, n_rays: int, n_items: int) -> None:
        """Change the shape; all values become NaN."""
        if n_rays < 0 or n_items < 0:
            raise ValueError("RayArray.resize: n_rays and n_items must not be negative")
        self._n_rays = n_rays
        self._n_items = n_items
        self._data = _nan_filled(n_rays * n_items)

    def clear(self) -> None:
        """Drop all rays and items."""
        self._n_rays = self._n_items = 0
        self._data = array("f")

    def set_ray(self, i: int, ray: Sequence[float]) -> None:
        """Copy ``ray`` into row ``i``."""
        self._check_ray_index(i, "set_ray")
        if len(ray) != self._n_items:
            raise TM25Error(
                f"RayArray.set_ray: ray.size() ({len(ray)}) != NItems() ({self._n_items})"
            )
        self._data[self._row(i)] = array("f", ray)

    def set_item(self, j: int, item: Sequence[float]) -> None:
        """Copy ``item`` into column ``j``."""
        self._check_item_index(j, "set_item")
        if len(item) != self._n_rays:
            raise TM25Error(
                f"RayArray.set_item: item.size() ({len(item)}) != NRays() ({self._n_rays})"
            )
        self._data[j::self._n_items] = array("f", item)

    def set_ray_item(self, iray: int, jitem: int, value: float) -> None:
        """Set item ``jitem`` of ray ``iray``."""
        self._check_ray_index(iray, "set_ray_item", "iray")
        self._check_item_index(jitem, "set_ray_item", "jitem")
        self._data[iray * self._n_items + jitem] = value

    def get_ray(self, i: int) -> list[float]:
        """Return a copy of row ``i``."""
        self._check_ray_index(i, "get_ray")
        return list(self._data[self._row(i)])

    def bounding_box(self) -> tuple[tuple[float, float, float], tuple[float, float, float]]:
        """Lower and upper corner of the box holding all ray start points."""
        lo = [FLT_MAX] * 3
        hi = [-FLT_MAX] * 3
        if self._n_rays == 0:
            return tuple(lo), tuple(hi)  # type: ignore[return-value]
        if self._n_items < 3:
            raise TM25Error("RayArray.bounding_box: fewer than three items per ray")
        for k in range(3):
            for v in self._data[k::self._n_items]:
                if lo[k] > v:
                    lo[k] = v
                if hi[k] < v:
                    hi[k] = v
        return tuple(lo), tuple(hi)  # type: ignore[return-value]

    def shuffle(self, begin: int = 0, end: Optional[int] = None) -> None:
        """Fisher-Yates shuffle of the rays in ``[begin, end)``."""
        if end is None:
            end = self._n_rays
        if end <= begin + 1:
            return
        if end > self._n_rays:
            raise TM25Error("RayArray.shuffle: end out of range")
        if begin < 0:
            raise TM25Error("RayArray.shuffle: begin out of range")
        for i in range(end - 1, begin, -1):
            j = random.randint(begin, i)
            if i != j:
                ri, rj = self._row(i), self._row(j)
                tmp = self._data[ri]
                self._data[ri] = self._data[rj]
                self._data[rj] = tmp

    def total_ray_power(self) -> float:
        """Sum of the seventh item (the flux) over all rays."""
        if self._n_rays == 0:
            return 0.0
        if self._n_items < 7:
            raise TM25Error("RayArray.total_ray_power: fewer than seven items per ray")
        return math.fsum(self._data[6::self._n_items])

    def set_data_direct(self, data: Iterable[float], n_rays: int, n_items: int) -> None:
        """Replace all data; ``n_rays`` and ``n_items`` must confirm the current shape."""
        if n_rays != self._n_rays:
            raise TM25Error("RayArray.set_data_direct: nRays don't match")
        if n_items != self._n_items:
            raise TM25Error("RayArray.set_data_direct: nItems don't match")
        values = array("f", data)
        if len(values) != self._n_rays * self._n_items:
            raise TM25Error("RayArray.set_data_direct: data has wrong size")
        self._data = values

    def extract_data(self) -> array:
        """Hand over the data and leave the array empty."""
        rv = self._data
        self.clear()
        return rv

    def change_microns_to_nanometers(self) -> None:
        """With eight items per ray, multiply every eighth value by 1000."""
        if self._n_items == 8:
            for k in range(7, len(self._data), 8):
                self._data[k] *= 1000.0


class TM25RaySet:
    """A TM-25 header together with its ray data."""

    def __init__(
        self,
        header: Optional[TM25Header] = None,
        ray_array: Optional[RayArray] = None,
    ) -> None:
        self.header = header if header is not None else TM25Header()
        self.ray_array = ray_array if ray_array is not None else RayArray()
        self.items = RaySetItems.from_header(self.header)
        self.warnings: list[str] = []

    def n_rays(self) -> int:
        """Number of rays."""
        return self.ray_array.n_rays

    def n_items(self) -> int:
        """Number of items per ray."""
        return self.ray_array.n_items