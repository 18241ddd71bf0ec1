"""Names of the items stored per ray and the item layout of a ray set."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Union

from .header import TM25Header

N_STD_ITEMS = 18

ABSENT: Optional[int] = None
"""Marker in ``RaySetItems.item_indices`` for a standard item that is not present."""


class TM25Error(RuntimeError):
    """Error raised for inconsistent ray set data or item usage."""

    def __init__(self, msg: str) -> None:
        super().__init__("TM25Error: " + msg)


class RayItem(IntEnum):
    """Standard ray items in the order a TM-25 ray record stores them."""

    X = 0
    Y = 1
    Z = 2
    KX = 3
    KY = 4
    KZ = 5
    PHI = 6
    LAMBDA = 7
    TRI_Y = 8
    S1 = 9
    S2 = 10
    S3 = 11
    POL_ELLIPSE_X = 12
    POL_ELLIPSE_Y = 13
    POL_ELLIPSE_Z = 14
    TRI_X = 15
    TRI_Z = 16
    SPECTRUM_IDX = 17
    ADDITIONAL = 18


_ITEM_NAMES: dict[RayItem, str] = {
    RayItem.X: "x",
    RayItem.Y: "y",
    RayItem.Z: "z",
    RayItem.KX: "kx",
    RayItem.KY: "ky",
    RayItem.KZ: "kz",
    RayItem.PHI: "phi",
    RayItem.LAMBDA: "lambda",
    RayItem.TRI_Y: "Tri_Y",
    RayItem.S1: "S1",
    RayItem.S2: "S2",
    RayItem.S3: "S3",
    RayItem.POL_ELLIPSE_X: "PolEllipseX",
    RayItem.POL_ELLIPSE_Y: "PolEllipseY",
    RayItem.POL_ELLIPSE_Z: "PolEllipseZ",
    RayItem.TRI_X: "Tri_X",
    RayItem.TRI_Z: "Tri_Z",
    RayItem.SPECTRUM_IDX: "spectrumIdx",
    RayItem.ADDITIONAL: "additional",
}

_NAME_ITEMS: dict[str, RayItem] = {name: item for item, name in _ITEM_NAMES.items()}


def _as_ray_item(ri: Union[RayItem, int], where: str) -> RayItem:
    try:
        return RayItem(ri)
    except ValueError as err:
        raise TM25Error(f"{where}: illegal ray item {ri}") from err


def ray_item_to_string(ri: Union[RayItem, int]) -> str:
    """Return the standard name of ``ri``, e.g. ``"x"`` or ``"additional"``."""
    return _ITEM_NAMES[_as_ray_item(ri, "RayItemToString")]


def string_to_ray_item(name: str) -> RayItem:
    """Return the item with standard name ``name``; inverse of ``ray_item_to_string``."""
    try:
        return _NAME_ITEMS[name]
    except KeyError:
        raise TM25Error(
            f"StringToRayItem: item name {name} is no standard item name"
        ) from None


class RaySetItems:
    """A sequence of present standard items followed by user defined items."""

    def __init__(self) -> None:
        self._std: list[bool] = [False] * N_STD_ITEMS
        self._additional: list[str] = []

    @classmethod
    def from_header(cls, header: TM25Header) -> "RaySetItems":
        """Build the item layout that the flags and column names of ``header`` imply."""
        items = cls()
        for ri in (RayItem.X, RayItem.Y, RayItem.Z, RayItem.KX, RayItem.KY, RayItem.KZ):
            items.mark_as_present(ri)
        if header.rad_flux_flag:
            items.mark_as_present(RayItem.PHI)
        if header.lambda_flag:
            items.mark_as_present(RayItem.LAMBDA)
        if header.lum_flux_flag:
            items.mark_as_present(RayItem.TRI_Y)
        if header.stokes_flag:
            for ri in (RayItem.S1, RayItem.S2, RayItem.S3,
                       RayItem.POL_ELLIPSE_X, RayItem.POL_ELLIPSE_Y, RayItem.POL_ELLIPSE_Z):
                items.mark_as_present(ri)
        if header.tristimulus_flag:
            items.mark_as_present(RayItem.TRI_X)
            items.mark_as_present(RayItem.TRI_Z)
        if header.spectrum_index_flag:
            items.mark_as_present(RayItem.SPECTRUM_IDX)
        for name in header.column_names:
            items.add_additional_item(name)
        return items

    def _check(self, ri: Union[RayItem, int], where: str) -> int:
        try:
            idx = int(ri)
        except (TypeError, ValueError) as err:
            raise TM25Error(f"RaySetItems.{where}: illegal RayItem: {ri}") from err
        if not 0 <= idx < N_STD_ITEMS:
            raise TM25Error(f"RaySetItems.{where}: illegal RayItem: {idx}")
        return idx

    def mark_as_present(self, ri: Union[RayItem, int]) -> None:
        """Mark the standard item ``ri`` as present."""
        self._std[self._check(ri, "mark_as_present")] = True

    def mark_as_absent(self, ri: Union[RayItem, int]) -> None:
        """Mark the standard item ``ri`` as absent."""
        self._std[self._check(ri, "mark_as_absent")] = False

    def add_additional_item(self, name: str) -> None:
        """Append a user defined item; its name must be new and not empty."""
        if not name:
            raise TM25Error("RaySetItems.add_additional_item: empty name")
        if self.contains_additional_item(name):
            raise TM25Error(f"RaySetItems.add_additional_item: duplicate name: {name}")
        self._additional.append(name)

    def is_present(self, ri: Union[RayItem, int]) -> bool:
        """True if the standard item ``ri`` is present."""
        return self._std[self._check(ri, "is_present")]

    def n_std_items(self) -> int:
        """Number of standard items present."""
        return sum(self._std)

    def n_additional_items(self) -> int:
        """Number of user defined items."""
        return len(self._additional)

    def n_total_items(self) -> int:
        """Number of standard plus user defined items."""
        return self.n_std_items() + self.n_additional_items()

    def _present_std(self) -> list[RayItem]:
        return [RayItem(j) for j, present in enumerate(self._std) if present]

    def _check_index(self, i: int, where: str) -> None:
        total = self.n_total_items()
        if not 0 <= i < total:
            raise TM25Error(f"RaySetItems.{where}: i ({i}) >= NTotalItems() ({total})")

    def item_type(self, i: int) -> RayItem:
        """Type of the ``i``'th item; ``RayItem.ADDITIONAL`` for user defined items."""
        self._check_index(i, "item_type")
        present = self._present_std()
        return present[i] if i < len(present) else RayItem.ADDITIONAL

    def item_name(self, i: int) -> str:
        """Name of the ``i``'th item: the standard name or the user defined one."""
        self._check_index(i, "item_name")
        present = self._present_std()
        if i < len(present):
            return ray_item_to_string(present[i])
        return self._additional[i - len(present)]

    def contains_items(self, other: "RaySetItems") -> bool:
        """True if every item of ``other`` is present here too."""
        if any(theirs and not ours for ours, theirs in zip(self._std, other._std)):
            return False
        return all(self.contains_additional_item(s) for s in other._additional)

    def contains_additional_item(self, name: str) -> bool:
        """True if a user defined item called ``name`` exists."""
        return name in self._additional

    def extraction_map(self, other: "RaySetItems") -> list[int]:
        """Indices into this layout of each item of ``other``, in ``other``'s order."""
        if not self.contains_items(other):
            raise TM25Error("RaySetItems.extraction_map: contains_items(other) is false")
        rv: list[int] = []
        this_idx = 0
        for ours, theirs in zip(self._std, other._std):
            if ours:
                if theirs:
                    rv.append(this_idx)
                this_idx += 1
        n_std = this_idx
        rv.extend(n_std + self._additional.index(s) for s in other._additional)
        return rv

    def item_indices(self) -> list[Optional[int]]:
        """For every standard item its column index, or ``ABSENT`` if not present."""
        rv: list[Optional[int]] = [ABSENT] * N_STD_ITEMS
        idx = 0
        for j, present in enumerate(self._std):
            if present:
                rv[j] = idx
                idx += 1
        return rv