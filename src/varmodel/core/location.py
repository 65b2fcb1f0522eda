"""
Normalized locations in design space

A location maps axis names to normalized coordinates, conventionally in
[-1, 1]. Locations are used as dictionary keys and sorted, so they are
immutable, hashable and totally ordered.
"""

import math
from collections.abc import Mapping
from functools import total_ordering
from typing import Dict, Iterable, Iterator, Tuple, Union

LocationLike = Union["NormalizedLocation", Mapping, Iterable[Tuple[str, float]]]


def _coord(axis_name: str, value) -> float:
    coord = float(value)
    if math.isnan(coord):
        raise ValueError(f"NaN is not a valid coordinate for axis {axis_name!r}")
    # -0.0 + 0.0 is 0.0, keeps signs and reprs stable
    return coord + 0.0


@total_ordering
class NormalizedLocation(Mapping):
    """Immutable mapping of axis name to normalized coordinate.

    Equality is structural: an axis that is absent is not the same as an
    axis present at 0. Ordering compares (axis, value) items in axis name
    order.
    """

    __slots__ = ("_coords", "_items", "_hash")

    def __init__(self, positions: LocationLike = ()):
        if isinstance(positions, Mapping):
            positions = positions.items()
        coords: Dict[str, float] = {}
        for axis_name, value in positions:
            coords[str(axis_name)] = _coord(axis_name, value)
        self._coords = dict(sorted(coords.items()))
        self._items = tuple(self._coords.items())
        self._hash = hash(self._items)

    def __getitem__(self, axis_name: str) -> float:
        return self._coords[axis_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._coords)

    def __len__(self) -> int:
        return len(self._coords)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other) -> bool:
        if isinstance(other, NormalizedLocation):
            return self._items == other._items
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, NormalizedLocation):
            return self._items < other._items
        return NotImplemented

    def __repr__(self) -> str:
        coords = ", ".join(f"{name!r}: {value:g}" for name, value in self._items)
        return f"NormalizedLocation({{{coords}}})"

    def axis_names(self) -> Iterator[str]:
        return iter(self._coords)

    def has(self, axis_name: str) -> bool:
        return axis_name in self._coords

    def has_non_zero(self, axis_name: str) -> bool:
        return self._coords.get(axis_name, 0.0) != 0.0

    def non_zero_axes(self) -> Tuple[str, ...]:
        return tuple(name for name, value in self._items if value != 0.0)

    def is_default(self) -> bool:
        """True when every coordinate is zero (or there are none)."""
        return not self.non_zero_axes()

    def with_position(self, axis_name: str, value: float) -> "NormalizedLocation":
        """Return a copy with axis_name set to value"""
        coords = dict(self._coords)
        coords[axis_name] = value
        return NormalizedLocation(coords)

    def to_dict(self) -> Dict[str, float]:
        return dict(self._coords)


def norm_loc(*positions: Tuple[str, float], **coords: float) -> NormalizedLocation:
    """Shorthand constructor: norm_loc(("wght", 1.0)) or norm_loc(wght=1.0)"""
    return NormalizedLocation(list(positions) + list(coords.items()))
