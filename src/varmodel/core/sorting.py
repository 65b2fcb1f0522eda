"""
Master location sorting

Sorts locations, and thus the resulting regions, from most to least
influential: the default master first, then masters directly on an axis
(corners), and finally any other masters (knockout or fixup masters). Fewer
non-zero axes sort earlier. For example, if the default is weight 400, width
100 then the master at weight 700, width 100 sorts before the master at
weight 700, width 75.

Additional keys make the order deterministic in case of ties. This is the
getMasterLocationsSortKeyFunc algorithm from fontTools.varLib.models.
"""

import logging
from typing import Dict, Iterable, List, NamedTuple, Sequence, Set, Tuple

from ..utils.logging import VarModelLogger
from .location import NormalizedLocation

# Scored for a non-zero axis with no assigned order; larger than any real index
UNKNOWN_AXIS_INDEX = 0x10000


class LocationSortKey(NamedTuple):
    """Sort key for a location; only axes with a non-zero value matter"""

    # 1 for every non-zero coordinate
    rank: int
    # -1 for every coordinate where some master sits directly on that axis at that value
    on_axis_points: int
    # index of each non-zero axis in the axis order
    known_axes: Tuple[int, ...]
    # non-zero axes, ordered ones first, then the rest by name
    ordered_axes: Tuple[str, ...]
    axis_value_signs: Tuple[int, ...]
    axis_value_abs: Tuple[float, ...]


def _sign(value: float) -> int:
    if value > 0.0:
        return 1
    if value < 0.0:
        return -1
    return 0


class LocationSortingHat:
    """Computes sort keys relative to a fixed axis order and master set"""

    def __init__(self, locations: Iterable[NormalizedLocation], axis_order: Sequence[str]):
        self.axis_order: Tuple[str, ...] = tuple(axis_order)
        self.on_axis_points: Dict[str, Set[float]] = self._find_on_axis_points(locations)

    @staticmethod
    def _find_on_axis_points(locations: Iterable[NormalizedLocation]) -> Dict[str, Set[float]]:
        """Record, per axis, the values of locations with exactly one non-zero coordinate"""
        on_axis_points: Dict[str, Set[float]] = {}
        for location in locations:
            non_zero = location.non_zero_axes()
            if len(non_zero) != 1:
                continue
            axis_name = non_zero[0]
            on_axis_points.setdefault(axis_name, set()).add(location[axis_name])
        return on_axis_points

    def key_for(self, location: NormalizedLocation) -> LocationSortKey:
        rank = 0
        on_axis_points = 0
        known_axes: List[int] = []
        ordered_axes: List[str] = []
        non_zero_axes: List[str] = []

        for idx, axis_name in enumerate(self.axis_order):
            if location.has_non_zero(axis_name):
                known_axes.append(idx)
                ordered_axes.append(axis_name)

        for axis_name, value in location.items():
            if value != 0.0:
                rank += 1
                # Construction rejects such locations; scored so the key never fails
                if axis_name not in self.axis_order:
                    known_axes.append(UNKNOWN_AXIS_INDEX)
                non_zero_axes.append(axis_name)
            if value in self.on_axis_points.get(axis_name, ()):
                on_axis_points -= 1

        ordered_axes.extend(sorted(a for a in non_zero_axes if a not in ordered_axes))

        key = LocationSortKey(
            rank=rank,
            on_axis_points=on_axis_points,
            known_axes=tuple(known_axes),
            ordered_axes=tuple(ordered_axes),
            axis_value_signs=tuple(_sign(location.get(a, 0.0)) for a in ordered_axes),
            axis_value_abs=tuple(abs(location.get(a, 0.0)) for a in ordered_axes),
        )
        if VarModelLogger.is_enabled_for(logging.DEBUG):
            VarModelLogger.debug(f"key for {location!r} is {key}")
        return key

    def sort(self, locations: Iterable[NormalizedLocation]) -> List[NormalizedLocation]:
        """Locations in ascending key order"""
        return sorted(locations, key=self.key_for)
