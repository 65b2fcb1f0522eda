"""
Variation regions

A region maps axis names to tents and describes the box of design space in
which one master has influence.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Iterator, Mapping as MappingType

from ..utils.logging import VarModelLogger
from .tent import Tent


class VariationRegion(Mapping):
    """Immutable mapping of axis name to Tent"""

    __slots__ = ("_tents",)

    def __init__(self, tents: MappingType[str, Tent] = None):
        self._tents: Dict[str, Tent] = dict(sorted((tents or {}).items()))

    def __getitem__(self, axis_name: str) -> Tent:
        return self._tents[axis_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tents)

    def __len__(self) -> int:
        return len(self._tents)

    def __eq__(self, other) -> bool:
        if isinstance(other, VariationRegion):
            return self._tents == other._tents
        if isinstance(other, Mapping):
            return self._tents == dict(other.items())
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        tents = ", ".join(f"{name}: {tent}" for name, tent in self._tents.items())
        return f"VariationRegion({{{tents}}})"

    def with_tents(self, updates: MappingType[str, Tent]) -> "VariationRegion":
        """Return a copy with the tents for some axes replaced"""
        tents = dict(self._tents)
        tents.update(updates)
        return VariationRegion(tents)

    def scalar_at(self, location: MappingType[str, float]) -> float:
        """The scalar multiplier for the provided location for this region

        Only the OpenType, non-extrapolating behaviour of fontTools
        supportScalar is implemented. Axes missing from the location count
        as 0; axes missing from the region don't participate.

        Args:
            location: Normalized location to evaluate at

        Returns:
            0.0 for no influence, otherwise the product of per-axis factors
        """
        scalar = 1.0
        for axis_name, tent in self._tents.items():
            if not tent.validate():
                continue
            v = location.get(axis_name, 0.0)

            # At the peak we have full influence by definition
            if v == tent.peak:
                continue
            if tent.is_sentinel:
                continue

            if v <= tent.lower or tent.upper <= v:
                if VarModelLogger.is_enabled_for(logging.DEBUG):
                    VarModelLogger.debug(
                        f"  {self!r} => 0 due to {axis_name} {tent} at {dict(location)}"
                    )
                return 0.0

            edge = tent.lower if v < tent.peak else tent.upper
            scalar *= (v - edge) / (tent.peak - edge)
        return scalar
