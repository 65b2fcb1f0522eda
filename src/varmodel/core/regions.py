"""
Region construction, splitting and delta weights

Build phase of the variation model. Each function takes the sorted
locations (or the regions derived from them) and returns new immutable
data; nothing here is consulted lazily at query time.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from ..utils.logging import VarModelLogger
from .location import NormalizedLocation
from .region import VariationRegion
from .tent import Tent

DeltaWeights = Tuple[Tuple[int, float], ...]


def regions_for(locations: Sequence[NormalizedLocation]) -> List[VariationRegion]:
    """Split space into one region per location.

    Non-zero coordinates get a tent spanning the global extent of their axis,
    which always includes the default at 0. Zero coordinates get the
    (0, 0, 0) tent rather than the whole axis.
    """
    minmax: Dict[str, Tuple[float, float]] = {}
    for location in locations:
        for axis_name, value in location.items():
            lo, hi = minmax.get(axis_name, (0.0, 0.0))
            minmax[axis_name] = (min(lo, value), max(hi, value))

    regions = []
    for location in locations:
        tents = {}
        for axis_name, value in location.items():
            if value == 0.0:
                tents[axis_name] = Tent(0.0, 0.0, 0.0)
            else:
                lo, hi = minmax[axis_name]
                tents[axis_name] = Tent.new(lo, value, hi)
        regions.append(VariationRegion(tents))
    return regions


def _split_against(region: VariationRegion, prev_region: VariationRegion) -> VariationRegion:
    """Clip region so it no longer double counts influence with prev_region.

    Cuts in the direction with the largest range ratio, across several axes
    when they share the largest ratio.
    """
    axis_tents: Dict[str, Tent] = {}
    best_ratio = -1.0
    for axis_name, tent in region.items():
        prev_peak = prev_region[axis_name].peak
        if prev_peak < tent.peak:
            ratio = (prev_peak - tent.peak) / (tent.lower - tent.peak)
            clipped = Tent(prev_peak, tent.peak, tent.upper)
        elif prev_peak > tent.peak:
            ratio = (prev_peak - tent.peak) / (tent.upper - tent.peak)
            clipped = Tent(tent.lower, tent.peak, prev_peak)
        else:
            # can't split in this direction
            continue

        if ratio > best_ratio:
            axis_tents.clear()
            best_ratio = ratio
        if ratio == best_ratio:
            axis_tents[axis_name] = clipped

    return region.with_tents(axis_tents)


def _overlaps(region: VariationRegion, prev_region: VariationRegion) -> bool:
    for axis_name, tent in region.items():
        prev_peak = prev_region[axis_name].peak
        if not (prev_peak == tent.peak or tent.lower < prev_peak < tent.upper):
            return False
    return True


def master_influence(regions: Sequence[VariationRegion]) -> List[VariationRegion]:
    """Compute the influence of each master.

    The regions must come from sorted locations: that guarantees each region
    only needs clipping against the regions before it.
    """
    influence = []
    for i, region in enumerate(regions):
        axes = set(region.keys())
        for prev_region in regions[:i]:
            if axes != set(prev_region.keys()):
                continue
            # If prev doesn't overlap current we aren't interested
            if not _overlaps(region, prev_region):
                continue
            region = _split_against(region, prev_region)
        influence.append(region)
    return influence


def delta_weights(
    locations: Sequence[NormalizedLocation], influence: Sequence[VariationRegion]
) -> List[DeltaWeights]:
    """Figure out the multipliers to use when applying deltas from masters.

    Row k holds (j, scalar) for every earlier region j with a non-zero
    scalar at location k, in ascending j.
    """
    tracing = VarModelLogger.is_enabled_for(logging.DEBUG)
    if tracing:
        for location, region in zip(locations, influence):
            VarModelLogger.debug(f"{location!r}")
            for axis_name, tent in region.items():
                VarModelLogger.debug(f"  {axis_name} {tent}")
        VarModelLogger.debug("Delta Weights")

    weights = []
    for loc_idx, location in enumerate(locations):
        row = []
        for inf_idx, region in enumerate(influence[:loc_idx]):
            scalar = region.scalar_at(location)
            if scalar == 0.0:
                continue
            row.append((inf_idx, scalar))
        weights.append(tuple(row))
        if tracing:
            VarModelLogger.debug(f"  {loc_idx} {row}")
    return weights
