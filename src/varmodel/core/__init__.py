"""
Core variation model

Locations, tents, regions, master sorting and the VariationModel itself.
"""

from .errors import (
    AxesWithoutAssignedOrder,
    DefaultUndefined,
    DeltaError,
    DuplicateLocation,
    InconsistentNumbersOfPoints,
    UnknownLocation,
    VariationModelError,
    VarModelError,
)
from .geometry import Point2D, Vector2D
from .location import NormalizedLocation, norm_loc
from .model import VariationModel
from .region import VariationRegion
from .sorting import LocationSortingHat, LocationSortKey
from .tent import Tent

__all__ = [
    'AxesWithoutAssignedOrder',
    'DefaultUndefined',
    'DeltaError',
    'DuplicateLocation',
    'InconsistentNumbersOfPoints',
    'UnknownLocation',
    'VariationModelError',
    'VarModelError',
    'Point2D',
    'Vector2D',
    'NormalizedLocation',
    'norm_loc',
    'VariationModel',
    'VariationRegion',
    'LocationSortingHat',
    'LocationSortKey',
    'Tent',
]
