"""
VarModel - variation model for variable font compilation

Subdivides normalized design space into master support regions, computes
each master's influence anywhere in the space, and turns absolute per-master
values (outline points, metrics) into deltas for a variation store.
"""

__version__ = "0.3.0"

from .api import (
    glyph_deltas,
    load_designspace,
    load_master_fonts,
    load_masters,
    load_model,
    save_model,
)
from .converters.designspace_to_model import DesignSpaceModel, DesignSpaceToModel
from .converters.glyph_points import collect_glyph_masters, glyph_points
from .core.errors import (
    AxesWithoutAssignedOrder,
    DefaultUndefined,
    DeltaError,
    DuplicateLocation,
    DesignSpaceModelError,
    InconsistentNumbersOfPoints,
    MastersDocumentError,
    UnknownLocation,
    VariationModelError,
    VarModelError,
)
from .core.geometry import Point2D, Vector2D
from .core.location import NormalizedLocation, norm_loc
from .core.model import VariationModel
from .core.region import VariationRegion
from .core.tent import Tent
from .parsers.model_parser import MastersDocument, ModelParser, model_from_dict
from .writers.model_writer import ModelWriter, model_to_dict

# Public API
__all__ = [
    # Version
    "__version__",
    # Core
    "NormalizedLocation",
    "norm_loc",
    "Tent",
    "VariationRegion",
    "VariationModel",
    "Point2D",
    "Vector2D",
    # Errors
    "VarModelError",
    "VariationModelError",
    "AxesWithoutAssignedOrder",
    "DeltaError",
    "DuplicateLocation",
    "DefaultUndefined",
    "InconsistentNumbersOfPoints",
    "UnknownLocation",
    "DesignSpaceModelError",
    "MastersDocumentError",
    # Converters
    "DesignSpaceModel",
    "DesignSpaceToModel",
    "glyph_points",
    "collect_glyph_masters",
    # Parser and Writer
    "MastersDocument",
    "ModelParser",
    "ModelWriter",
    "model_from_dict",
    "model_to_dict",
    # Convenience functions
    "build_model",
    "compute_deltas",
    # High-level API functions
    "load_designspace",
    "load_masters",
    "load_master_fonts",
    "glyph_deltas",
    "save_model",
    "load_model",
]


def build_model(locations, axis_order) -> VariationModel:
    """Build a VariationModel from plain location mappings

    Args:
        locations: Iterable of {axis name: normalized coordinate} mappings
        axis_order: Axis names, most important first

    Returns:
        The variation model
    """
    return VariationModel(locations, axis_order)


def compute_deltas(locations, axis_order, point_seqs):
    """Build a model and compute deltas in one call

    Args:
        locations: Iterable of {axis name: normalized coordinate} mappings
        axis_order: Axis names, most important first
        point_seqs: Mapping of NormalizedLocation to absolute values

    Returns:
        Mapping of master location to deltas
    """
    return build_model(locations, axis_order).deltas(point_seqs)
