"""
Converter modules for VarModel

Adapters between font source objects (fontTools designspace documents,
defcon glyphs) and the variation model.
"""

from .designspace_to_model import DesignSpaceModel, DesignSpaceToModel, model_from_designspace
from .glyph_points import collect_glyph_masters, glyph_points

__all__ = [
    'DesignSpaceModel',
    'DesignSpaceToModel',
    'model_from_designspace',
    'collect_glyph_masters',
    'glyph_points',
]
