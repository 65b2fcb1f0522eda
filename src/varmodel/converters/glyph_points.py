"""
Glyph geometry as point sequences

Turns defcon glyphs into the point sequences VariationModel.deltas()
consumes. The order is: every contour point, then one offset per component,
then the advance width as a phantom point.
"""

from typing import Dict, List, Mapping

from defcon import Font, Glyph

from ..core.geometry import Point2D
from ..core.location import NormalizedLocation
from ..utils.logging import VarModelLogger


def glyph_points(glyph: Glyph) -> List[Point2D]:
    """Point sequence for one master's glyph"""
    points = []
    for contour in glyph:
        for point in contour:
            points.append(Point2D(float(point.x), float(point.y)))
    for component in glyph.components:
        dx, dy = component.transformation[4:6]
        points.append(Point2D(float(dx), float(dy)))
    points.append(Point2D(float(glyph.width or 0), 0.0))
    return points


def collect_glyph_masters(
    fonts: Mapping[NormalizedLocation, Font], glyph_name: str
) -> Dict[NormalizedLocation, List[Point2D]]:
    """Point sequences of glyph_name from every master font that has it

    Sparse masters (fonts without the glyph) are skipped.
    """
    point_seqs = {}
    for location, font in fonts.items():
        if glyph_name not in font:
            VarModelLogger.debug(f"Glyph {glyph_name} not in master at {location!r}, skipping")
            continue
        point_seqs[location] = glyph_points(font[glyph_name])
    return point_seqs
