"""
DesignSpace to variation model converter

Builds a VariationModel from an in-memory fontTools DesignSpaceDocument:

1. Axis order follows the order of the axes in the document
2. Each source location is completed with axis defaults and normalized
   (honouring axis maps) with fontTools' normalizeValue
3. Sources are keyed by name so callers can attach per-master values
"""

from dataclasses import dataclass, field
from typing import Dict, List

from fontTools.designspaceLib import DesignSpaceDocument, SourceDescriptor

from ..core.errors import DesignSpaceModelError
from ..core.location import NormalizedLocation
from ..core.model import VariationModel
from ..utils.logging import VarModelLogger


@dataclass
class DesignSpaceModel:
    """A variation model plus where each designspace source landed in it"""

    model: VariationModel
    axis_order: List[str]
    source_locations: Dict[str, NormalizedLocation] = field(default_factory=dict)
    sources: Dict[str, SourceDescriptor] = field(default_factory=dict)


class DesignSpaceToModel:
    """Convert DesignSpace sources to a VariationModel"""

    def convert(self, doc: DesignSpaceDocument) -> DesignSpaceModel:
        """Convert a DesignSpace document to a variation model"""
        if any(hasattr(axis, "values") for axis in doc.axes):
            raise DesignSpaceModelError(
                "The designspace has one or more discrete (non-interpolating) axes. "
                "Split it into interpolable sub-spaces first, e.g. with "
                "fontTools.designspaceLib.split.splitInterpolable()"
            )
        if not doc.sources:
            raise DesignSpaceModelError("The designspace has no sources")

        axis_order = [axis.name for axis in doc.axes]

        source_locations: Dict[str, NormalizedLocation] = {}
        sources: Dict[str, SourceDescriptor] = {}
        for index, source in enumerate(doc.sources, 1):
            name = self._source_name(source, index)
            if name in source_locations:
                raise DesignSpaceModelError(f"Duplicate source name: {name}")
            location = self.normalized_location(doc, source)
            source_locations[name] = location
            sources[name] = source
            VarModelLogger.debug(f"Source {name} at {location!r}")

        unique = set(source_locations.values())
        if len(unique) != len(source_locations):
            VarModelLogger.warning("Some sources share a location; they map to one master")

        model = VariationModel(unique, axis_order)
        VarModelLogger.info(
            f"Built variation model: {len(doc.axes)} axes, {len(model)} masters"
        )
        return DesignSpaceModel(
            model=model,
            axis_order=axis_order,
            source_locations=source_locations,
            sources=sources,
        )

    @staticmethod
    def normalized_location(doc: DesignSpaceDocument, source: SourceDescriptor) -> NormalizedLocation:
        """Normalized location of a source, with every axis present"""
        design_location = source.getFullDesignLocation(doc)
        normalized = doc.normalizeLocation(design_location)
        return NormalizedLocation(normalized)

    @staticmethod
    def _source_name(source: SourceDescriptor, index: int) -> str:
        if source.name:
            return source.name
        if source.filename:
            return source.filename
        return f"source.{index}"


def model_from_designspace(doc: DesignSpaceDocument) -> DesignSpaceModel:
    """Shorthand for DesignSpaceToModel().convert(doc)"""
    return DesignSpaceToModel().convert(doc)
