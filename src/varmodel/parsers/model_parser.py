"""
Model and masters document parser

Reads back what writers.model_writer produces, and reads masters documents:

    axes: [wght, wdth]
    masters:
      - name: Regular
        location: {wght: 0, wdth: 0}
        values: [[10, 10], 5]

Two-item lists become Point2D, plain numbers stay floats. When 'axes' is
missing the configured axis priority decides the order.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from ..config import order_axes
from ..core.errors import MastersDocumentError, VarModelError
from ..core.geometry import Point2D
from ..core.location import NormalizedLocation
from ..core.model import VariationModel
from ..core.region import VariationRegion
from ..core.tent import Tent
from ..utils.logging import VarModelLogger


@dataclass
class MastersDocument:
    """Parsed masters: the model plus absolute values per master"""

    model: VariationModel
    point_seqs: Dict[NormalizedLocation, List[Any]] = field(default_factory=dict)
    names: Dict[NormalizedLocation, str] = field(default_factory=dict)


def load_data(content: str) -> Dict[str, Any]:
    """Parse a YAML or JSON string (JSON is valid YAML)"""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise MastersDocumentError(f"Could not parse document: {e}") from e
    if not isinstance(data, dict):
        raise MastersDocumentError("Document must be a mapping at the top level")
    return data


def model_from_dict(data: Dict[str, Any]) -> VariationModel:
    """Rebuild a model written by model_to_dict() without recomputing it"""
    try:
        locations = [NormalizedLocation(loc) for loc in data["locations"]]
        influence = [
            VariationRegion({axis: Tent(*map(float, tent)) for axis, tent in region.items()})
            for region in data["influence"]
        ]
        weights = [[(idx, weight) for idx, weight in row] for row in data["delta_weights"]]
        default = NormalizedLocation(data["default"])
        axis_order = list(data.get("axis_order", default.axis_names()))
        return VariationModel.from_parts(default, axis_order, locations, influence, weights)
    except (KeyError, TypeError, ValueError) as e:
        raise MastersDocumentError(f"Invalid model data: {e}") from e


def _parse_value(value: Any, where: str):
    if isinstance(value, (list, tuple)):
        if len(value) != 2:
            raise MastersDocumentError(f"{where}: points need exactly 2 coordinates, got {value}")
        return Point2D(float(value[0]), float(value[1]))
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MastersDocumentError(f"{where}: expected a number or [x, y], got {value!r}")
    return float(value)


class ModelParser:
    """Parse masters documents into a VariationModel and its value sequences"""

    def __init__(self, axis_priority: Optional[List[str]] = None):
        self.axis_priority = axis_priority

    def parse_file(self, filepath: str) -> MastersDocument:
        """Parse masters file (YAML or JSON)"""
        with open(filepath, encoding="utf-8") as f:
            content = f.read()
        return self.parse(content)

    def parse(self, content: str) -> MastersDocument:
        """Parse masters document content"""
        return self.parse_data(load_data(content))

    def parse_data(self, data: Dict[str, Any]) -> MastersDocument:
        masters = data.get("masters")
        if not isinstance(masters, list) or not masters:
            raise MastersDocumentError("'masters' must be a non-empty list")

        locations: List[NormalizedLocation] = []
        values: List[Optional[List[Any]]] = []
        names: List[Optional[str]] = []
        for index, master in enumerate(masters, 1):
            if not isinstance(master, dict):
                raise MastersDocumentError(f"Master {index} must be a mapping")
            name = master.get("name")
            where = f"Master {name or index}"
            try:
                location = NormalizedLocation(master.get("location") or {})
            except (TypeError, ValueError) as e:
                raise MastersDocumentError(f"{where}: invalid location: {e}") from e

            raw_values = master.get("values")
            if raw_values is not None and not isinstance(raw_values, list):
                raise MastersDocumentError(f"{where}: 'values' must be a list")

            locations.append(location)
            names.append(str(name) if name is not None else None)
            values.append(
                [_parse_value(v, where) for v in raw_values] if raw_values is not None else None
            )

        axis_names = {axis for location in locations for axis in location.axis_names()}
        if "axes" in data:
            axis_order = [str(axis) for axis in data["axes"] or []]
        else:
            axis_order = order_axes(axis_names, self.axis_priority)
            VarModelLogger.info(f"No axes given, using order {axis_order}")

        try:
            model = VariationModel(locations, axis_order)
        except VarModelError as e:
            raise MastersDocumentError(str(e)) from e

        doc = MastersDocument(model=model)
        seen = set()
        for location, name, seq in zip(locations, names, values):
            key = model.location_key(location)
            if key in seen:
                raise MastersDocumentError(f"Duplicate master location {key!r}")
            seen.add(key)
            if name is not None:
                doc.names[key] = name
            if seq is not None:
                doc.point_seqs[key] = seq
        return doc
