"""
Model Writer for VarModel

This module turns variation models and delta sets into plain data (for YAML
or JSON) and into a human readable report.
"""

import json
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

from ..core.geometry import Point2D, Vector2D
from ..core.location import NormalizedLocation
from ..core.model import VariationModel
from ..core.region import VariationRegion


def value_to_data(value) -> Any:
    """Point2D/Vector2D become [x, y], numbers stay numbers"""
    if isinstance(value, (Point2D, Vector2D)):
        return [value.x, value.y]
    return value


def region_to_data(region: VariationRegion) -> Dict[str, List[float]]:
    return {axis_name: [tent.lower, tent.peak, tent.upper] for axis_name, tent in region.items()}


def model_to_dict(model: VariationModel) -> Dict[str, Any]:
    """Plain data for a model; model_from_dict() reads it back"""
    return {
        "axis_order": list(model.axis_order),
        "default": model.default.to_dict(),
        "locations": [location.to_dict() for location in model.locations],
        "influence": [region_to_data(region) for region in model.influence],
        "delta_weights": [
            [[idx, weight] for idx, weight in row] for row in model.delta_weights
        ],
    }


def deltas_to_dict(
    model: VariationModel,
    deltas: Mapping[NormalizedLocation, Sequence],
    names: Optional[Mapping[NormalizedLocation, str]] = None,
) -> Dict[str, Any]:
    """Plain data for a delta set, masters in model order"""
    names = names or {}
    masters = []
    for location in model.locations:
        if location not in deltas:
            continue
        entry = {}
        if location in names:
            entry["name"] = names[location]
        entry["location"] = location.to_dict()
        entry["deltas"] = [value_to_data(value) for value in deltas[location]]
        masters.append(entry)
    return {"axes": list(model.axis_order), "masters": masters}


def dump_yaml(data: Dict[str, Any]) -> str:
    return yaml.safe_dump(data, default_flow_style=None, sort_keys=False, allow_unicode=True)


def dump_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


class ModelWriter:
    """Write a variation model as a text report"""

    def __init__(self, precision: int = 6):
        self.precision = precision

    def _num(self, value: float) -> str:
        return f"{round(value, self.precision):g}"

    def _location(self, location: NormalizedLocation) -> str:
        coords = [f"{name}={self._num(value)}" for name, value in location.items() if value != 0.0]
        return "{" + ", ".join(coords) + "}"

    def write(self, model: VariationModel, names: Optional[Mapping[NormalizedLocation, str]] = None) -> str:
        """Generate report string for a model"""
        names = names or {}
        lines = [f"axes [{', '.join(model.axis_order)}]", ""]

        lines.append("masters")
        for idx, location in enumerate(model.locations):
            label = f" {names[location]}" if location in names else ""
            lines.append(f"    {idx}{label} {self._location(location)}")
        lines.append("")

        lines.append("regions")
        for idx, region in enumerate(model.influence):
            tents = [
                f"{axis_name} {self._num(t.lower)}:{self._num(t.peak)}:{self._num(t.upper)}"
                for axis_name, t in region.items()
                if not t.is_sentinel
            ]
            lines.append(f"    {idx} [{', '.join(tents)}]")
        lines.append("")

        lines.append("weights")
        for idx, row in enumerate(model.delta_weights):
            pairs = [f"{master_idx}: {self._num(weight)}" for master_idx, weight in row]
            lines.append(f"    {idx} {{{', '.join(pairs)}}}")

        return "\n".join(lines).strip()

    def write_deltas(
        self,
        model: VariationModel,
        deltas: Mapping[NormalizedLocation, Sequence],
        names: Optional[Mapping[NormalizedLocation, str]] = None,
    ) -> str:
        """Generate report string for a delta set"""
        names = names or {}
        lines = []
        for location in model.locations:
            if location not in deltas:
                continue
            label = f"{names[location]} " if location in names else ""
            lines.append(f"{label}{self._location(location)}")
            for value in deltas[location]:
                data = value_to_data(value)
                if isinstance(data, list):
                    lines.append("    (" + ", ".join(self._num(v) for v in data) + ")")
                else:
                    lines.append(f"    {self._num(data)}")
        return "\n".join(lines)
