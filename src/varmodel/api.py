"""
VarModel Public API

High-level functions for integrating VarModel into font build pipelines.
They load designspace files, UFO masters and masters documents from disk and
hand them to the in-memory core.
"""

from pathlib import Path
from typing import Dict, List, Tuple, Union

from defcon import Font
from fontTools.designspaceLib import DesignSpaceDocument

from .converters.designspace_to_model import DesignSpaceModel, DesignSpaceToModel
from .converters.glyph_points import collect_glyph_masters
from .core.errors import DesignSpaceModelError
from .core.geometry import Vector2D
from .core.location import NormalizedLocation
from .core.model import VariationModel
from .parsers.model_parser import MastersDocument, ModelParser, load_data, model_from_dict
from .utils.logging import VarModelLogger
from .writers.model_writer import dump_json, dump_yaml, model_to_dict


def load_designspace(designspace_path: Union[str, Path]) -> DesignSpaceModel:
    """
    Build a variation model from a .designspace file.

    Args:
        designspace_path: Path to the .designspace file

    Returns:
        DesignSpaceModel with the model and each source's normalized location

    Example:
        import varmodel

        ds_model = varmodel.load_designspace("MyFont.designspace")
        print(ds_model.model.locations)
    """
    doc = DesignSpaceDocument.fromfile(str(designspace_path))
    return DesignSpaceToModel().convert(doc)


def load_masters(masters_path: Union[str, Path]) -> MastersDocument:
    """
    Parse a masters document (YAML or JSON) into a model and value sequences.

    Example:
        import varmodel

        masters = varmodel.load_masters("metrics.yaml")
        deltas = masters.model.deltas(masters.point_seqs)
    """
    return ModelParser().parse_file(str(masters_path))


def load_master_fonts(ds_model: DesignSpaceModel) -> Dict[NormalizedLocation, Font]:
    """Open the UFO of every designspace source with defcon, keyed by location"""
    fonts: Dict[NormalizedLocation, Font] = {}
    for name, source in ds_model.sources.items():
        if not source.path:
            raise DesignSpaceModelError(f"Source {name} has no path to a UFO")
        location = ds_model.source_locations[name]
        if location in fonts:
            continue
        VarModelLogger.debug(f"Loading {source.path}")
        fonts[location] = Font(source.path)
    return fonts


def glyph_deltas(
    designspace_path: Union[str, Path], glyph_name: str
) -> Tuple[DesignSpaceModel, Dict[NormalizedLocation, List[Vector2D]]]:
    """
    Compute the deltas of one glyph across the UFO masters of a designspace.

    Returns:
        The designspace model and master location -> point deltas
    """
    ds_model = load_designspace(designspace_path)
    fonts = load_master_fonts(ds_model)
    point_seqs = collect_glyph_masters(fonts, glyph_name)
    return ds_model, ds_model.model.deltas(point_seqs)


def save_model(model: VariationModel, output_path: Union[str, Path]) -> str:
    """Write a model as YAML (.yaml/.yml) or JSON (anything else)"""
    output_file = Path(output_path)
    data = model_to_dict(model)
    if output_file.suffix.lower() in [".yaml", ".yml"]:
        content = dump_yaml(data)
    else:
        content = dump_json(data)
    with open(output_file, "w", encoding="utf-8") as f:
        f.write(content)
    return str(output_file)


def load_model(model_path: Union[str, Path]) -> VariationModel:
    """Read a model written by save_model()"""
    with open(model_path, encoding="utf-8") as f:
        return model_from_dict(load_data(f.read()))
