"""Writers for variation models and delta sets"""

from .model_writer import (
    ModelWriter,
    deltas_to_dict,
    dump_json,
    dump_yaml,
    model_to_dict,
    value_to_data,
)

__all__ = [
    'ModelWriter',
    'deltas_to_dict',
    'dump_json',
    'dump_yaml',
    'model_to_dict',
    'value_to_data',
]
