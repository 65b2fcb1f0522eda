"""Parsers for masters documents and serialized models"""

from .model_parser import MastersDocument, ModelParser, load_data, model_from_dict

__all__ = ['MastersDocument', 'ModelParser', 'load_data', 'model_from_dict']
