"""
Utility modules for core functionality.

Modules:
- decorators: Timing helpers
- enum_converter: Enum parsing and conversion
- params_processor: Parameter processing utilities
"""

from .decorators import timer
from .enum_converter import enum_to_string, parse_enum
from .params_processor import merge_params, params_to_dict, prepare_params

__all__ = [
    "timer",
    "enum_to_string",
    "parse_enum",
    "merge_params",
    "params_to_dict",
    "prepare_params",
]
