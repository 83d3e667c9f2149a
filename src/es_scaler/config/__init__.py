"""
Config - Sourcing and validation of the scaler's trigger configuration.
"""

from .loader import load_scaler_config
from .parsing import parse_bool, parse_int, split_and_trim
from .resolver import get_from_auth_or_meta, parse_parameter, resolve_metadata

__all__ = [
    "get_from_auth_or_meta",
    "load_scaler_config",
    "parse_bool",
    "parse_int",
    "parse_parameter",
    "resolve_metadata",
    "split_and_trim",
]
