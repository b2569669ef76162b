"""Configuration module for option schema and defaults."""

from .config import EncodeArgs, deserialize, dumps, serialize
from .options import OPTIONS, OptionKind, OptionSpec, build_command
from . import default_config

__all__ = [
    "EncodeArgs",
    "OPTIONS",
    "OptionKind",
    "OptionSpec",
    "build_command",
    "default_config",
    "deserialize",
    "dumps",
    "serialize",
]
