"""Command line contract of the av1an chunked encoding pipeline."""

__version__ = "0.1.0"

from loguru import logger

from .config import EncodeArgs, OPTIONS, deserialize, dumps, serialize
from .errors import (
    ArgsError,
    ConflictingValues,
    InvalidValue,
    MissingRequiredValue,
    UnknownOption,
)
from .resolver import resolve, resolve_defaults

# Silent when used as a library; the console script enables it
logger.disable(__name__)

__all__ = [
    "EncodeArgs",
    "OPTIONS",
    "ArgsError",
    "ConflictingValues",
    "InvalidValue",
    "MissingRequiredValue",
    "UnknownOption",
    "deserialize",
    "dumps",
    "resolve",
    "resolve_defaults",
    "serialize",
]
