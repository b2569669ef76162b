"""Configuration model for resolved encoding arguments."""

import json
from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, ValidationError, create_model, model_validator

from ..errors import ArgsError, ConflictingValues, InvalidValue, MissingRequiredValue, UnknownOption
from ..utils.validation import check_constraints
from .options import OPTIONS, OPTIONS_BY_NAME


class _EncodeArgsBase(BaseModel):
    """Base for the generated ``EncodeArgs`` model."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True
    )

    @model_validator(mode="after")
    def check_cross_field(self) -> "_EncodeArgsBase":
        check_constraints(self)
        return self


EncodeArgs = create_model(
    "EncodeArgs",
    __base__=_EncodeArgsBase,
    __module__=__name__,
    **{spec.name: spec.to_field() for spec in OPTIONS}
)
EncodeArgs.__doc__ = "Resolved encoding arguments, one field per command line option."


def translate_validation_error(exc: ValidationError) -> ArgsError:
    """Map a pydantic validation error onto the argument error taxonomy.

    Only the first reported problem is translated; the full pydantic report is
    kept in ``details``.

    Args:
        exc: Error raised while building ``EncodeArgs``

    Returns:
        Matching ``ArgsError`` instance
    """
    error = exc.errors()[0]
    loc = error.get("loc") or ()
    option = str(loc[0]) if loc else None
    value = error.get("input")
    details = str(exc)

    spec = OPTIONS_BY_NAME.get(option) if option else None
    if error["type"] == "missing" or (spec is not None and spec.required and value is None):
        return MissingRequiredValue(
            f"Missing required option: {option}", option=option, details=details
        )
    if error["type"] == "extra_forbidden":
        return UnknownOption(
            f"Unknown option: {option}", option=option, value=value, details=details
        )
    if option is None and error["type"] == "value_error":
        # Model level validator, raised by check_constraints
        message = error["msg"].removeprefix("Value error, ")
        return ConflictingValues(message, details=details)
    if option is None:
        return InvalidValue(f"Invalid document: {error['msg']}", value=value, details=details)
    return InvalidValue(
        f"Invalid value for {option}: {error['msg']}",
        option=option, value=value, details=details
    )


def build_config(values: Mapping[str, Any]) -> "EncodeArgs":
    """Build ``EncodeArgs`` from already converted option values.

    Args:
        values: Mapping of field name to value

    Returns:
        Validated, immutable configuration

    Raises:
        ArgsError: If any value or combination of values is invalid
    """
    try:
        return EncodeArgs(**values)
    except ValidationError as e:
        raise translate_validation_error(e) from e


def serialize(config: "EncodeArgs") -> Dict[str, Any]:
    """Get the structured document handed to the encoding pipeline.

    Every declared field is present, in declaration order. Unset optional
    fields are ``None`` rather than omitted.
    """
    return config.model_dump(mode="json")


def dumps(config: "EncodeArgs") -> str:
    """Get the serialized document as JSON text."""
    return json.dumps(serialize(config))


def deserialize(document: Union[str, bytes, Mapping[str, Any]]) -> "EncodeArgs":
    """Rebuild a configuration from a serialized document.

    Args:
        document: JSON text or mapping produced by ``serialize``

    Returns:
        Validated, immutable configuration

    Raises:
        ArgsError: If the document is malformed or holds invalid values
    """
    try:
        if isinstance(document, (str, bytes)):
            return EncodeArgs.model_validate_json(document)
        return EncodeArgs.model_validate(dict(document))
    except ValidationError as e:
        raise translate_validation_error(e) from e
