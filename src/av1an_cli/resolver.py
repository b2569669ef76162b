"""Resolve invocation tokens into encoding arguments."""

from typing import Any, Sequence

import click
from loguru import logger

from .config.config import EncodeArgs, build_config
from .config.default_config import PROG_NAME
from .config.options import build_command, find_option
from .errors import ArgsError, InvalidValue, MissingRequiredValue, UnknownOption


def _param_name(exc: click.BadParameter) -> str:
    if exc.param is not None and exc.param.name:
        return exc.param.name
    return exc.param_hint or ""


def translate_click_error(exc: click.UsageError) -> ArgsError:
    """Map a click parsing error onto the argument error taxonomy.

    Args:
        exc: Error raised by click while parsing tokens

    Returns:
        Matching ``ArgsError`` instance
    """
    message = exc.format_message()

    if isinstance(exc, click.NoSuchOption):
        return UnknownOption(message, option=exc.option_name)
    if isinstance(exc, click.MissingParameter):
        return MissingRequiredValue(message, option=_param_name(exc))
    if isinstance(exc, click.BadParameter):
        return InvalidValue(message, option=_param_name(exc))
    if isinstance(exc, click.BadOptionUsage):
        # Either a flag given "=value" or a value option with nothing after it
        spec = find_option(exc.option_name)
        if spec is not None and spec.is_flag:
            return InvalidValue(message, option=spec.name)
        return MissingRequiredValue(
            message, option=spec.name if spec else exc.option_name
        )
    # Left over positional tokens
    return UnknownOption(message)


def resolve(tokens: Sequence[str]) -> EncodeArgs:
    """Resolve invocation tokens into encoding arguments.

    Args:
        tokens: Argument tokens without the program name, in original order

    Returns:
        Fully populated, immutable configuration

    Raises:
        UnknownOption: If a token matches no declared option
        InvalidValue: If a value cannot be converted, is outside its allowed
            set, or contradicts another value
        MissingRequiredValue: If ``chunk_method`` is absent or an option is
            missing its value
    """
    command = build_command()
    try:
        ctx = command.make_context(PROG_NAME, list(tokens))
    except click.UsageError as e:
        raise translate_click_error(e) from e

    config = build_config(ctx.params)
    logger.debug(f"Resolved arguments: {config!r}")
    return config


def resolve_defaults(**required: Any) -> EncodeArgs:
    """Resolve the default configuration without reading live arguments.

    Equivalent to ``resolve([])``, which fails while any option without a
    default (``chunk_method``) is absent. Values for such options may be
    passed as keyword arguments; ``True`` supplies a flag, ``False`` leaves
    it unset and ``None`` is rejected.

    Example:
        >>> resolve_defaults(chunk_method="hybrid").encoder
        'aom'
    """
    tokens = []
    for name, value in required.items():
        flag = "--" + name.replace("_", "-")
        if value is None:
            raise MissingRequiredValue(f"No value given for {flag}", option=name)
        if value is True:
            tokens.append(flag)
        elif value is not False:
            tokens.append(f"{flag}={value}")
    return resolve(tokens)
