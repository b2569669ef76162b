"""Command line interface for av1an argument resolution."""
import click
from loguru import logger

from . import __version__
from .config.config import build_config, dumps
from .config.default_config import LOG_LEVEL, PROG_NAME
from .config.options import build_command
from .errors import ArgsError
from .utils.logging import setup_logging


def _emit(**params) -> None:
    """Print the resolved arguments as a JSON document."""
    try:
        config = build_config(params)
    except ArgsError as e:
        raise click.UsageError(e.message) from e
    click.echo(dumps(config))


main = click.version_option(__version__, "-V", "--version", prog_name=PROG_NAME)(
    build_command(callback=_emit, add_help_option=True)
)


def run() -> None:
    """Console script entry point."""
    setup_logging(LOG_LEVEL)
    logger.enable("av1an_cli")
    main()


if __name__ == '__main__':
    run()
