"""
Command Line Interface for the sugarpipe demos.
"""
import logging
import sys
from typing import Optional

import click
import yaml

from .config import Config, load_config
from .core.log import configure_structlog, get_logger
from .demos import extension, linq


def _load_config_or_fail(config_path: Optional[str]) -> Config:
    try:
        config = load_config(config_path)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Could not parse configuration file '{config_path}': {e}")
    except ValueError as e:
        raise click.ClickException(str(e))

    try:
        config.validate()
        logging.getLogger().setLevel(config.log_level)
    except ValueError as e:
        raise click.ClickException(str(e))
    return config


config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML configuration file.",
)


@click.group()
def cli():
    """sugarpipe command-line interface."""
    configure_structlog()


@cli.command()
@config_option
def fizzle(config_path: Optional[str]):
    """
    Read one line from stdin and print it with "Fizz" appended.
    """
    _load_config_or_fail(config_path)
    get_logger("sugarpipe.cli").debug("command_started", command="fizzle")
    extension.main(stdin=click.get_text_stream("stdin"), stdout=sys.stdout)


@cli.command(name="linq")
@config_option
def linq_command(config_path: Optional[str]):
    """
    Double the odd integers of 0..9 with two lazily evaluated queries.
    """
    config = _load_config_or_fail(config_path)
    get_logger("sugarpipe.cli").debug("command_started", command="linq")
    linq.main(config=config, stdout=sys.stdout)


if __name__ == "__main__":
    cli()
