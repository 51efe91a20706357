"""
Command-line entry point for tasklist.

Reads commands from stdin, one per line, until EXIT:

\b
    ADD [text]      add a task (placeholder text when omitted)
    DEL <index>     delete a task
    UPDATE <index>  show a task, then read its new content from the next line
    TODO            list all tasks
    CLEAR           remove all tasks
    EXIT            save and quit
"""
import logging
from pathlib import Path
from typing import Optional

import click

from tasklist import __version__
from tasklist.command_loop import CommandLoop
from tasklist.constants import (
    MSG_INPUT_CLOSED,
    get_config_manager,
    get_data_file,
    get_log_dir,
)
from tasklist.exceptions import ConfigurationError, SaveError
from tasklist.logging_setup import setup_logging
from tasklist.managers.storage_manager import StorageManager

logger = logging.getLogger(__name__)


@click.command(help=__doc__)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="TASKLIST_DATA_FILE",
    default=None,
    help="Task list JSON file. Overrides data_file in config.json.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.json (default: .tasklist/config.json).",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for tasklist.log. Overrides log_dir in config.json.",
)
@click.option("-v", "--verbose", is_flag=True, help="Also log debug records to stderr.")
@click.version_option(version=__version__, prog_name="tasklist")
@click.pass_context
def cli(
    ctx: click.Context,
    data_file: Optional[Path],
    config_path: Optional[Path],
    log_dir: Optional[Path],
    verbose: bool,
) -> None:
    get_config_manager(reset=True, config_path=config_path)
    try:
        data_file = data_file or get_data_file()
        log_dir = log_dir or get_log_dir()
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    setup_logging(
        log_dir=log_dir,
        console_level=logging.DEBUG if verbose else logging.WARNING,
    )
    logger.info("Starting session with %s", data_file)

    loop = CommandLoop(StorageManager(data_file))
    loop.hydrate()

    try:
        finished = loop.run(click.get_text_stream("stdin"))
    except SaveError as e:
        logger.error("Could not save tasks: %s", e)
        raise click.ClickException(str(e))

    if not finished:
        click.echo(MSG_INPUT_CLOSED, err=True)
        ctx.exit(1)


if __name__ == '__main__':
    cli()
