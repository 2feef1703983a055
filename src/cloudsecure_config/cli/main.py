"""Main CLI entry point."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ..config import ConfigStore
from ..config.defaults import CONFIG_ENV_VAR
from ..utils.logging import setup_logging
from .commands import config_command, init_command


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=CONFIG_ENV_VAR,
    help=f"Configuration file path (default ~/.cloudsecure/config.json, or ${CONFIG_ENV_VAR})"
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default="WARNING",
    help="Logging level"
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    help="Log file path"
)
@click.option(
    "--no-rich",
    is_flag=True,
    help="Disable rich formatting"
)
@click.pass_context
def cli(
    ctx,
    config: Optional[Path],
    log_level: str,
    log_file: Optional[Path],
    no_rich: bool,
):
    """CloudSecure - manage API credential profiles."""
    ctx.ensure_object(dict)

    logger = setup_logging(
        level=log_level,
        log_file=log_file,
        use_rich=not no_rich
    )

    store = ConfigStore(config)
    logger.debug(f"Using configuration file {store.config_path}")

    ctx.obj["store"] = store
    ctx.obj["logger"] = logger


cli.add_command(init_command)
cli.add_command(config_command)


def main():
    """Main entry point."""
    try:
        rv = cli(standalone_mode=False)
    except (click.exceptions.Abort, KeyboardInterrupt):
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except Exception as e:
        logger = logging.getLogger(__name__)
        logger.exception("Unexpected error occurred")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    # Without standalone mode click returns the exit code of ctx.exit()
    if isinstance(rv, int) and rv:
        sys.exit(rv)


if __name__ == "__main__":
    main()
