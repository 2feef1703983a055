"""CLI command implementations."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import yaml

from ..config import ConfigStore, load_config
from ..errors import ConfigError
from ..models.config import CloudSecureConfig
from ..utils.interactive import pick_profile_name
from ..utils.system import ensure_dir


logger = logging.getLogger(__name__)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load_existing(store: ConfigStore) -> CloudSecureConfig:
    """Load the store's file without prompting, exiting with a hint if it is missing."""
    try:
        return store.load()
    except FileNotFoundError:
        _fail(f"Configuration file not found: {store.config_path} (run 'cloudsecure init' first)")
    except (ConfigError, OSError) as e:
        _fail(str(e))


@click.command("init")
@click.option("--strict", is_flag=True, help="Fail on an unparsable file instead of rebuilding it")
@click.pass_context
def init_command(ctx, strict: bool):
    """Load the configuration, creating or repairing it interactively."""
    store: ConfigStore = ctx.obj["store"]

    try:
        ensure_dir(store.config_path.parent)
        config = store.load_or_create(strict=strict)
    except (ConfigError, OSError) as e:
        _fail(str(e))

    click.echo(f"Default CloudSecure: {config.default_profile_name}")


@click.group("config")
def config_command():
    """Manage CloudSecure profiles."""
    pass


@config_command.command("show")
@click.option("--format", "output_format", type=click.Choice(["json", "yaml"]), default="json", help="Output format")
@click.option("--show-secrets", is_flag=True, help="Print API secrets instead of masking them")
@click.pass_context
def show_config(ctx, output_format: str, show_secrets: bool):
    """Show current configuration."""
    config = _load_existing(ctx.obj["store"])
    if not show_secrets:
        config = config.masked()

    if output_format == "yaml":
        click.echo(yaml.dump(config.to_dict(), default_flow_style=False, allow_unicode=True, sort_keys=True), nl=False)
    else:
        click.echo(config.to_json())


@config_command.command("list")
@click.pass_context
def list_profiles(ctx):
    """List profile names, marking the default with '*'."""
    config = _load_existing(ctx.obj["store"])

    if not config.profiles:
        click.echo("No CloudSecure profiles configured")
        return

    for name in sorted(config.profiles):
        marker = "*" if name == config.default_profile_name else " "
        click.echo(f"{marker} {name}\t(tenant: {config.profiles[name].tenant_id})")


@config_command.command("add")
@click.option("--default", "make_default", is_flag=True, help="Make the new profile the default")
@click.pass_context
def add_profile(ctx, make_default: bool):
    """Add a profile interactively."""
    store: ConfigStore = ctx.obj["store"]
    _load_existing(store)

    try:
        name, _ = store.prompt_new_profile(make_default=make_default)
    except (ConfigError, OSError) as e:
        _fail(str(e))

    click.echo(f"Added CloudSecure {name!r} to {store.config_path}")


@config_command.command("use")
@click.argument("name", required=False)
@click.pass_context
def use_profile(ctx, name: Optional[str]):
    """Set the default profile (pick interactively when NAME is omitted)."""
    store: ConfigStore = ctx.obj["store"]
    config = _load_existing(store)

    if name is None:
        name = pick_profile_name(
            sorted(config.profiles),
            current=config.default_profile_name,
            prompter=store.prompter,
        )
        if name is None:
            _fail("No CloudSecure selected")

    try:
        store.set_default(name)
    except (ConfigError, OSError) as e:
        _fail(str(e))

    click.echo(f"Default CloudSecure set to {name!r}")


@config_command.command("remove")
@click.argument("name")
@click.pass_context
def remove_profile(ctx, name: str):
    """Remove a profile."""
    store: ConfigStore = ctx.obj["store"]
    _load_existing(store)

    try:
        store.remove_profile(name)
    except (ConfigError, OSError) as e:
        _fail(str(e))

    click.echo(f"Removed CloudSecure {name!r}")


@config_command.command("validate")
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path), required=False)
@click.pass_context
def validate_config(ctx, config_file: Optional[Path]):
    """Validate a configuration file without modifying it."""
    path = config_file or ctx.obj["store"].config_path

    try:
        config = load_config(path)
    except (ConfigError, OSError) as e:
        click.echo(f"Configuration validation failed: {e}", err=True)
        sys.exit(1)

    if not config.profiles:
        click.echo("Configuration validation failed: no CloudSecure profiles defined", err=True)
        sys.exit(1)
    if not config.default_profile_name:
        click.echo("Configuration validation failed: default_cloud_name is not set", err=True)
        sys.exit(1)
    if config.default_profile_name not in config.profiles:
        logger.warning(f"Default CloudSecure {config.default_profile_name!r} is not defined")

    click.echo(f"Configuration is valid ({len(config.profiles)} profile(s), default {config.default_profile_name!r})")


@config_command.command("path")
@click.pass_context
def show_path(ctx):
    """Print the configuration file path."""
    click.echo(str(ctx.obj["store"].config_path))
