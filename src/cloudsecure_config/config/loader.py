"""Configuration loading and saving."""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from ..errors import ConfigParseError, ConfigSerializationError
from ..models.config import CloudSecureConfig
from ..utils.interactive import Prompter

logger = logging.getLogger(__name__)

FILE_MODE = 0o644

NOT_FOUND_NOTICE = "Configuration file not found, please provide the details for the first CloudSecure:"
INVALID_NOTICE = "Invalid configuration. Adding a new CloudSecure:"


def parse_config(raw: bytes, config_path: Union[str, Path] = "<memory>") -> CloudSecureConfig:
    """Parse configuration file content.

    Args:
        raw: File content
        config_path: Path used in error messages

    Returns:
        Parsed configuration

    Raises:
        ConfigParseError: If the content is not a valid configuration
    """
    try:
        data = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise ConfigParseError(config_path, f"not UTF-8 text ({e})") from e
    except json.JSONDecodeError as e:
        raise ConfigParseError(config_path, f"malformed JSON ({e})") from e

    if not isinstance(data, dict):
        raise ConfigParseError(config_path, "top level must be a JSON object")

    try:
        return CloudSecureConfig.model_validate(data, by_alias=True, by_name=False)
    except ValidationError as e:
        # Input values are left out of the reason, they may be credentials.
        reason = "; ".join(
            f"{'.'.join(map(str, err['loc']))}: {err['msg']}"
            for err in e.errors(include_url=False, include_input=False)
        )
        raise ConfigParseError(config_path, reason) from None


def load_config(config_path: Union[str, Path]) -> CloudSecureConfig:
    """Load configuration from file without prompting.

    Args:
        config_path: Path to configuration file

    Returns:
        Loaded configuration (not checked for completeness)

    Raises:
        FileNotFoundError: If config file doesn't exist
        OSError: If config file can't be read
        ConfigParseError: If config file is invalid
    """
    config_path = Path(config_path)
    raw = config_path.read_bytes()
    config = parse_config(raw, config_path)
    logger.debug(f"Loaded {len(config.profiles)} profile(s) from {config_path}")
    return config


def save_config(config: CloudSecureConfig, config_path: Union[str, Path]) -> None:
    """Save configuration to file.

    The file is created with mode 0644 (before umask) or truncated in place.
    Parent directories are not created.

    Args:
        config: Configuration to save
        config_path: Path to save configuration

    Raises:
        ConfigSerializationError: If the configuration can't be encoded
        OSError: If unable to write file
    """
    config_path = Path(config_path)

    try:
        data = config.to_json().encode("utf-8")
    except (TypeError, ValueError) as e:
        raise ConfigSerializationError(f"Failed to encode configuration: {e}") from e

    fd = os.open(config_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "wb") as f:
        f.write(data)

    logger.debug(f"Wrote {len(data)} bytes to {config_path}")


def _file_exists(config_path: Path) -> bool:
    # Only a missing file selects the bootstrap path; other stat errors propagate.
    try:
        config_path.stat()
    except FileNotFoundError:
        return False
    return True


def load_or_create_config(
    config_path: Union[str, Path],
    prompter: Optional[Prompter] = None,
    strict: bool = False,
) -> CloudSecureConfig:
    """Load configuration, creating or repairing it interactively.

    A missing file is bootstrapped with one prompted profile. A configuration
    without profiles or without a default name gets one more prompted
    profile, which becomes the default only if none was set. Either way the
    result is written back to ``config_path``.

    Args:
        config_path: Path to configuration file
        prompter: Prompt reader/writer (defaults to stdin/stdout)
        strict: Raise on an unparsable file instead of rebuilding it

    Returns:
        Configuration with at least one profile and a default name

    Raises:
        OSError: If the existing file can't be read, or the result can't be written
        ConfigParseError: If ``strict`` and the existing file is invalid
        ConfigSerializationError: If the result can't be encoded
    """
    config_path = Path(config_path)
    prompter = prompter or Prompter()

    if not _file_exists(config_path):
        logger.info(f"No configuration at {config_path}, bootstrapping")
        prompter.echo(NOT_FOUND_NOTICE)
        name, profile = prompter.collect_named_profile()

        config = CloudSecureConfig(profiles={name: profile}, default_profile_name=name)

        save_config(config, config_path)
        prompter.echo(f"Configuration saved to {config_path}")
    else:
        raw = config_path.read_bytes()
        try:
            config = parse_config(raw, config_path)
        except ConfigParseError as e:
            if strict:
                raise
            logger.warning(f"{e}. The configuration will be rebuilt.")
            config = CloudSecureConfig()

    if not config.is_complete():
        logger.info(
            f"Incomplete configuration in {config_path} "
            f"({len(config.profiles)} profile(s), default={config.default_profile_name!r})"
        )
        prompter.echo(INVALID_NOTICE)
        name, profile = prompter.collect_named_profile()

        config.profiles[name] = profile
        if not config.default_profile_name:
            config.default_profile_name = name

        save_config(config, config_path)
        prompter.echo(f"Updated and saved configuration to {config_path}")
    elif config.default_profile_name not in config.profiles:
        logger.warning(
            f"Default CloudSecure {config.default_profile_name!r} is not defined in {config_path}"
        )

    return config
