"""Configuration store."""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from ..errors import ConfigError, ProfileNotFoundError
from ..models.config import CloudSecureConfig, CredentialProfile
from ..utils.interactive import Prompter
from .defaults import get_default_config_path
from .loader import load_config, load_or_create_config, save_config

logger = logging.getLogger(__name__)


class ConfigStore:
    """CloudSecure configuration bound to one file and one prompter."""

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        prompter: Optional[Prompter] = None,
    ):
        """Initialize config store.

        Args:
            config_path: Path to configuration file (defaults to the user config)
            prompter: Prompt reader/writer used when profiles are missing
        """
        self.config_path = Path(config_path) if config_path is not None else get_default_config_path()
        self.prompter = prompter or Prompter()
        self._config: Optional[CloudSecureConfig] = None

    @property
    def config(self) -> CloudSecureConfig:
        """Get current configuration, creating it on first access."""
        if self._config is None:
            self._config = self.load_or_create()
        return self._config

    def load_or_create(self, strict: bool = False) -> CloudSecureConfig:
        """Load configuration, prompting for a profile if it is missing or incomplete."""
        self._config = load_or_create_config(self.config_path, self.prompter, strict=strict)
        return self._config

    def load(self) -> CloudSecureConfig:
        """Load configuration without prompting."""
        self._config = load_config(self.config_path)
        return self._config

    def save(self, config: Optional[CloudSecureConfig] = None) -> None:
        """Save configuration.

        Args:
            config: Configuration to save (defaults to the current one)

        Raises:
            ValueError: If no configuration is loaded
        """
        if config is not None:
            self._config = config
        if self._config is None:
            raise ValueError("No configuration loaded")

        save_config(self._config, self.config_path)
        logger.info(f"Saved configuration to {self.config_path}")

    def get_profile(self, name: Optional[str] = None) -> CredentialProfile:
        """Get a profile by name, or the default profile."""
        return self.config.get_profile(name)

    def add_profile(self, name: str, profile: CredentialProfile, make_default: bool = False) -> None:
        """Add or replace a profile and save.

        The profile also becomes the default when ``make_default`` is set or
        no default exists yet.
        """
        config = self.config
        replaced = name in config.profiles
        config.profiles[name] = profile
        if make_default or not config.default_profile_name:
            config.default_profile_name = name
        self.save()
        logger.info(f"{'Replaced' if replaced else 'Added'} CloudSecure profile {name!r}")

    def prompt_new_profile(self, make_default: bool = False) -> Tuple[str, CredentialProfile]:
        """Prompt for one named profile, add it and save."""
        name, profile = self.prompter.collect_named_profile()
        self.add_profile(name, profile, make_default=make_default)
        return name, profile

    def set_default(self, name: str) -> None:
        """Make an existing profile the default and save.

        Raises:
            ProfileNotFoundError: If the profile does not exist
        """
        config = self.config
        if name not in config.profiles:
            raise ProfileNotFoundError(name)
        config.default_profile_name = name
        self.save()

    def remove_profile(self, name: str) -> CredentialProfile:
        """Remove a profile and save.

        Raises:
            ProfileNotFoundError: If the profile does not exist
            ConfigError: If the profile is the default or the only one
        """
        config = self.config
        if name not in config.profiles:
            raise ProfileNotFoundError(name)
        if len(config.profiles) == 1:
            raise ConfigError(f"Cannot remove {name!r}: it is the only CloudSecure profile")
        if name == config.default_profile_name:
            raise ConfigError(f"Cannot remove {name!r}: it is the default profile, choose another default first")

        profile = config.profiles.pop(name)
        self.save()
        return profile
