"""CloudSecure credential profile configuration."""

from .config import ConfigStore, load_config, load_or_create_config, save_config
from .errors import ConfigError, ConfigParseError, ConfigSerializationError, ProfileNotFoundError
from .models import CloudSecureConfig, CredentialProfile
from .utils.interactive import Prompter

__all__ = [
    "CloudSecureConfig",
    "ConfigError",
    "ConfigParseError",
    "ConfigSerializationError",
    "ConfigStore",
    "CredentialProfile",
    "ProfileNotFoundError",
    "Prompter",
    "load_config",
    "load_or_create_config",
    "save_config",
]

__version__ = "0.1.0"
