"""Default configuration values."""

import os
from pathlib import Path


CONFIG_ENV_VAR = "CLOUDSECURE_CONFIG"
DEFAULT_CONFIG_DIR = Path.home() / ".cloudsecure"
DEFAULT_CONFIG_FILE = "config.json"


def get_default_config_path() -> Path:
    """Get default configuration file path.

    ``$CLOUDSECURE_CONFIG`` wins over ``~/.cloudsecure/config.json``.
    """
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE
