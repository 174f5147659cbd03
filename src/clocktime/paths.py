"""Cross-platform path resolution for clocktime configuration."""

import os
from pathlib import Path

from platformdirs import user_config_dir

from clocktime.constants import APP_NAME


def get_config_dir(override: str = "") -> Path:
    """Resolve the clocktime config directory.

    Priority: override > CLOCKTIME_CONFIG_DIR env var > platform default.
    """
    if override:
        return Path(override)

    env_dir = os.environ.get("CLOCKTIME_CONFIG_DIR")
    if env_dir:
        return Path(env_dir)

    return Path(user_config_dir(APP_NAME))


def get_config_path(config_dir: Path) -> Path:
    return config_dir / "config.toml"
