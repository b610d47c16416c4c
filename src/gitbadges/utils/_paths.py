from os import getenv
from pathlib import Path


def get_config_dir() -> Path:
    """Get the path to the gitbadges configuration directory."""
    return Path.home() / ".config" / "gitbadges"


def get_config_file() -> Path:
    """Get the path to the user configuration file.

    The GITBADGES_CONFIG environment variable overrides the default
    location (~/.config/gitbadges/config.toml).
    """
    override = getenv("GITBADGES_CONFIG", "")
    if override:
        return Path(override).expanduser()
    return get_config_dir() / "config.toml"


def get_log_dir() -> Path:
    """Get the path to the logs/ directory inside the configuration directory."""
    return get_config_dir() / "logs"


def get_log_file() -> Path:
    """Get the path to the default log file."""
    return get_log_dir() / "gitbadges.log"
