"""Default configuration values.

This module defines the built-in default configuration values that are used
when no other configuration sources provide values.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "info",
        "format": "json",
        "file": "",
        "max_bytes": 10 * 1024 * 1024,
        "backup_count": 3,
    },
    "observation": {
        "background_builds": True,
        "observed_directories": ["/"],
    },
}
