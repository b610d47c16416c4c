import os
import sys
from typing import TYPE_CHECKING

from gitbadges.config._models import Config
from gitbadges.exceptions import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

STRICT_ENV_VAR = "GITBADGES_STRICT_CONFIG"


def _report(message: str, *, fatal: bool) -> None:
    label = "Error" if fatal else "Warning"
    print(f"{label}: {message}", file=sys.stderr)  # noqa: T201
    if fatal:
        sys.exit(1)


def safe_load_config(
    *,
    config_path: "Path | None" = None,
) -> tuple[Config, str | None]:
    """Load configuration for a front end without crashing on bad input.

    A broken config file or environment override is reported on stderr and
    the built-in defaults are used instead. With GITBADGES_STRICT_CONFIG=1
    the process exits with status 1. An explicit config_path that does not
    exist always exits, since the user asked for that file.

    Args:
        config_path: Explicit path to config file (--config flag).

    Returns:
        Tuple of (Config, error message or None).
    """
    if config_path is not None and not config_path.exists():
        _report(f"Config file not found: {config_path}", fatal=True)

    strict = os.environ.get(STRICT_ENV_VAR, "0") == "1"
    try:
        return Config.load(config_path=config_path), None
    except (ConfigError, OSError) as e:
        message = f"Failed to load config: {e}"
        _report(message, fatal=strict)
        return Config.from_dict({}), message
