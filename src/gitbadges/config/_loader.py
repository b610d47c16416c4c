"""Configuration sources and how they are layered.

Three layers are merged in order: the built-in defaults, the TOML config
file, then ``GITBADGES_<SECTION>__<KEY>`` environment variables. A later
layer wins key by key inside tables; arrays and scalars are replaced whole.
"""

import copy
import json
import os
import tomllib
from typing import TYPE_CHECKING, Any

from gitbadges.exceptions import ConfigLoadError

if TYPE_CHECKING:
    from pathlib import Path

ENV_PREFIX = "GITBADGES_"
_ENV_SEPARATOR = "__"


def read_toml_file(path: "Path") -> dict[str, Any]:
    """Read and parse a TOML config file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file is not valid TOML.
    """
    with path.open("rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigLoadError(
                f"Failed to parse TOML file {path}: {e}",
                path=path,
                line=getattr(e, "lineno", None),
                column=getattr(e, "colno", None),
            ) from e


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return a new dict with override layered over base.

    Nested tables merge recursively; any other override value replaces the
    base value. Neither input is modified.
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def parse_env_value(value: str) -> Any:
    """Interpret an environment variable value.

    ``true``/``false`` in any case become booleans. Numbers, JSON arrays and
    JSON objects are decoded. Everything else, including ``null`` and bare
    JSON strings, stays the raw string.
    """
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        decoded = json.loads(value)
    except json.JSONDecodeError:
        return value
    if isinstance(decoded, (int, float, list, dict)) and not isinstance(
        decoded, bool
    ):
        return decoded
    return value


def set_nested_key(d: dict[str, Any], key_path: str, value: Any) -> None:
    """Set ``value`` at a dotted key path, replacing non-table intermediates.

    Example:
        >>> d = {}
        >>> set_nested_key(d, "logging.level", "debug")
        >>> d
        {'logging': {'level': 'debug'}}
    """
    *parents, leaf = key_path.split(".")
    table = d
    for part in parents:
        if not isinstance(table.get(part), dict):
            table[part] = {}
        table = table[part]
    table[leaf] = value


def parse_env_vars(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Collect configuration overrides from the environment.

    ``GITBADGES_LOGGING__LEVEL=debug`` sets ``logging.level``. Prefixed
    variables without the double-underscore separator, such as
    GITBADGES_CONFIG or GITBADGES_DEBUG, control the process rather than the
    configuration and are skipped.
    """
    overrides: dict[str, Any] = {}
    for name in sorted(os.environ):
        if not name.startswith(prefix):
            continue
        key = name.removeprefix(prefix)
        if _ENV_SEPARATOR not in key:
            continue
        dotted = key.lower().replace(_ENV_SEPARATOR, ".")
        set_nested_key(overrides, dotted, parse_env_value(os.environ[name]))
    return overrides
