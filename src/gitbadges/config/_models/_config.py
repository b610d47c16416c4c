"""Configuration container with typed access.

This module provides the main Config class that serves as the primary
interface for accessing gitbadges configuration values.
"""

from pathlib import Path
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, ValidationError

from gitbadges.config._defaults import DEFAULT_CONFIG
from gitbadges.config._loader import deep_merge, parse_env_vars, read_toml_file
from gitbadges.config._models._logging import LoggingConfig
from gitbadges.config._models._observation import ObservationConfig
from gitbadges.exceptions import ConfigValidationError
from gitbadges.utils._paths import get_config_file


class Config(BaseModel):
    """Configuration container with typed access.

    Use the factory methods to create instances; they merge the built-in
    defaults under the supplied values before validating.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    observation: ObservationConfig = ObservationConfig()

    @classmethod
    def _from_merged(cls, data: dict[str, Any], *, source: str | None = None) -> Self:
        """Validate merged configuration data.

        Raises:
            ConfigValidationError: For the first invalid key.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            error = e.errors()[0]
            key = ".".join(str(part) for part in error["loc"])
            msg = f"Invalid configuration value for {key}: {error['msg']}"
            raise ConfigValidationError(
                msg,
                key=key,
                value=error.get("input"),
                expected=error["type"],
                source=source,
            ) from e

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary.

        Raises:
            ConfigValidationError: If validation fails.
        """
        return cls._from_merged(deep_merge(DEFAULT_CONFIG, data))

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load configuration from a specific file.

        Args:
            path: Path to the TOML config file.

        Returns:
            Configuration object from the specified file only.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        data = read_toml_file(path)
        merged = deep_merge(DEFAULT_CONFIG, data)
        return cls._from_merged(merged, source=str(path))

    @classmethod
    def load(
        cls,
        *,
        config_path: Path | None = None,
        include_env: bool = True,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources are merged in precedence order defaults, then the config
        file, then environment variables. A missing default config file is
        skipped.

        Args:
            config_path: Config file to read instead of the default location.
            include_env: Include GITBADGES_* environment variables.

        Returns:
            Merged configuration object.

        Raises:
            FileNotFoundError: If an explicit config_path does not exist.
            ConfigLoadError: If the config file cannot be parsed.
            ConfigValidationError: If the merged config fails validation.
        """
        merged = deep_merge(DEFAULT_CONFIG, {})

        path = config_path if config_path is not None else get_config_file()
        if config_path is not None or path.is_file():
            merged = deep_merge(merged, read_toml_file(path))

        if include_env:
            merged = deep_merge(merged, parse_env_vars())

        return cls._from_merged(merged, source=str(path))
