"""gitbadges exceptions."""

# ruff: noqa: TC003  # Path needed at runtime for signatures
from pathlib import Path


class GitBadgesError(Exception):
    """Base exception for gitbadges errors."""


# =============================================================================
# Repository Exceptions
# =============================================================================


class RepositoryError(GitBadgesError):
    """Base exception for repository access errors."""


class EnumerationError(RepositoryError):
    """Raised when repository status cannot be enumerated.

    Attributes:
        root: The repository root that was being enumerated.
    """

    def __init__(self, message: str, *, root: Path | None = None) -> None:
        """Initialize with error message and repository context.

        Args:
            message: Human-readable error message.
            root: The repository root that was being enumerated.
        """
        super().__init__(message)
        self.root: Path | None = root


# =============================================================================
# Snapshot Exceptions
# =============================================================================


class SnapshotBuildError(GitBadgesError):
    """Base exception for status snapshot build failures.

    Attributes:
        root: The repository root whose snapshot was being built.
    """

    def __init__(self, message: str, *, root: Path | None = None) -> None:
        """Initialize with error message and repository context."""
        super().__init__(message)
        self.root: Path | None = root


class MergeIdentityError(SnapshotBuildError):
    """Raised when a status delta carries no file path.

    An unidentified delta cannot be merged, so the whole build is aborted.
    """


class BuildCancelledError(SnapshotBuildError):
    """Raised when a snapshot build is cancelled before completion."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(GitBadgesError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: object,
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: object = value
        self.expected: str = expected
        self.source: str | None = source
