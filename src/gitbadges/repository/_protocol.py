# ruff: noqa: TC001, TC003  # types needed at runtime for Protocol signatures
"""Status enumeration protocol for type-safe dependency injection.

This module defines a runtime-checkable Protocol that both the GitPython-backed
enumerator and the in-memory fake satisfy, so the snapshot builder and the
observation controller can be tested without real repositories.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable

from gitbadges.repository._models import DeltaPair, StatusOptions


@runtime_checkable
class StatusEnumerator(Protocol):
    """Protocol for the repository status enumeration capability.

    Example:
        >>> def count_changes(enumerator: StatusEnumerator, root: Path) -> int:
        ...     return sum(1 for _ in enumerator.enumerate_status(root, StatusOptions()))
    """

    def enumerate_status(
        self, root: Path, options: StatusOptions
    ) -> Iterator[DeltaPair]:
        """Enumerate per-file deltas for a whole repository.

        Args:
            root: The repository root directory.
            options: What the enumeration should report.

        Yields:
            One DeltaPair per file that appears in at least one view.

        Raises:
            EnumerationError: If the repository cannot be read.
        """
        ...

    def is_working_directory_clean(self, root: Path) -> bool:
        """Check whether a repository has no pending changes.

        Args:
            root: The repository root directory.

        Returns:
            True if nothing is staged, modified or untracked.

        Raises:
            EnumerationError: If the repository cannot be read.
        """
        ...
