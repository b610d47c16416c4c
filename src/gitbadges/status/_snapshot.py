# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""Status snapshots.

A snapshot maps every repository-relative path reported by one enumeration
pass to its merged status. Snapshots are built in one go and never mutated
afterwards; a rebuild always produces a new snapshot.
"""

import time
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from gitbadges.enums import StatusKind
from gitbadges.exceptions import (
    BuildCancelledError,
    EnumerationError,
    MergeIdentityError,
)
from gitbadges.repository._models import SNAPSHOT_OPTIONS, StatusOptions
from gitbadges.status._merge import merge_deltas, merge_status
from gitbadges.utils._logging import create_null_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from gitbadges.repository._protocol import StatusEnumerator


@dataclass(frozen=True, slots=True)
class StatusSnapshot:
    """Immutable merged status of every enumerated path in one repository.

    Attributes:
        root: The repository root the entry keys are relative to.
        entries: Read-only mapping of relative path to merged status.
    """

    root: Path
    entries: Mapping[str, StatusKind] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not isinstance(self.entries, MappingProxyType):
            object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def get(self, relative_path: str) -> StatusKind | None:
        """Return the merged status for a relative path, or None."""
        return self.entries.get(relative_path)

    def __contains__(self, relative_path: object) -> bool:
        return relative_path in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def items(self) -> Iterator[tuple[str, StatusKind]]:
        """Iterate over (relative path, status) entries."""
        return iter(self.entries.items())

    def with_prefix(self, prefix: str) -> Iterator[tuple[str, StatusKind]]:
        """Iterate over entries whose path starts with prefix.

        The match is a plain string prefix test, not a path component test:
        ``"foo"`` also matches ``"foobar/x"``.
        """
        return (
            (path, status)
            for path, status in self.entries.items()
            if path.startswith(prefix)
        )

    def is_clean(self) -> bool:
        """Whether no entry records a pending change."""
        return all(status.is_quiet for status in self.entries.values())


def build_snapshot(
    root: Path,
    enumerator: "StatusEnumerator",
    *,
    options: StatusOptions = SNAPSHOT_OPTIONS,
    cancelled: Callable[[], bool] | None = None,
    logger: "FilteringBoundLogger | None" = None,
) -> StatusSnapshot:
    """Build a status snapshot for the repository at root.

    Every pair delivered by the enumerator is merged and inserted. A path
    delivered more than once keeps its most severe status.

    Args:
        root: The repository root.
        enumerator: The status enumeration capability.
        options: Enumeration options (everything, by default).
        cancelled: Predicate checked between pairs; the build stops when it
            returns True.
        logger: Logger for build diagnostics.

    Returns:
        The fully populated snapshot.

    Raises:
        EnumerationError: If the enumerator fails.
        MergeIdentityError: If a delta has no file path.
        BuildCancelledError: If cancelled returns True before completion.
    """
    log = logger if logger is not None else create_null_logger()
    started = time.perf_counter()
    entries: dict[str, StatusKind] = {}

    try:
        for pair in enumerator.enumerate_status(root, options):
            if cancelled is not None and cancelled():
                msg = f"Snapshot build cancelled: {root}"
                raise BuildCancelledError(msg, root=root)

            try:
                path, status = merge_deltas(pair)
            except MergeIdentityError as e:
                e.root = root
                raise

            previous = entries.get(path)
            entries[path] = (
                status if previous is None else merge_status(previous, status)
            )
    except (BuildCancelledError, MergeIdentityError, EnumerationError):
        raise
    except Exception as e:
        msg = f"Failed to enumerate status of {root}: {e}"
        raise EnumerationError(msg, root=root) from e

    if cancelled is not None and cancelled():
        msg = f"Snapshot build cancelled: {root}"
        raise BuildCancelledError(msg, root=root)

    log.debug(
        "snapshot_built",
        root=str(root),
        entries=len(entries),
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    return StatusSnapshot(root=root, entries=MappingProxyType(entries))
