# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""Fake status enumerator for testing.

This module provides a FakeStatusEnumerator class that implements the
StatusEnumerator protocol for use in tests without requiring a real Git
repository.
"""

import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from gitbadges.enums import StatusKind
from gitbadges.exceptions import EnumerationError
from gitbadges.repository._models import DeltaPair, StatusDelta, StatusOptions


@dataclass(slots=True)
class FakeStatusEnumerator:
    """In-memory status enumerator for testing.

    The fake keeps per-root state that tests manipulate directly:
    - pairs maps a repository root to the DeltaPairs it enumerates
    - clean maps a repository root to its clean-check answer
    - calls and clean_checks record every invocation in order
    - failures makes enumerations for a root raise the given error
    - gate, when set, blocks enumerations until the event is set

    Example:
        >>> fake = FakeStatusEnumerator()
        >>> fake.add(Path("/r"), "a.txt", head_to_index=StatusKind.MODIFIED)
        >>> snapshot = build_snapshot(Path("/r"), fake)
        >>> assert snapshot.get("a.txt") is StatusKind.MODIFIED
        >>> assert fake.call_count(Path("/r")) == 1
    """

    pairs: dict[Path, list[DeltaPair]] = field(default_factory=dict)
    clean: dict[Path, bool] = field(default_factory=dict)
    failures: dict[Path, Exception] = field(default_factory=dict)
    calls: list[Path] = field(default_factory=list)
    clean_checks: list[Path] = field(default_factory=list)
    gate: threading.Event | None = None
    started: threading.Event = field(default_factory=threading.Event)

    # =========================================================================
    # Test Setup Helpers
    # =========================================================================

    def add(
        self,
        root: Path,
        path: str | None,
        *,
        head_to_index: StatusKind | None = None,
        index_to_workdir: StatusKind | None = None,
    ) -> None:
        """Add one enumerated file to a repository.

        Args:
            root: The repository root.
            path: Repository-relative path (None simulates a broken delta).
            head_to_index: Status in the committed-vs-staged view.
            index_to_workdir: Status in the staged-vs-working-tree view.
        """
        pair = DeltaPair(
            head_to_index=StatusDelta(path, head_to_index)
            if head_to_index is not None
            else None,
            index_to_workdir=StatusDelta(path, index_to_workdir)
            if index_to_workdir is not None
            else None,
        )
        self.pairs.setdefault(root, []).append(pair)

    def fail(self, root: Path, error: Exception | None = None) -> None:
        """Make enumerations and clean checks for root raise an error."""
        self.failures[root] = error or EnumerationError("injected failure", root=root)

    def call_count(self, root: Path | None = None) -> int:
        """Return how many enumerations were started, optionally for one root."""
        if root is None:
            return len(self.calls)
        return self.calls.count(root)

    # =========================================================================
    # StatusEnumerator Protocol Methods
    # =========================================================================

    def enumerate_status(
        self, root: Path, options: StatusOptions
    ) -> Iterator[DeltaPair]:
        """Enumerate the configured pairs for root.

        The options are accepted for protocol compatibility and ignored.
        """
        self.calls.append(root)
        self.started.set()
        error = self.failures.get(root)
        pairs = list(self.pairs.get(root, []))
        gate = self.gate

        def _iterate() -> Iterator[DeltaPair]:
            if gate is not None:
                gate.wait()
            if error is not None:
                raise error
            yield from pairs

        return _iterate()

    def is_working_directory_clean(self, root: Path) -> bool:
        """Return the configured clean-check answer for root (default True)."""
        self.clean_checks.append(root)
        error = self.failures.get(root)
        if error is not None:
            raise error
        return self.clean.get(root, True)
