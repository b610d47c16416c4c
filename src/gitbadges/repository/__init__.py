"""Repository access for gitbadges.

This package locates repositories and enumerates their per-file status
through a small protocol, so the snapshot builder works the same against
real repositories and test fakes.

Functions:
    locate_repository: Decide whether a path is a repository root.

Classes:
    StatusEnumerator: Runtime-checkable protocol for status enumeration.
    GitStatusEnumerator: GitPython-backed enumerator.
    FakeStatusEnumerator: In-memory enumerator for tests.

Models:
    StatusDelta: One file's status in one comparison view.
    DeltaPair: Both comparison views for one file.
    StatusOptions: Flags controlling an enumeration.
"""

from gitbadges.repository._enumerator import GitStatusEnumerator, parse_porcelain_v2
from gitbadges.repository._fake import FakeStatusEnumerator
from gitbadges.repository._locator import GIT_MARKER, locate_repository
from gitbadges.repository._models import (
    CLEAN_CHECK_OPTIONS,
    SNAPSHOT_OPTIONS,
    DeltaPair,
    StatusDelta,
    StatusOptions,
)
from gitbadges.repository._protocol import StatusEnumerator

__all__ = [
    "CLEAN_CHECK_OPTIONS",
    "GIT_MARKER",
    "SNAPSHOT_OPTIONS",
    "DeltaPair",
    "FakeStatusEnumerator",
    "GitStatusEnumerator",
    "StatusDelta",
    "StatusEnumerator",
    "StatusOptions",
    "locate_repository",
    "parse_porcelain_v2",
]
