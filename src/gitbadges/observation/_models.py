"""Observation states.

The controller is always in exactly one of these states:
- Unobserved: Nothing is observed (initial state, and transiently while a
  newly entered directory is being located)
- ObservingNonRepo: The observed directory is not a repository root
- ObservingRepo: A repository is observed; its snapshot is pending, ready,
  or failed to build
"""

from dataclasses import dataclass
from pathlib import Path  # noqa: TC003 - Used in runtime type annotations

from gitbadges.enums import BuildState
from gitbadges.status._snapshot import StatusSnapshot  # noqa: TC001


@dataclass(frozen=True, slots=True)
class Unobserved:
    """No directory is observed."""


@dataclass(frozen=True, slots=True)
class ObservingNonRepo:
    """The observed directory is not a repository root.

    Attributes:
        directory: The observed directory.
    """

    directory: Path


@dataclass(frozen=True, slots=True)
class ObservingRepo:
    """A repository is observed.

    Attributes:
        root: The repository root.
        build_id: Identifier of the snapshot build started for this root.
        build: Progress of that build.
        snapshot: The built snapshot, set only when build is READY.
    """

    root: Path
    build_id: int
    build: BuildState = BuildState.PENDING
    snapshot: StatusSnapshot | None = None


ObservationState = Unobserved | ObservingNonRepo | ObservingRepo
