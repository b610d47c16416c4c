"""Observation controller.

This module provides the ObservationController, the single entry point the
host calls. It owns the observation state machine and runs snapshot builds
on a dedicated worker so badge queries never wait for an enumeration.
"""

import concurrent.futures
import functools
import os
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Self, final

from gitbadges.badges._resolver import resolve_badge
from gitbadges.enums import BadgeId, BuildState
from gitbadges.exceptions import (
    BuildCancelledError,
    EnumerationError,
    SnapshotBuildError,
)
from gitbadges.observation._models import (
    ObservationState,
    ObservingNonRepo,
    ObservingRepo,
    Unobserved,
)
from gitbadges.repository._locator import locate_repository
from gitbadges.status._snapshot import StatusSnapshot, build_snapshot
from gitbadges.utils._logging import create_null_logger

if TYPE_CHECKING:
    from types import TracebackType

    from structlog.typing import FilteringBoundLogger

    from gitbadges.repository._protocol import StatusEnumerator


def _absolute(path: Path | str) -> Path:
    return Path(os.path.abspath(path))


@final
class ObservationController:
    """Owns the observed repository and its status snapshot.

    Entering a directory inside the observed repository keeps the current
    snapshot. Entering any other directory drops it, locates the repository
    owning the new directory and starts exactly one snapshot build for it.
    A build whose repository is no longer observed when it finishes is
    discarded.

    Example:
        >>> with ObservationController(GitStatusEnumerator()) as controller:
        ...     controller.begin_observing("/path/to/repo")
        ...     controller.wait_until_idle()
        ...     badge = controller.badge_for("/path/to/repo/README.md")
    """

    __slots__ = (
        "_background",
        "_build_counter",
        "_cancel",
        "_closed",
        "_enumerator",
        "_executor",
        "_future",
        "_locate",
        "_lock",
        "_logger",
        "_state",
    )

    def __init__(
        self,
        enumerator: "StatusEnumerator",
        *,
        background: bool = True,
        locate: Callable[[Path], Path | None] | None = None,
        logger: "FilteringBoundLogger | None" = None,
    ) -> None:
        """Initialize the controller.

        Args:
            enumerator: Status enumeration and clean check capability.
            background: Build snapshots on a worker thread. When False,
                builds run on the thread calling begin_observing.
            locate: Repository locator. Defaults to locate_repository.
            logger: Logger for lifecycle events.
        """
        self._logger: FilteringBoundLogger = (
            logger if logger is not None else create_null_logger()
        )
        self._enumerator = enumerator
        self._locate: Callable[[Path], Path | None] = (
            locate
            if locate is not None
            else functools.partial(locate_repository, logger=self._logger)
        )
        self._background = background
        self._executor: ThreadPoolExecutor | None = (
            ThreadPoolExecutor(max_workers=1, thread_name_prefix="gitbadges-snapshot")
            if background
            else None
        )
        self._lock = threading.Lock()
        self._state: ObservationState = Unobserved()
        self._build_counter = 0
        self._cancel: threading.Event | None = None
        self._future: Future[None] | None = None
        self._closed = False

    # =========================================================================
    # State
    # =========================================================================

    @property
    def state(self) -> ObservationState:
        """Return the current observation state."""
        with self._lock:
            return self._state

    @property
    def snapshot(self) -> StatusSnapshot | None:
        """Return the installed snapshot, or None if none is ready."""
        state = self.state
        if isinstance(state, ObservingRepo):
            return state.snapshot
        return None

    # =========================================================================
    # Host Entry Points
    # =========================================================================

    def begin_observing(self, directory: Path | str) -> None:
        """Observe a directory the host has started displaying.

        Args:
            directory: The directory being displayed.
        """
        target = _absolute(directory)

        with self._lock:
            if self._closed:
                self._logger.warning(
                    "observation_after_close", directory=str(target)
                )
                return

            state = self._state
            if isinstance(state, ObservingRepo) and str(target).startswith(
                str(state.root)
            ):
                self._logger.debug(
                    "observation_kept",
                    directory=str(target),
                    root=str(state.root),
                    build=state.build.value,
                )
                return

            self._cancel_pending()
            self._state = Unobserved()

            root = self._locate(target)
            if root is None:
                self._state = ObservingNonRepo(target)
                self._logger.debug("observation_not_repository", directory=str(target))
                return

            self._build_counter += 1
            build_id = self._build_counter
            cancel = threading.Event()
            self._cancel = cancel
            self._state = ObservingRepo(root=root, build_id=build_id)
            self._logger.info(
                "observation_started", root=str(root), build_id=build_id
            )

            if self._executor is not None:
                self._logger.debug(
                    "snapshot_build_scheduled", root=str(root), build_id=build_id
                )
                self._future = self._executor.submit(
                    self._run_build, root, build_id, cancel
                )
                return

        self._run_build(root, build_id, cancel)

    def end_observing(self, directory: Path | str) -> None:
        """Note that the host stopped displaying a directory.

        The cached state is kept until a directory outside the observed
        repository is entered.
        """
        self._logger.debug("observation_ended", directory=str(_absolute(directory)))

    def badge_for(
        self, path: Path | str, *, is_directory: bool = False
    ) -> BadgeId | None:
        """Resolve the badge for a path against the current state.

        Args:
            path: The path the host wants a badge for.
            is_directory: Whether path is a directory.

        Returns:
            The badge, or None when no badge applies or the observed
            repository has no snapshot yet.
        """
        target = _absolute(path)
        with self._lock:
            state = self._state

        if isinstance(state, ObservingRepo):
            if state.snapshot is None:
                return None
            return resolve_badge(
                target,
                is_directory=is_directory,
                snapshot=state.snapshot,
                clean_check=self._enumerator.is_working_directory_clean,
                locate=self._locate,
            )

        try:
            return resolve_badge(
                target,
                is_directory=is_directory,
                snapshot=None,
                clean_check=self._enumerator.is_working_directory_clean,
                locate=self._locate,
            )
        except EnumerationError as e:
            self._logger.warning("clean_check_failed", path=str(target), error=str(e))
            return None

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def wait_until_idle(self, timeout: float | None = None) -> bool:
        """Wait for the most recently scheduled build to finish.

        Args:
            timeout: Maximum number of seconds to wait, or None to wait
                indefinitely.

        Returns:
            True if no build is running, False if the timeout expired.
        """
        with self._lock:
            future = self._future
        if future is None:
            return True
        done, _ = concurrent.futures.wait([future], timeout=timeout)
        return bool(done)

    def close(self, *, wait: bool = True) -> None:
        """Cancel pending work and shut the worker down.

        Later begin_observing calls are ignored. Badge queries keep answering
        from the last installed state.

        Args:
            wait: Wait for a running build to stop.
        """
        with self._lock:
            self._closed = True
            self._cancel_pending()
        if self._executor is not None:
            self._executor.shutdown(wait=wait, cancel_futures=True)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: "TracebackType | None",
    ) -> None:
        self.close()

    # =========================================================================
    # Builds
    # =========================================================================

    def _cancel_pending(self) -> None:
        """Stop the current build. Callers hold the lock.

        A build still queued behind another never starts; a running build
        stops at its next cancellation check.
        """
        if self._cancel is not None:
            self._cancel.set()
            self._cancel = None
        if self._future is not None:
            _ = self._future.cancel()

    def _run_build(self, root: Path, build_id: int, cancel: threading.Event) -> None:
        if cancel.is_set():
            self._logger.debug(
                "snapshot_build_cancelled", root=str(root), build_id=build_id
            )
            return

        try:
            snapshot = build_snapshot(
                root,
                self._enumerator,
                cancelled=cancel.is_set,
                logger=self._logger,
            )
        except BuildCancelledError:
            self._logger.debug(
                "snapshot_build_cancelled", root=str(root), build_id=build_id
            )
            return
        except (SnapshotBuildError, EnumerationError) as e:
            self._logger.warning(
                "snapshot_build_failed",
                root=str(root),
                build_id=build_id,
                error=str(e),
            )
            self._install(root, build_id, BuildState.FAILED, None)
            return

        self._install(root, build_id, BuildState.READY, snapshot)

    def _install(
        self,
        root: Path,
        build_id: int,
        build: BuildState,
        snapshot: StatusSnapshot | None,
    ) -> None:
        with self._lock:
            state = self._state
            if isinstance(state, ObservingRepo) and state.build_id == build_id:
                self._state = replace(state, build=build, snapshot=snapshot)
                self._cancel = None
                return

        self._logger.info(
            "stale_snapshot_discarded",
            root=str(root),
            build_id=build_id,
            build=build.value,
        )
