"""File browser extension adapter.

SyncExtension registers the badge palette with a host and forwards the
host's directory and badge callbacks to an ObservationController.
"""

import os
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, final

from gitbadges.badges._palette import DEFAULT_PALETTE, BadgeAsset
from gitbadges.enums import BadgeId  # noqa: TC001
from gitbadges.observation._controller import ObservationController
from gitbadges.repository._enumerator import GitStatusEnumerator
from gitbadges.utils._logging import create_null_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from gitbadges.config import Config
    from gitbadges.host._protocol import BadgeHost
    from gitbadges.repository._protocol import StatusEnumerator


@final
class SyncExtension:
    """Adapter between a badge host and the observation controller.

    Example:
        >>> extension = SyncExtension(host, ObservationController(GitStatusEnumerator()))
        >>> extension.begin_observing_directory("/path/to/repo")
        >>> extension.request_badge_identifier("/path/to/repo/a.txt", is_directory=False)
    """

    __slots__ = ("_controller", "_host", "_logger", "_observed_directories")

    def __init__(
        self,
        host: "BadgeHost",
        controller: "ObservationController",
        *,
        observed_directories: Sequence[str] = ("/",),
        palette: Sequence[BadgeAsset] = DEFAULT_PALETTE,
        logger: "FilteringBoundLogger | None" = None,
    ) -> None:
        """Register the palette and observed directories with the host.

        Args:
            host: The badge host.
            controller: The controller answering badge requests.
            observed_directories: Directory trees the host should report.
            palette: Badge assets to register.
            logger: Logger for unresolved badge requests.
        """
        self._host = host
        self._controller = controller
        self._logger = logger if logger is not None else create_null_logger()
        self._observed_directories = tuple(observed_directories)

        host.set_observed_directories(list(self._observed_directories))
        for asset in palette:
            host.set_badge_image(asset.badge, image=asset.image, label=asset.label)

    @classmethod
    def from_config(
        cls,
        host: "BadgeHost",
        config: "Config",
        *,
        enumerator: "StatusEnumerator | None" = None,
        logger: "FilteringBoundLogger | None" = None,
    ) -> "SyncExtension":
        """Create an extension and its controller from the observation config.

        The controller builds snapshots in the background unless
        ``observation.background_builds`` is false. Call close() when the host
        unloads the extension.
        """
        controller = ObservationController(
            enumerator
            if enumerator is not None
            else GitStatusEnumerator(logger=logger),
            background=config.observation.background_builds,
            logger=logger,
        )
        return cls(
            host,
            controller,
            observed_directories=config.observation.observed_directories,
            logger=logger,
        )

    @property
    def observed_directories(self) -> tuple[str, ...]:
        """Return the directory trees registered with the host."""
        return self._observed_directories

    def begin_observing_directory(self, directory: Path | str) -> None:
        """Handle the host starting to display a directory."""
        self._controller.begin_observing(directory)

    def end_observing_directory(self, directory: Path | str) -> None:
        """Handle the host no longer displaying a directory."""
        self._controller.end_observing(directory)

    def request_badge_identifier(
        self, path: Path | str, *, is_directory: bool
    ) -> BadgeId | None:
        """Resolve a badge for a path and push it to the host.

        Args:
            path: The path the host wants a badge for.
            is_directory: Whether path is a directory.

        Returns:
            The badge drawn, or None if no badge applies.
        """
        badge = self._controller.badge_for(path, is_directory=is_directory)
        if badge is None:
            self._logger.debug("badge_unresolved", path=str(path))
            return None

        self._host.set_badge_identifier(badge, os.fspath(path))
        return badge

    def close(self) -> None:
        """Stop the controller's background work."""
        self._controller.close()
