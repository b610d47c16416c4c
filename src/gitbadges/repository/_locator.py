"""Repository root location.

Only the exact path offered by the caller is examined; ancestors are never
searched.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Final

from gitbadges.utils._logging import create_null_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

GIT_MARKER: Final = ".git"


def locate_repository(
    path: Path | str,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> Path | None:
    """Return the repository root for a path, or None.

    A path whose last component is ``.git`` or ends with ``.git`` (bare
    repository convention) is itself the root. Otherwise the path is a root
    when it contains a ``.git`` entry.

    Args:
        path: The filesystem path to examine.
        logger: Logger for reachability failures.

    Returns:
        The repository root path, or None if the path is not a repository.
    """
    candidate = Path(path)
    if candidate.name.lower().endswith(GIT_MARKER):
        return candidate

    marker = os.path.join(candidate, GIT_MARKER)
    try:
        os.lstat(marker)
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as e:
        log = logger if logger is not None else create_null_logger()
        log.warning("repository_probe_failed", path=str(candidate), error=str(e))
        return None
    return candidate
