"""Merging of the two comparison views into one status per file."""

from gitbadges.enums import StatusKind
from gitbadges.exceptions import MergeIdentityError
from gitbadges.repository._models import DeltaPair, StatusDelta


def merge_status(first: StatusKind, second: StatusKind) -> StatusKind:
    """Return the more severe of two statuses.

    Severity is the raw ordinal of the status kind, so the merge is
    commutative and always returns one of its arguments.
    """
    return first if first >= second else second


def _identified(delta: StatusDelta) -> str:
    if delta.path is None:
        msg = f"Status delta has no file path (status {delta.status.name})"
        raise MergeIdentityError(msg)
    return delta.path


def merge_deltas(pair: DeltaPair) -> tuple[str, StatusKind]:
    """Merge both comparison views of one file.

    The path comes from the committed-vs-staged view when that view reports
    the file, otherwise from the staged-vs-working view.

    Args:
        pair: The per-view deltas delivered for one file.

    Returns:
        Tuple of (repository-relative path, merged status).

    Raises:
        MergeIdentityError: If a present delta has no path or the pair
            carries no delta at all.
    """
    head, workdir = pair.head_to_index, pair.index_to_workdir

    if head is not None:
        path = _identified(head)
        if workdir is None:
            return path, head.status
        _ = _identified(workdir)
        return path, merge_status(head.status, workdir.status)

    if workdir is not None:
        return _identified(workdir), workdir.status

    msg = "Status pair carries no delta in either view"
    raise MergeIdentityError(msg)
