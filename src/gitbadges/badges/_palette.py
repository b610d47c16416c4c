"""Badge palette registered with the host file browser."""

from dataclasses import dataclass
from typing import Final

from gitbadges.enums import BadgeId


@dataclass(frozen=True, slots=True)
class BadgeAsset:
    """Visual asset associated with a badge identifier.

    Attributes:
        badge: The badge identifier.
        image: Name of the host image drawn for the badge.
        label: Label shown by the host alongside the badge.
    """

    badge: BadgeId
    image: str
    label: str


DEFAULT_PALETTE: Final[tuple[BadgeAsset, ...]] = (
    BadgeAsset(BadgeId.CAUTION, "NSCaution", "Caution"),
    BadgeAsset(BadgeId.GREEN, "NSStatusAvailable", "Green"),
    BadgeAsset(BadgeId.ORANGE, "NSStatusPartiallyAvailable", "Orange"),
    BadgeAsset(BadgeId.RED, "NSStatusUnavailable", "Red"),
    BadgeAsset(BadgeId.PLUS, "NSAddTemplate", "Plus"),
    BadgeAsset(BadgeId.TRANSPARENT, "NSStatusNone", "Transparent"),
    BadgeAsset(BadgeId.CLEAN_REPO, "git-branch", "Clean Repo"),
    BadgeAsset(BadgeId.MODIFIED_REPO, "git-branch-orange", "Modified Repo"),
)


def palette_by_badge(
    palette: tuple[BadgeAsset, ...] = DEFAULT_PALETTE,
) -> dict[BadgeId, BadgeAsset]:
    """Index a palette by badge identifier."""
    return {asset.badge: asset for asset in palette}
