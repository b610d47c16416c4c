"""Host integration for gitbadges.

Classes:
    BadgeHost: Protocol for the file browser badge API.
    SyncExtension: Forwards host callbacks to an ObservationController.
"""

from gitbadges.host._extension import SyncExtension
from gitbadges.host._protocol import BadgeHost

__all__ = ["BadgeHost", "SyncExtension"]
