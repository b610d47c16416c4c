"""Observation lifecycle for gitbadges.

Classes:
    ObservationController: Owns the observed repository and its snapshot.

States:
    Unobserved, ObservingNonRepo, ObservingRepo
"""

from gitbadges.observation._controller import ObservationController
from gitbadges.observation._models import (
    ObservationState,
    ObservingNonRepo,
    ObservingRepo,
    Unobserved,
)

__all__ = [
    "ObservationController",
    "ObservationState",
    "ObservingNonRepo",
    "ObservingRepo",
    "Unobserved",
]
