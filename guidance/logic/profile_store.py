"""
Profile Store

Process-local holder for the current GuidanceSnapshot.

The store does no computing: the runner builds snapshots, the store swaps
them in wholesale and tells subscribers. Nothing survives a restart.
"""

import logging
from typing import Callable, List

from .constants import AVAILABLE_INTERESTS, AVAILABLE_SKILLS
from .contracts import GuidanceSnapshot
from .runner import clear

logger = logging.getLogger(__name__)

Subscriber = Callable[[GuidanceSnapshot], None]


class ProfileStore:
    """Current snapshot plus a list of change callbacks."""

    def __init__(self):
        self._snapshot: GuidanceSnapshot = clear()
        self._subscribers: List[Subscriber] = []

    @property
    def snapshot(self) -> GuidanceSnapshot:
        return self._snapshot

    @property
    def available_interests(self) -> List[str]:
        return list(AVAILABLE_INTERESTS)

    @property
    def available_skills(self) -> List[str]:
        return list(AVAILABLE_SKILLS)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for every published snapshot.

        Returns:
            Function that removes the callback again
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, snapshot: GuidanceSnapshot) -> GuidanceSnapshot:
        """Replace the current snapshot and notify subscribers in registration order."""
        self._snapshot = snapshot
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception as e:
                logger.error(f"❌ Profile subscriber {callback!r} failed: {e}")
        return snapshot

    def reset(self) -> GuidanceSnapshot:
        return self.publish(clear())


# Shared store used by the profile routes
profile_store = ProfileStore()
