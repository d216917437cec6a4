"""
In-memory paste store.
Handles paste creation, view counting, and lazy eviction on access.
"""
import logging
import math
import threading
import time
import uuid
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Optional

logger = logging.getLogger(__name__)


def current_time_ms() -> int:
    """Wall-clock time in milliseconds since epoch."""
    return int(time.time() * 1000)


@dataclass
class Paste:
    """A stored paste and its constraints."""

    id: str
    content: str
    created_at: int
    expires_at: Optional[int] = None
    max_views: Optional[int] = None
    view_count: int = 0

    def is_expired(self, now: int) -> bool:
        return self.expires_at is not None and now >= self.expires_at

    def is_exhausted(self) -> bool:
        return self.max_views is not None and self.view_count > self.max_views

    @property
    def views_remaining(self) -> Optional[int]:
        if self.max_views is None:
            return None
        return max(0, self.max_views - self.view_count)


@dataclass(frozen=True)
class PasteSnapshot:
    """What a successful retrieval hands back to the caller."""

    content: str
    created_at: int
    expires_at: Optional[int]
    views_remaining: Optional[int]


class PasteStore:
    """
    Mapping from paste id to paste record.

    Expiry is checked lazily: a paste is only discovered stale (and deleted)
    when someone tries to retrieve it, or when sweep() is called.
    """

    def __init__(self):
        self._pastes: Dict[str, Paste] = {}
        # increment, check and delete must happen as one unit
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._pastes)

    def __contains__(self, paste_id: str) -> bool:
        return paste_id in self._pastes

    def create(
        self,
        content: str,
        ttl_seconds: Optional[float] = None,
        max_views: Optional[int] = None,
        now: Optional[int] = None,
    ) -> Paste:
        """
        Store a new paste.

        Args:
            content: Validated, trimmed text content
            ttl_seconds: Optional time-to-live in seconds
            max_views: Optional maximum view count
            now: Creation time in ms (defaults to wall-clock time)

        Returns:
            The stored paste record
        """
        if now is None:
            now = current_time_ms()

        expires_at = None
        if ttl_seconds is not None:
            # exact arithmetic: huge finite ttls must not overflow to inf
            expires_at = math.ceil(now + Fraction(ttl_seconds) * 1000)

        paste = Paste(
            id=str(uuid.uuid4()),
            content=content,
            created_at=now,
            expires_at=expires_at,
            max_views=max_views,
        )
        with self._lock:
            self._pastes[paste.id] = paste

        logger.info(
            f"Paste {paste.id} created (expires_at={expires_at}, max_views={max_views})"
        )
        return paste

    def retrieve(self, paste_id: str, now: int) -> Optional[PasteSnapshot]:
        """
        Fetch a paste, counting the attempt as a view.

        The view count is incremented before the constraints are checked, so
        a paste with max_views=N serves exactly N retrievals and the (N+1)th
        evicts it.

        Args:
            paste_id: Unique paste identifier
            now: Current time in ms

        Returns:
            Snapshot of the paste, or None if unknown, expired or exhausted
        """
        with self._lock:
            paste = self._pastes.get(paste_id)
            if paste is None:
                logger.warning(f"Paste {paste_id} not found")
                return None

            paste.view_count += 1

            if paste.is_expired(now) or paste.is_exhausted():
                del self._pastes[paste_id]
                reason = "expired" if paste.is_expired(now) else "view limit exceeded"
                logger.info(f"Paste {paste_id} evicted ({reason})")
                return None

            return PasteSnapshot(
                content=paste.content,
                created_at=paste.created_at,
                expires_at=paste.expires_at,
                views_remaining=paste.views_remaining,
            )

    def sweep(self, now: int) -> int:
        """Delete every time-expired paste. Returns how many were removed."""
        with self._lock:
            expired = [pid for pid, paste in self._pastes.items() if paste.is_expired(now)]
            for pid in expired:
                del self._pastes[pid]

        if expired:
            logger.info(f"Sweeper evicted {len(expired)} expired paste(s)")
        return len(expired)
