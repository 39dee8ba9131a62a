"""In-memory vote pattern tracking."""

import hashlib
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from app.core.config import settings

MIN_SECONDS_BETWEEN_VOTES = 1
RAPID_CHANGE_WINDOW_SECONDS = 60
MAX_RAPID_CHANGES = 3


@dataclass
class VoteRecord:
    last_vote: Optional[str]
    last_vote_time: float
    vote_count: int = 1
    rapid_changes: int = 0


def client_fingerprint(ip_address: str, user_agent: str) -> str:
    """Stable client identifier from IP address and user agent."""
    return hashlib.sha256((ip_address + user_agent).encode("utf-8")).hexdigest()


class VoteGuard:
    """
    Tracks the last vote per client and rule to block vote flooding.

    Entries expire after ``ttl_seconds``; beyond ``max_entries`` the least
    recently used entry is evicted.
    """

    def __init__(
        self,
        max_entries: int = 10000,
        ttl_seconds: float = 60 * 60 * 24,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._records: "OrderedDict[str, VoteRecord]" = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def _key(client_id: str, slug: str) -> str:
        return f"{client_id}:{slug}"

    def _get(self, key: str, now: float) -> Optional[VoteRecord]:
        record = self._records.get(key)
        if record is None:
            return None
        if now - record.last_vote_time > self.ttl_seconds:
            del self._records[key]
            return None
        self._records.move_to_end(key)
        return record

    def _set(self, key: str, record: VoteRecord) -> None:
        self._records[key] = record
        self._records.move_to_end(key)
        while len(self._records) > self.max_entries:
            self._records.popitem(last=False)

    def previous_vote(self, client_id: str, slug: str) -> Optional[str]:
        with self._lock:
            record = self._get(self._key(client_id, slug), self.clock())
            return record.last_vote if record else None

    def check(
        self, client_id: str, slug: str, new_vote: Optional[str]
    ) -> Tuple[bool, Optional[str], Optional[str]]:
        """
        Validate and record a vote.

        Returns ``(allowed, reason, previous_vote)``. A rejected vote leaves
        the recorded state untouched apart from the rapid-change counter.
        """
        key = self._key(client_id, slug)
        with self._lock:
            now = self.clock()
            record = self._get(key, now)

            if record is None:
                self._set(key, VoteRecord(last_vote=new_vote, last_vote_time=now))
                return True, None, None

            previous = record.last_vote
            elapsed = now - record.last_vote_time

            if elapsed < MIN_SECONDS_BETWEEN_VOTES:
                return False, "Please wait a moment before voting again", previous

            if elapsed < RAPID_CHANGE_WINDOW_SECONDS:
                if record.last_vote != new_vote:
                    record.rapid_changes += 1
                    if record.rapid_changes > MAX_RAPID_CHANGES:
                        return (
                            False,
                            "Too many vote changes. Please try again later",
                            previous,
                        )
            else:
                record.rapid_changes = 0

            record.last_vote = new_vote
            record.last_vote_time = now
            record.vote_count += 1
            self._set(key, record)
            return True, None, previous

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


vote_guard = VoteGuard(
    max_entries=settings.VOTE_GUARD_MAX_ENTRIES,
    ttl_seconds=settings.VOTE_GUARD_TTL_SECONDS,
)
