"""Tests for the in-memory vote guard."""

import pytest

from app.services.vote_guard import VoteGuard, client_fingerprint


@pytest.fixture
def guard(fake_clock):
    return VoteGuard(max_entries=3, ttl_seconds=3600, clock=fake_clock)


@pytest.mark.unit
class TestVoteGuard:
    """Test vote pattern checks."""

    def test_first_vote_allowed(self, guard):
        assert guard.check("client", "rule", "up") == (True, None, None)
        assert guard.previous_vote("client", "rule") == "up"

    def test_vote_within_one_second_rejected(self, guard, fake_clock):
        guard.check("client", "rule", "up")
        fake_clock.advance(0.5)

        allowed, reason, previous = guard.check("client", "rule", "down")

        assert not allowed
        assert reason == "Please wait a moment before voting again"
        assert previous == "up"
        assert guard.previous_vote("client", "rule") == "up"

    def test_too_many_rapid_changes_rejected(self, guard, fake_clock):
        guard.check("client", "rule", "up")
        for vote in ["down", "up", "down"]:
            fake_clock.advance(2)
            assert guard.check("client", "rule", vote)[0]

        fake_clock.advance(2)
        allowed, reason, _ = guard.check("client", "rule", "up")

        assert not allowed
        assert reason == "Too many vote changes. Please try again later"

    def test_rapid_changes_reset_after_a_minute(self, guard, fake_clock):
        guard.check("client", "rule", "up")
        for vote in ["down", "up", "down"]:
            fake_clock.advance(2)
            guard.check("client", "rule", vote)

        fake_clock.advance(61)
        assert guard.check("client", "rule", "up")[0]

    def test_votes_tracked_per_client_and_rule(self, guard):
        guard.check("a", "rule", "up")
        assert guard.check("b", "rule", "down")[0]
        assert guard.check("a", "other", "down")[0]
        assert guard.previous_vote("b", "rule") == "down"

    def test_entries_expire(self, guard, fake_clock):
        guard.check("client", "rule", "up")
        fake_clock.advance(3601)
        assert guard.previous_vote("client", "rule") is None

    def test_least_recently_used_evicted(self, guard):
        for client in ["a", "b", "c", "d"]:
            guard.check(client, "rule", "up")
        assert guard.previous_vote("a", "rule") is None
        assert guard.previous_vote("d", "rule") == "up"

    def test_client_fingerprint_is_stable(self):
        assert client_fingerprint("1.2.3.4", "ua") == client_fingerprint("1.2.3.4", "ua")
        assert client_fingerprint("1.2.3.4", "ua") != client_fingerprint("1.2.3.5", "ua")
        assert len(client_fingerprint("1.2.3.4", "ua")) == 64
