"""Tests for engagement counter updates."""

import pytest
from sqlalchemy import event

from app.models.rule import Rule
from app.services import engagement


@pytest.mark.unit
class TestIncrementCounter:
    """Test atomic view/copy increments."""

    def test_increment_view_count(self, db_session, test_rule):
        assert engagement.increment_counter(db_session, test_rule.slug, "view_count") == 11
        assert engagement.increment_counter(db_session, test_rule.slug, "view_count") == 12

    def test_increment_copy_count(self, db_session, test_rule):
        assert engagement.increment_counter(db_session, test_rule.slug, "copy_count") == 3

    def test_increments_are_monotonic(self, db_session, test_rule):
        values = [
            engagement.increment_counter(db_session, test_rule.slug, "view_count")
            for _ in range(5)
        ]
        assert values == sorted(values)
        assert values[-1] == 15

    def test_increment_reads_value_from_its_own_update(
        self, db_engine, db_session, test_rule
    ):
        statements = []

        def record(conn, cursor, statement, parameters, context, executemany):
            statements.append(statement)

        event.listen(db_engine, "before_cursor_execute", record)
        try:
            value = engagement.increment_counter(db_session, test_rule.slug, "copy_count")
        finally:
            event.remove(db_engine, "before_cursor_execute", record)

        assert value == 3
        assert len(statements) == 1
        assert statements[0].lstrip().upper().startswith("UPDATE")
        assert "RETURNING" in statements[0].upper()

    def test_unknown_slug_returns_none(self, db_session):
        assert engagement.increment_counter(db_session, "missing", "view_count") is None

    def test_unpublished_rule_not_counted(self, db_session, test_rule):
        test_rule.is_published = False
        db_session.commit()
        assert engagement.increment_counter(db_session, test_rule.slug, "view_count") is None

    def test_rejects_unknown_counter(self, db_session, test_rule):
        with pytest.raises(ValueError):
            engagement.increment_counter(db_session, test_rule.slug, "upvotes")


@pytest.mark.unit
class TestVoteDelta:
    """Test vote transition table."""

    @pytest.mark.parametrize(
        "previous,new,expected",
        [
            (None, "up", (1, 0)),
            (None, "down", (0, 1)),
            ("up", "down", (-1, 1)),
            ("down", "up", (1, -1)),
            ("up", None, (-1, 0)),
            ("down", None, (0, -1)),
            ("up", "up", (-1, 0)),
            ("down", "down", (0, -1)),
            (None, None, (0, 0)),
        ],
    )
    def test_transitions(self, previous, new, expected):
        assert engagement.vote_delta(previous, new) == expected


@pytest.mark.unit
class TestApplyVote:
    """Test vote counter updates."""

    def test_apply_upvote(self, db_session, test_rule):
        stats = engagement.apply_vote(db_session, test_rule.slug, 1, 0)
        assert (stats.upvotes, stats.downvotes) == (2, 0)

    def test_switch_vote(self, db_session, test_rule):
        stats = engagement.apply_vote(db_session, test_rule.slug, -1, 1)
        assert (stats.upvotes, stats.downvotes) == (0, 1)

    def test_counters_never_negative(self, db_session, test_rule):
        stats = engagement.apply_vote(db_session, test_rule.slug, 0, -1)
        assert stats.downvotes == 0

        rule = db_session.query(Rule).filter_by(slug=test_rule.slug).one()
        db_session.refresh(rule)
        assert rule.downvotes == 0

    def test_unknown_slug_returns_none(self, db_session):
        assert engagement.apply_vote(db_session, "missing", 1, 0) is None


@pytest.mark.unit
class TestGetStats:
    """Test stats lookup."""

    def test_known_slug(self, db_session, test_rule):
        stats = engagement.get_stats(db_session, test_rule.slug)
        assert stats.model_dump() == {
            "upvotes": 1,
            "downvotes": 0,
            "view_count": 10,
            "copy_count": 2,
        }

    def test_unknown_slug(self, db_session):
        assert engagement.get_stats(db_session, "missing") is None

    def test_empty_slug_has_no_rule(self, db_session, test_rule):
        assert engagement.get_rule(db_session, "") is None
