"""Engagement counters: views, copies and votes.

All counter changes are issued as single ``UPDATE`` statements so concurrent
requests against the same row never lose increments.
"""

import logging
from typing import Optional, Tuple

from sqlalchemy import case, update
from sqlalchemy.orm import Session

from app.models.rule import Rule
from app.schemas.rule import RuleStats

logger = logging.getLogger(__name__)

COUNTER_FIELDS = ("view_count", "copy_count")


def get_rule(db: Session, slug: str) -> Optional[Rule]:
    """Published rule by slug, or None."""
    if not slug:
        return None
    return (
        db.query(Rule)
        .filter(Rule.slug == slug, Rule.is_published == True)
        .first()
    )


def get_stats(db: Session, slug: str) -> Optional[RuleStats]:
    row = (
        db.query(Rule.upvotes, Rule.downvotes, Rule.view_count, Rule.copy_count)
        .filter(Rule.slug == slug, Rule.is_published == True)
        .first()
    )
    if row is None:
        return None
    return RuleStats(
        upvotes=row.upvotes,
        downvotes=row.downvotes,
        view_count=row.view_count,
        copy_count=row.copy_count,
    )


def increment_counter(db: Session, slug: str, field: str) -> Optional[int]:
    """
    Atomically add one to ``view_count`` or ``copy_count``.

    Returns the new value, or None when no published rule has this slug.
    """
    if field not in COUNTER_FIELDS:
        raise ValueError(f"Unknown counter: {field}")

    column = getattr(Rule, field)
    # RETURNING yields the value written by this statement, not a later one
    new_value = db.execute(
        update(Rule)
        .where(Rule.slug == slug, Rule.is_published == True)
        .values({column: column + 1})
        .returning(column)
        .execution_options(synchronize_session=False)
    ).scalar_one_or_none()
    if new_value is None:
        db.rollback()
        return None
    db.commit()

    return new_value


def vote_delta(previous: Optional[str], new: Optional[str]) -> Tuple[int, int]:
    """
    Counter changes for moving from one vote to another.

    Voting the same way twice toggles the vote off. Returns
    ``(upvote_delta, downvote_delta)``.
    """
    if previous == new:
        new = None

    up = (1 if new == "up" else 0) - (1 if previous == "up" else 0)
    down = (1 if new == "down" else 0) - (1 if previous == "down" else 0)
    return up, down


def _clamped(column, delta: int):
    if delta >= 0:
        return column + delta
    return case((column + delta < 0, 0), else_=column + delta)


def apply_vote(
    db: Session, slug: str, up_delta: int, down_delta: int
) -> Optional[RuleStats]:
    """Atomically apply vote deltas, never letting a counter drop below zero."""
    values = {}
    if up_delta:
        values[Rule.upvotes] = _clamped(Rule.upvotes, up_delta)
    if down_delta:
        values[Rule.downvotes] = _clamped(Rule.downvotes, down_delta)

    if values:
        result = db.execute(
            update(Rule)
            .where(Rule.slug == slug, Rule.is_published == True)
            .values(values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            db.rollback()
            return None
        db.commit()

    return get_stats(db, slug)
