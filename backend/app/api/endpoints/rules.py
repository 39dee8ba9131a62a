from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from typing import Literal, Optional
import logging
import math

from app.core.config import settings
from app.core.database import get_db
from app.core.logging_config import get_client_ip, log_engagement_event
from app.models.category import Category
from app.models.rule import Rule
from app.schemas.rule import (
    Rule as RuleSchema,
    RulePage,
    RuleStats,
    VoteRequest,
    VoteResponse,
    UserVote,
    ViewResponse,
    CopyResponse,
)
from app.services import engagement
from app.services.vote_guard import client_fingerprint, vote_guard
from slowapi import Limiter
from slowapi.util import get_remote_address

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)
logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "created_at": desc(Rule.created_at),
    "popular": desc(Rule.copy_count),
    "votes": desc(Rule.upvotes),
}


def _require_rule(db: Session, slug: str) -> Rule:
    rule = engagement.get_rule(db, slug)
    if not rule:
        raise HTTPException(status_code=404, detail="Rule not found")
    return rule


def _client_id(request: Request) -> str:
    return client_fingerprint(
        get_client_ip(request), request.headers.get("user-agent", "")
    )


@router.get("/", response_model=RulePage)
def list_rules(
    category: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
    sort_by: Literal["created_at", "popular", "votes"] = "created_at",
    db: Session = Depends(get_db),
):
    """
    List published rules, optionally restricted to one category slug.

    sort_by: created_at (newest first), popular (most copied) or votes
    (most upvoted).
    """
    query = db.query(Rule).filter(Rule.is_published == True)

    if category:
        query = query.filter(Rule.categories.any(Category.slug == category))

    total = query.count()
    rules = (
        query.options(selectinload(Rule.categories))
        .order_by(SORT_COLUMNS[sort_by], Rule.id)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "rules": rules,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "total_pages": math.ceil(total / limit),
        },
    }


@router.get("/{slug}", response_model=RuleSchema)
def get_rule(slug: str, db: Session = Depends(get_db)):
    """Get a single published rule with its categories and counters."""
    return _require_rule(db, slug)


@router.get("/{slug}/stats", response_model=RuleStats)
def get_rule_stats(slug: str, db: Session = Depends(get_db)):
    stats = engagement.get_stats(db, slug)
    if stats is None:
        raise HTTPException(status_code=404, detail="Rule not found")
    return stats


@router.post("/{slug}/view", response_model=ViewResponse)
@limiter.limit(settings.RATE_LIMIT_VIEW)
def track_view(request: Request, slug: str, db: Session = Depends(get_db)):
    """Increment the view counter of a rule."""
    try:
        view_count = engagement.increment_counter(db, slug, "view_count")
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Error tracking view for {slug}")
        raise HTTPException(status_code=500, detail="Failed to track view")

    if view_count is None:
        raise HTTPException(status_code=404, detail="Rule not found")
    return {"success": True, "view_count": view_count}


@router.post("/{slug}/copy", response_model=CopyResponse)
@limiter.limit(settings.RATE_LIMIT_COPY)
def track_copy(request: Request, slug: str, db: Session = Depends(get_db)):
    """Increment the copy counter of a rule."""
    try:
        copy_count = engagement.increment_counter(db, slug, "copy_count")
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Error incrementing copy count for {slug}")
        raise HTTPException(status_code=500, detail="Failed to increment copy count")

    if copy_count is None:
        raise HTTPException(status_code=404, detail="Rule not found")
    return {"success": True, "copy_count": copy_count}


@router.get("/{slug}/vote", response_model=UserVote)
def get_user_vote(request: Request, slug: str):
    """Get the vote this client last cast on a rule."""
    return {"user_vote": vote_guard.previous_vote(_client_id(request), slug)}


@router.post("/{slug}/vote", response_model=VoteResponse)
@limiter.limit(settings.RATE_LIMIT_VOTE)
def vote(
    request: Request,
    slug: str,
    vote_request: VoteRequest,
    db: Session = Depends(get_db),
):
    """
    Cast, switch or remove a vote.

    vote_type "up" or "down" casts a vote; voting the same way again or
    sending null removes it.
    """
    _require_rule(db, slug)

    client_id = _client_id(request)
    previous = vote_guard.previous_vote(client_id, slug)
    new_vote = vote_request.vote_type
    if new_vote == previous:
        new_vote = None

    allowed, reason, previous = vote_guard.check(client_id, slug, new_vote)
    if not allowed:
        log_engagement_event(
            event_type="rule.vote.rejected",
            message=reason,
            slug=slug,
            level=logging.WARNING,
            ip_address=get_client_ip(request),
        )
        raise HTTPException(status_code=429, detail=reason)

    up_delta, down_delta = engagement.vote_delta(previous, new_vote)
    try:
        stats = engagement.apply_vote(db, slug, up_delta, down_delta)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Error voting on {slug}")
        raise HTTPException(status_code=500, detail="Failed to vote on rule")

    if stats is None:
        raise HTTPException(status_code=404, detail="Rule not found")

    log_engagement_event(
        event_type="rule.vote",
        message=f"Vote {previous} -> {new_vote}",
        slug=slug,
        ip_address=get_client_ip(request),
    )
    return {"success": True, "upvotes": stats.upvotes, "downvotes": stats.downvotes}
