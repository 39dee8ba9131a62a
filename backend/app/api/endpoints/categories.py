from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func
from sqlalchemy.orm import Session
import math

from app.core.database import get_db
from app.models.category import Category
from app.models.rule import Rule, rule_categories
from app.schemas.category import CategoryPage, CategoryWithCount

router = APIRouter()


def _rule_counts(db: Session):
    """Subquery of published rule counts per category id."""
    return (
        db.query(
            rule_categories.c.category_id.label("category_id"),
            func.count(Rule.id).label("rule_count"),
        )
        .join(Rule, Rule.id == rule_categories.c.rule_id)
        .filter(Rule.is_published == True)
        .group_by(rule_categories.c.category_id)
        .subquery()
    )


def _with_count(category: Category, rule_count) -> CategoryWithCount:
    result = CategoryWithCount.model_validate(category)
    result.rule_count = rule_count or 0
    return result


@router.get("/", response_model=CategoryPage)
def get_categories(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """List categories alphabetically with their published rule counts."""
    counts = _rule_counts(db)
    total = db.query(Category).count()
    rows = (
        db.query(Category, counts.c.rule_count)
        .outerjoin(counts, counts.c.category_id == Category.id)
        .order_by(Category.name)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    total_pages = math.ceil(total / limit)

    return {
        "categories": [_with_count(category, count) for category, count in rows],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "total_pages": total_pages,
            "has_more": page < total_pages,
        },
    }


@router.get("/{slug}", response_model=CategoryWithCount)
def get_category(slug: str, db: Session = Depends(get_db)):
    """Get a single category by slug."""
    counts = _rule_counts(db)
    row = (
        db.query(Category, counts.c.rule_count)
        .outerjoin(counts, counts.c.category_id == Category.id)
        .filter(Category.slug == slug)
        .first()
    )
    if not row:
        raise HTTPException(status_code=404, detail="Category not found")
    return _with_count(*row)
