from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, selectinload
from typing import Dict, Iterable, List, Optional

from app.core.database import get_db
from app.data.collections import COLLECTIONS
from app.data.descriptors import CollectionDescriptor
from app.models.rule import Rule
from app.schemas.collection import CollectionDetail, CollectionList, CollectionSummary
from app.schemas.rule import RuleSummary

router = APIRouter()


def _published_rules(db: Session, slugs: Iterable[str]) -> Dict[str, Rule]:
    """Published rules among ``slugs``, keyed by slug."""
    slugs = set(slugs)
    if not slugs:
        return {}
    rules = (
        db.query(Rule)
        .options(selectinload(Rule.categories))
        .filter(Rule.slug.in_(slugs), Rule.is_published == True)
        .all()
    )
    return {rule.slug: rule for rule in rules}


def _resolve(
    collection: CollectionDescriptor, published: Dict[str, Rule]
) -> List[Rule]:
    # Descriptor order is kept; unknown or unpublished slugs are left out
    return [published[slug] for slug in collection.rule_slugs if slug in published]


def _summary(collection: CollectionDescriptor, rule_count: int) -> CollectionSummary:
    return CollectionSummary(
        **collection.model_dump(exclude={"rule_slugs"}), rule_count=rule_count
    )


@router.get("/", response_model=CollectionList)
def get_collections(featured: Optional[bool] = None, db: Session = Depends(get_db)):
    """List curated collections with the number of published rules in each."""
    collections = [
        c for c in COLLECTIONS if featured is None or c.featured == featured
    ]
    published = _published_rules(
        db, (slug for c in collections for slug in c.rule_slugs)
    )

    return {
        "collections": [
            _summary(c, len(_resolve(c, published))) for c in collections
        ]
    }


@router.get("/{slug}", response_model=CollectionDetail)
def get_collection(slug: str, db: Session = Depends(get_db)):
    """Get a collection with its published rules in curated order."""
    collection = next((c for c in COLLECTIONS if c.slug == slug), None)
    if collection is None:
        raise HTTPException(status_code=404, detail="Collection not found")

    rules = _resolve(collection, _published_rules(db, collection.rule_slugs))
    summary = _summary(collection, len(rules))
    return CollectionDetail(
        **summary.model_dump(),
        rules=[RuleSummary.model_validate(rule) for rule in rules],
    )
