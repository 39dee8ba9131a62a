from pydantic import BaseModel
from datetime import date
from typing import Optional, List

from app.schemas.rule import RuleSummary


class CollectionBase(BaseModel):
    slug: str
    name: str
    description: str
    icon: Optional[str] = None
    color: Optional[str] = None
    featured: bool = False
    created_at: date


class CollectionSummary(CollectionBase):
    rule_count: int = 0


class CollectionDetail(CollectionSummary):
    rules: List[RuleSummary] = []


class CollectionList(BaseModel):
    collections: List[CollectionSummary]
