"""Static descriptors for the catalogue: seed input and curated collections."""

from pydantic import BaseModel, Field
from datetime import date
from typing import Optional, List

from app.schemas.rule import ApplicationMode


class CategoryDescriptor(BaseModel):
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None


class RuleDescriptor(BaseModel):
    title: str
    description: str
    content: str
    category_names: List[str] = Field(default_factory=list)
    tags: Optional[List[str]] = None
    author: Optional[str] = None
    application_mode: Optional[ApplicationMode] = None
    globs: Optional[str] = None


class CollectionDescriptor(BaseModel):
    """A curated bundle of rules, referenced by rule slug."""

    slug: str
    name: str
    description: str
    icon: Optional[str] = None
    color: Optional[str] = None
    rule_slugs: List[str] = Field(default_factory=list)
    featured: bool = False
    created_at: date
