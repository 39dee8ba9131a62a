from pydantic import BaseModel
from datetime import datetime
from typing import Optional, List


class CategoryBase(BaseModel):
    name: str
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = None


class CategoryRef(BaseModel):
    """Compact category reference embedded in rule payloads."""

    id: int
    name: str
    slug: str

    class Config:
        from_attributes = True


class Category(CategoryBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class CategoryWithCount(Category):
    rule_count: int = 0


class CategoryPagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_more: bool


class CategoryPage(BaseModel):
    categories: List[CategoryWithCount]
    pagination: CategoryPagination
