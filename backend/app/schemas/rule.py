from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List, Literal

from app.schemas.category import CategoryRef

ApplicationMode = Literal["always", "intelligent", "files", "manual"]
VoteType = Literal["up", "down"]


class RuleStats(BaseModel):
    upvotes: int = Field(0, ge=0)
    downvotes: int = Field(0, ge=0)
    view_count: int = Field(0, ge=0)
    copy_count: int = Field(0, ge=0)

    class Config:
        from_attributes = True


class RuleSummary(RuleStats):
    id: int
    slug: str
    title: str
    description: str
    author: Optional[str] = None
    tags: Optional[List[str]] = None
    application_mode: Optional[ApplicationMode] = None
    globs: Optional[str] = None
    created_at: datetime
    categories: List[CategoryRef] = []


class Rule(RuleSummary):
    content: str
    is_published: bool = True


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class RulePage(BaseModel):
    rules: List[RuleSummary]
    pagination: Pagination


class VoteRequest(BaseModel):
    vote_type: Optional[VoteType] = None  # None removes the vote


class VoteResponse(BaseModel):
    success: bool = True
    upvotes: int
    downvotes: int


class UserVote(BaseModel):
    user_vote: Optional[VoteType] = None


class ViewResponse(BaseModel):
    success: bool = True
    view_count: int


class CopyResponse(BaseModel):
    success: bool = True
    copy_count: int
