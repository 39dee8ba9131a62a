from app.schemas.category import (
    Category,
    CategoryRef,
    CategoryWithCount,
    CategoryPage,
    CategoryPagination,
)
from app.schemas.collection import (
    CollectionSummary,
    CollectionDetail,
    CollectionList,
)
from app.schemas.rule import (
    Rule,
    RuleSummary,
    RuleStats,
    RulePage,
    Pagination,
    VoteRequest,
    VoteResponse,
    UserVote,
    ViewResponse,
    CopyResponse,
)

__all__ = [
    "CollectionSummary",
    "CollectionDetail",
    "CollectionList",
    "Category",
    "CategoryRef",
    "CategoryWithCount",
    "CategoryPage",
    "CategoryPagination",
    "Rule",
    "RuleSummary",
    "RuleStats",
    "RulePage",
    "Pagination",
    "VoteRequest",
    "VoteResponse",
    "UserVote",
    "ViewResponse",
    "CopyResponse",
]
