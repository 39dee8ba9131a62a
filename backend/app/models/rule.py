from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    Boolean,
    ForeignKey,
    JSON,
    Table,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base


APPLICATION_MODES = ("always", "intelligent", "files", "manual")

# Many-to-many association table for rules and categories
rule_categories = Table(
    "rule_categories",
    Base.metadata,
    Column(
        "rule_id",
        Integer,
        ForeignKey("rules.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Rule(Base):
    __tablename__ = "rules"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, unique=True, nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    is_published = Column(Boolean, nullable=False, default=True)

    # Engagement counters
    view_count = Column(Integer, nullable=False, default=0)
    copy_count = Column(Integer, nullable=False, default=0)
    upvotes = Column(Integer, nullable=False, default=0)
    downvotes = Column(Integer, nullable=False, default=0)

    # Optional metadata
    author = Column(String, nullable=True)
    tags = Column(JSON, nullable=True)  # List of tag strings
    application_mode = Column(String, nullable=True)  # One of APPLICATION_MODES
    globs = Column(String, nullable=True)  # Comma-separated file patterns

    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    categories = relationship(
        "Category",
        secondary=rule_categories,
        back_populates="rules",
        order_by="Category.id",
    )

    __table_args__ = (
        CheckConstraint("view_count >= 0", name="ck_rules_view_count"),
        CheckConstraint("copy_count >= 0", name="ck_rules_copy_count"),
        CheckConstraint("upvotes >= 0", name="ck_rules_upvotes"),
        CheckConstraint("downvotes >= 0", name="ck_rules_downvotes"),
    )

    @property
    def primary_category(self):
        """First associated category, for single-category views."""
        return self.categories[0] if self.categories else None
