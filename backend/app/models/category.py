from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base
from app.models.rule import rule_categories


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    icon = Column(String, nullable=True)  # Icon name rendered by the frontend
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    rules = relationship(
        "Rule", secondary=rule_categories, back_populates="categories"
    )
