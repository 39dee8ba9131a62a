"""
Pytest configuration and fixtures for rule catalogue tests.
"""

import pytest
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.core.database import Base, get_db
from app.models.category import Category
from app.models.rule import Rule
from app.services.vote_guard import vote_guard


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(scope="function")
def db_engine():
    """Create a test database engine."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def fake_clock(monkeypatch) -> FakeClock:
    """Drive the shared vote guard with a controllable clock."""
    clock = FakeClock()
    monkeypatch.setattr(vote_guard, "clock", clock)
    return clock


@pytest.fixture(autouse=True)
def reset_vote_guard():
    vote_guard.clear()
    yield
    vote_guard.clear()


@pytest.fixture(scope="function")
def test_app(db_session, fake_clock):
    """Create a FastAPI test app without lifespan events."""
    from fastapi import FastAPI
    from app.api.endpoints import rules, categories, collections

    # Create app without lifespan to avoid event loop issues
    test_app = FastAPI(title="Rule Catalogue - Test", version="1.0.0")

    test_app.include_router(rules.router, prefix="/api/rules", tags=["rules"])
    test_app.include_router(
        categories.router, prefix="/api/categories", tags=["categories"]
    )
    test_app.include_router(
        collections.router, prefix="/api/collections", tags=["collections"]
    )

    # Add health endpoint for testing
    @test_app.get("/health")
    def health():
        return {"status": "ok"}

    # Override database dependency
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    test_app.dependency_overrides[get_db] = override_get_db

    # Per-IP limits would leak between tests sharing the "testclient" address
    test_app.state.limiter = rules.limiter
    rules.limiter.enabled = False
    yield test_app
    rules.limiter.enabled = True


@pytest.fixture(scope="function")
def client(test_app) -> TestClient:
    """Create a test client without entering context manager."""
    return TestClient(test_app, raise_server_exceptions=False)


@pytest.fixture(scope="function")
def test_category(db_session) -> Category:
    """Create a test category."""
    category = Category(
        name="React",
        slug="react",
        description="Rules for React development and components",
        icon="Code",
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture(scope="function")
def test_rule(db_session, test_category) -> Rule:
    """Create a test rule with known counters."""
    rule = Rule(
        slug="react-hooks-expert",
        title="React Hooks Expert",
        description="Master React Hooks patterns",
        content="# React Hooks Expert\n\nAlways call hooks at the top level.",
        is_published=True,
        view_count=10,
        copy_count=2,
        upvotes=1,
        downvotes=0,
        tags=["react", "hooks"],
        application_mode="files",
        globs="*.tsx,*.jsx",
    )
    rule.categories.append(test_category)
    db_session.add(rule)
    db_session.commit()
    db_session.refresh(rule)
    return rule


@pytest.fixture(scope="function")
def multiple_rules(db_session, test_category) -> list[Rule]:
    """Create several rules with distinct counters."""
    from datetime import datetime, timedelta

    rules = []
    for i in range(5):
        rule = Rule(
            slug=f"react-rule-{i + 1}",
            title=f"React Rule {i + 1}",
            description=f"Description for rule {i + 1}",
            content=f"Content for rule {i + 1}",
            view_count=100 - i,
            copy_count=i * 10,
            upvotes=50 - i * 10,
            downvotes=0,
            created_at=datetime(2024, 1, 1) + timedelta(days=i),
        )
        if i % 2 == 0:
            rule.categories.append(test_category)
        db_session.add(rule)
        rules.append(rule)

    db_session.commit()
    for rule in rules:
        db_session.refresh(rule)

    return rules
