"""Tests for curated collections endpoints and data."""

from datetime import date

import pytest

from app.api.endpoints import collections as collections_endpoint
from app.data import COLLECTIONS, CURATED_RULES
from app.data.descriptors import CollectionDescriptor
from app.models.rule import Rule
from app.utils.text import slugify_text


def _add_rule(db_session, slug, published=True):
    rule = Rule(
        slug=slug,
        title=slug.replace("-", " ").title(),
        description=f"Description for {slug}",
        content=f"Content for {slug}",
        is_published=published,
    )
    db_session.add(rule)
    db_session.commit()
    return rule


@pytest.mark.unit
class TestCollectionData:
    """Test the static collection descriptors."""

    def test_slugs_unique(self):
        slugs = [c.slug for c in COLLECTIONS]
        assert len(slugs) == len(set(slugs))

    def test_rule_slugs_reference_curated_rules(self):
        curated = {slugify_text(rule.title) for rule in CURATED_RULES}
        for collection in COLLECTIONS:
            assert collection.rule_slugs
            assert set(collection.rule_slugs) <= curated


@pytest.mark.unit
class TestCollectionsAPI:
    """Test collections API endpoints."""

    def test_get_collections(self, client):
        response = client.get("/api/collections/")

        assert response.status_code == 200
        data = response.json()["collections"]
        assert [c["slug"] for c in data] == [c.slug for c in COLLECTIONS]
        assert "rule_slugs" not in data[0]
        assert data[0]["featured"] is True
        assert data[0]["created_at"] == "2024-01-01"

    def test_rule_count_only_counts_published_rules(self, client, db_session, test_rule):
        _add_rule(db_session, "tailwind-css-best-practices", published=False)

        data = client.get("/api/collections/").json()["collections"]
        counts = {c["slug"]: c["rule_count"] for c in data}

        assert counts["react-essentials"] == 1
        assert counts["fullstack-nextjs"] == 1
        assert counts["python-backend"] == 0

    def test_featured_filter(self, client, monkeypatch):
        monkeypatch.setattr(
            collections_endpoint,
            "COLLECTIONS",
            [
                CollectionDescriptor(
                    slug="featured-one",
                    name="Featured One",
                    description="Shown on the home page",
                    featured=True,
                    created_at=date(2024, 2, 1),
                ),
                CollectionDescriptor(
                    slug="hidden-one",
                    name="Hidden One",
                    description="Only on the collections page",
                    created_at=date(2024, 2, 2),
                ),
            ],
        )

        featured = client.get("/api/collections/", params={"featured": True}).json()
        others = client.get("/api/collections/", params={"featured": False}).json()
        everything = client.get("/api/collections/").json()

        assert [c["slug"] for c in featured["collections"]] == ["featured-one"]
        assert [c["slug"] for c in others["collections"]] == ["hidden-one"]
        assert len(everything["collections"]) == 2

    def test_get_collection(self, client, test_rule):
        response = client.get("/api/collections/react-essentials")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "React Essentials"
        assert data["rule_count"] == 1
        assert [r["slug"] for r in data["rules"]] == ["react-hooks-expert"]
        assert data["rules"][0]["categories"][0]["slug"] == "react"
        assert data["rules"][0]["view_count"] == 10

    def test_rules_keep_curated_order(self, client, db_session, test_rule):
        _add_rule(db_session, "next-js-14-app-router-expert")
        _add_rule(db_session, "tailwind-css-best-practices")

        data = client.get("/api/collections/frontend-starter").json()

        assert [r["slug"] for r in data["rules"]] == [
            "tailwind-css-best-practices",
            "react-hooks-expert",
            "next-js-14-app-router-expert",
        ]

    def test_missing_and_unpublished_rules_left_out(self, client, db_session):
        _add_rule(db_session, "react-hooks-expert", published=False)
        _add_rule(db_session, "tailwind-css-best-practices")

        data = client.get("/api/collections/fullstack-nextjs").json()

        assert [r["slug"] for r in data["rules"]] == ["tailwind-css-best-practices"]
        assert data["rule_count"] == 1

    def test_get_collection_not_found(self, client):
        response = client.get("/api/collections/missing")

        assert response.status_code == 404
        assert response.json()["detail"] == "Collection not found"
