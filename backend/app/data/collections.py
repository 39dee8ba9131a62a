"""Curated collections of catalogue rules."""

from datetime import date

from app.data.descriptors import CollectionDescriptor

COLLECTIONS = [
    CollectionDescriptor(
        slug="fullstack-nextjs",
        name="Full-Stack Next.js",
        description="Complete setup for building modern Next.js applications",
        icon="nextdotjs",
        color="blue",
        rule_slugs=[
            "next-js-14-app-router-expert",
            "tailwind-css-best-practices",
            "react-hooks-expert",
        ],
        featured=True,
        created_at=date(2024, 1, 1),
    ),
    CollectionDescriptor(
        slug="python-backend",
        name="Python Backend",
        description="Essential rules for Python API development",
        icon="python",
        color="green",
        rule_slugs=["python-fastapi-development"],
        featured=True,
        created_at=date(2024, 1, 2),
    ),
    CollectionDescriptor(
        slug="react-essentials",
        name="React Essentials",
        description="Core React patterns and best practices",
        icon="react",
        color="cyan",
        rule_slugs=["react-hooks-expert"],
        featured=True,
        created_at=date(2024, 1, 3),
    ),
    CollectionDescriptor(
        slug="frontend-starter",
        name="Frontend Starter",
        description="Everything you need to start a frontend project",
        icon="html5",
        color="purple",
        rule_slugs=[
            "tailwind-css-best-practices",
            "react-hooks-expert",
            "next-js-14-app-router-expert",
        ],
        featured=True,
        created_at=date(2024, 1, 4),
    ),
]
