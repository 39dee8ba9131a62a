from typing import List

from app.data.categories import CATEGORIES
from app.data.descriptors import CategoryDescriptor, RuleDescriptor

CURATED_RULES = [
    RuleDescriptor(
        title="React Hooks Expert",
        description="Master React Hooks patterns, custom hooks, and state management",
        category_names=["React", "Frontend"],
        tags=["react", "hooks", "state-management"],
        application_mode="files",
        globs="*.tsx,*.jsx",
        content="""# React Hooks Expert

Master React Hooks patterns, custom hooks, and state management with these guidelines.

## Core Hook Principles

1. **Follow the Rules of Hooks**
   - Always call hooks at the top level of function components
   - Never call hooks inside loops, conditions, or nested functions
   - Only call hooks from React functions

2. **Prefer Hooks Over Class Components**
   - Use function components with hooks for all new development
   - Migrate class components when practical

## Essential Patterns

- Keep `useState` values minimal and derive the rest during render
- List every reactive value in `useEffect` dependency arrays
- Return a cleanup function from effects that subscribe or start timers
- Extract reusable logic into custom hooks named `useSomething`
- Reach for `useReducer` when state transitions depend on the previous state
- Memoize with `useMemo` and `useCallback` only after measuring
""",
    ),
    RuleDescriptor(
        title="Python FastAPI Development",
        description="Expert in Python, FastAPI, async programming, and REST API development",
        category_names=["Python", "REST API"],
        tags=["python", "fastapi", "async", "api"],
        application_mode="files",
        globs="*.py",
        content="""# Python FastAPI Development Best Practices

Guide for building production-ready APIs with FastAPI and async Python.

## Core Principles

1. **Type-First Development**
   - Annotate every endpoint parameter and return value
   - Use Pydantic models for request and response validation
   - Run mypy in CI

2. **Dependency Injection**
   - Provide database sessions through `Depends`
   - Keep business logic in services, not in route functions

## Error Handling

- Raise `HTTPException` with precise status codes
- Register exception handlers for domain errors
- Never leak stack traces to clients

## Performance

- Use async drivers for I/O bound endpoints
- Paginate every list endpoint
- Offload slow work to background tasks
""",
    ),
    RuleDescriptor(
        title="Tailwind CSS Best Practices",
        description="Expert in Tailwind CSS, responsive design, and utility-first CSS architecture",
        category_names=["CSS/SCSS", "Frontend", "UX/UI"],
        tags=["css", "tailwind", "responsive"],
        application_mode="intelligent",
        content="""# Tailwind CSS Best Practices

Build responsive, accessible and maintainable interfaces with utility classes.

## Core Principles

1. **Utility-First Methodology**
   - Compose designs from small utility classes
   - Avoid premature abstraction into component classes
   - Extract components in your framework, not in CSS

2. **Design Tokens**
   - Configure colors, spacing and fonts in `tailwind.config`
   - Do not use arbitrary values for recurring measurements

## Responsive Design

- Style mobile first, then layer `sm:`, `md:` and `lg:` variants
- Use container queries for component-level breakpoints
- Test every breakpoint with real content
""",
    ),
    RuleDescriptor(
        title="Next.js 14 App Router Expert",
        description="Expert in Next.js 14 App Router, React Server Components, and modern web development",
        category_names=["Next.js", "React", "TypeScript"],
        tags=["nextjs", "react", "server-components"],
        application_mode="always",
        content="""# Next.js 14 App Router Best Practices

Build production-ready applications with the App Router and React Server Components.

## Core Principles

- Default to Server Components; add `"use client"` only where interactivity is needed
- Fetch data in Server Components, close to where it is rendered
- Co-locate `loading.tsx` and `error.tsx` with each route segment
- Use Server Actions for mutations and revalidate affected paths

## Routing

- Group routes with `(folder)` segments without affecting the URL
- Use `generateStaticParams` for known dynamic segments
- Keep layouts free of request-specific data
""",
    ),
    RuleDescriptor(
        title="Rust Development",
        description="Best practices for Rust systems programming",
        category_names=["Rust", "Performance"],
        tags=["rust", "systems", "performance", "safety", "cargo"],
        application_mode="files",
        globs="*.rs,Cargo.toml",
        content="""# Rust Development Best Practices

## Project Structure

- Split crates into a thin binary and a library holding the logic
- Pin the edition in `Cargo.toml` and keep dependencies minimal

## Ownership and Errors

- Borrow by default, clone deliberately
- Return `Result` from fallible functions and use `?` for propagation
- Define error enums with `thiserror` in libraries, `anyhow` in binaries

## Tooling

- Run `cargo fmt` and `cargo clippy -- -D warnings` in CI
- Benchmark hot paths with `criterion`
""",
    ),
]

MULTI_CATEGORY_RULES = [
    RuleDescriptor(
        title="Full-Stack React TypeScript App Setup",
        description="Complete setup guide for a React TypeScript application with best practices",
        category_names=["React", "TypeScript", "Node.js"],
        content="""You are an expert in React, TypeScript, Node.js, and full-stack development.

Project Setup:
- Create a new React app with the TypeScript template
- Set up an Express.js backend with TypeScript
- Configure a clear project structure for full-stack development
- Use Vite for fast development builds

Frontend (React + TypeScript):
- Use function components with typed props
- Implement React hooks for state management
- Set up React Router for navigation

Backend (Node.js + TypeScript):
- Implement middleware for security
- Configure CORS for frontend communication
- Set up centralized error handling""",
    ),
    RuleDescriptor(
        title="Mobile-First CSS Framework Setup",
        description="Responsive design system setup with modern CSS frameworks",
        category_names=["CSS/SCSS", "Frontend", "Mobile"],
        content="""You are an expert in CSS, responsive design, and mobile development.

Framework Setup:
- Configure Tailwind CSS for mobile-first design
- Set up CSS Grid and Flexbox layouts
- Implement a consistent breakpoint system

Mobile Optimization:
- Design for touch interfaces
- Set the viewport meta tag
- Optimize for different screen densities""",
    ),
    RuleDescriptor(
        title="DevOps CI/CD Pipeline with Testing",
        description="Complete CI/CD setup with automated testing and deployment",
        category_names=["DevOps", "Testing", "Security"],
        content="""You are an expert in DevOps, CI/CD, testing, and deployment strategies.

Pipeline Setup:
- Configure GitHub Actions or GitLab CI
- Set up automated testing stages
- Configure environment-specific deployments

Testing Integration:
- Run unit tests on every commit
- Set up end-to-end testing
- Report code coverage

Security:
- Scan dependencies for vulnerabilities
- Manage secrets outside the repository""",
    ),
    RuleDescriptor(
        title="Python Data Science with Performance Optimization",
        description="Data science workflow with Python performance optimization techniques",
        category_names=["Python", "Performance", "Data Science"],
        content="""You are an expert in Python, data science, and performance optimization.

Data Science Setup:
- Use pandas and numpy for data manipulation
- Use matplotlib and seaborn for visualization
- Use scikit-learn for machine learning

Performance Optimization:
- Prefer vectorized numpy operations over Python loops
- Process large datasets in chunks
- Cache expensive intermediate results""",
    ),
    RuleDescriptor(
        title="Secure JavaScript API Development",
        description="Building secure APIs with JavaScript/Node.js and security best practices",
        category_names=["JavaScript", "Node.js", "Security"],
        content="""You are an expert in JavaScript, Node.js, API development, and security.

API Development:
- Set up Express.js with validation middleware
- Follow RESTful resource naming
- Log errors with request context

Security Implementation:
- Implement JWT authentication
- Configure rate limiting and CORS
- Validate and sanitize all input""",
    ),
]

RULE_TITLE_TEMPLATES = [
    "Best Practices for {}",
    "{} Development Guidelines",
    "Advanced {} Techniques",
    "{} Code Quality Standards",
    "{} Performance Optimization",
    "{} Security Guidelines",
    "{} Testing Strategies",
    "{} Architecture Patterns",
    "{} Style Guide",
    "{} Project Setup",
    "Modern {} Development",
    "{} Debugging Techniques",
    "{} Error Handling",
    "{} Configuration Guide",
    "{} Deployment Strategies",
    "Enterprise {} Development",
    "{} Clean Code Principles",
    "{} Design Patterns",
    "{} Performance Monitoring",
    "{} Code Review Guidelines",
    "{} Documentation Standards",
    "{} Refactoring Techniques",
    "{} Memory Management",
    "{} API Integration",
    "{} State Management",
    "{} Component Design",
    "{} Data Validation",
    "{} Authentication Methods",
    "{} Caching Strategies",
    "{} Error Recovery",
]

RULE_CONTENT_TEMPLATES = [
    """You are an expert in {}. Follow these guidelines:

Core Principles:
- Write clean, maintainable code
- Follow industry best practices
- Implement proper error handling
- Use consistent naming conventions
- Document your code thoroughly

Architecture:
- Follow SOLID principles
- Separate concerns
- Consider scalability from the start

Security:
- Validate all inputs
- Follow the principle of least privilege
- Keep dependencies updated""",
    """Advanced {} development guide for professional developers:

Development Workflow:
- Use linting and formatting tools
- Implement pre-commit hooks
- Keep branches short-lived

Code Quality:
- Maintain high test coverage
- Use static analysis tools
- Refactor regularly

Monitoring:
- Implement structured logging
- Track performance metrics
- Use error tracking tools""",
    """{} expert guidelines for building robust applications:

Foundation:
- Choose appropriate frameworks
- Configure development tools
- Establish coding conventions

Implementation:
- Write modular code
- Handle edge cases
- Optimize critical paths

Testing:
- Write unit and integration tests
- Test error scenarios
- Mock external dependencies""",
]


def generate_template_rules(
    categories: List[CategoryDescriptor] = None, per_category: int = 10
) -> List[RuleDescriptor]:
    """
    Expand the title and content templates into one rule per template for
    each category. Deterministic: the i-th rule of a category uses the i-th
    title template and cycles through the content templates.
    """
    if categories is None:
        categories = CATEGORIES
    per_category = min(per_category, len(RULE_TITLE_TEMPLATES))

    descriptors = []
    for category in categories:
        for i in range(per_category):
            content = RULE_CONTENT_TEMPLATES[i % len(RULE_CONTENT_TEMPLATES)]
            descriptors.append(
                RuleDescriptor(
                    title=RULE_TITLE_TEMPLATES[i].format(category.name),
                    description=(
                        f"Comprehensive {category.name.lower()} guidelines covering "
                        "best practices, patterns, and professional development standards."
                    ),
                    content=content.format(category.name),
                    category_names=[category.name],
                )
            )
    return descriptors


def default_rules(per_category: int = 10) -> List[RuleDescriptor]:
    """Curated, multi-category and template-generated rules, in seed order."""
    return CURATED_RULES + MULTI_CATEGORY_RULES + generate_template_rules(
        per_category=per_category
    )
