"""
Seed the rule catalogue into the configured database.

Usage: python -m app.seed [--fixtures | --no-fixtures]

Re-running is safe: existing categories and rules are left untouched.
"""

import argparse
import logging
import sys
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from app.core.config import settings
from app.core.database import Base, build_engine, session_scope
from app.core.logging_config import setup_logging
from app.services.seeder import CatalogueSeeder, SeedReport

logger = logging.getLogger("app.seed")


def seed_database(engine: Engine, fixture_mode: bool) -> SeedReport:
    """Create tables and import the catalogue within one transaction."""
    Base.metadata.create_all(bind=engine)
    with session_scope(engine) as db:
        return CatalogueSeeder(db, fixture_mode=fixture_mode).run()


def main(argv: Optional[List[str]] = None, engine: Optional[Engine] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "--fixtures",
        dest="fixture_mode",
        action=argparse.BooleanOptionalAction,
        default=settings.SEED_FIXTURE_MODE,
        help="Fill engagement counters with random placeholder values",
    )
    args = parser.parse_args(argv)

    owns_engine = engine is None
    engine = engine or build_engine()
    logger.info(f"Seeding catalogue (fixture_mode={args.fixture_mode})")

    try:
        report = seed_database(engine, args.fixture_mode)
    except OperationalError as e:
        logger.error(f"Cannot connect to database: {e}")
        return 1
    except SQLAlchemyError:
        logger.exception("Seed failed")
        return 1
    finally:
        if owns_engine:
            engine.dispose()
            logger.info("Database connection closed")

    logger.info(f"Seed completed: {report.summary()}")
    return 0


def run() -> None:
    setup_logging(settings.LOG_LEVEL)
    sys.exit(main())


if __name__ == "__main__":
    run()
