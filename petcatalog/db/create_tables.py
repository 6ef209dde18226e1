"""Create (or recreate) the pets schema.

Usage:
  python -m petcatalog.db.create_tables [--reset]
"""
from __future__ import annotations

import argparse

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all(*, reset: bool = False) -> None:
    engine = get_engine()
    if reset:
        Base.metadata.drop_all(bind=engine)
        logger.info("Dropped tables on {}", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)


def main() -> None:
    ap = argparse.ArgumentParser(description="Create the pets table")
    ap.add_argument("--reset", action="store_true", help="drop existing tables first (deletes every pet)")
    args = ap.parse_args()
    try:
        create_all(reset=args.reset)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print("Database tables created successfully.")


if __name__ == "__main__":
    main()
