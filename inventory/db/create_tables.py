"""
Create (or recreate) the inventory schema on DATABASE_URL.

Uso:
  python -m inventory.db.create_tables [--drop]
"""
from __future__ import annotations

import argparse

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all(engine: Engine | None = None, *, drop_first: bool = False) -> None:
    engine = engine or get_engine()
    if drop_first:
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create the inventory tables on DATABASE_URL")
    ap.add_argument("--drop", action="store_true", help="drop existing tables first (data is lost)")
    args = ap.parse_args(argv)
    try:
        create_all(drop_first=args.drop)
    except (SQLAlchemyError, RuntimeError) as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print("Database tables created successfully.")


if __name__ == "__main__":
    main()
