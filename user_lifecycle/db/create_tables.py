"""Create the user tables that are missing from the configured database."""
from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers UserRow on Base.metadata


def create_all() -> list[str]:
    """Create missing tables and return their names; existing ones are left alone."""
    engine = get_engine()
    existing = set(inspect(engine).get_table_names())
    missing = [name for name in Base.metadata.tables if name not in existing]
    Base.metadata.create_all(bind=engine)
    return missing


if __name__ == "__main__":
    try:
        created = create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    if created:
        print(f"Created tables: {', '.join(created)}")
    else:
        print("All tables already exist.")
