from __future__ import annotations

import sys
from pathlib import Path

import pytest
from loguru import logger

# Make the package importable when running from a source checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from user_lifecycle.core import config as core_config  # noqa: E402
from user_lifecycle.db import create_tables, models  # noqa: E402
from user_lifecycle.db import session as db_session  # noqa: E402


@pytest.fixture()
def log_records():
    """Collect loguru records emitted while the test runs."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Temporary SQLite database with settings/engine caches reset on both ends."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    create_tables.create_all()

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
