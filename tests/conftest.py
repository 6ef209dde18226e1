from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Keeps the petcatalog package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from petcatalog.core import config as core_config  # noqa: E402
from petcatalog.db import models  # noqa: E402
from petcatalog.db import session as db_session  # noqa: E402
from petcatalog.services import resolver as resolver_module  # noqa: E402

AUTHORITY = "com.example.android.pets"
PETS_URI = f"content://{AUTHORITY}/pets"


class RecordingNotifier:
    """Stands in for the notification channel and remembers every published URI."""

    def __init__(self) -> None:
        self.changes: list[str] = []

    def notify_change(self, uri: str) -> None:
        self.changes.append(uri)


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point the SQL backend at a temporary SQLite file and reset every cached handle."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("PETS_CONTENT_AUTHORITY", AUTHORITY)
    core_config.get_settings.cache_clear()
    db_session.dispose_engine()
    resolver_module.get_resolver.cache_clear()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    except Exception:
        pass
    db_session.dispose_engine()
    resolver_module.get_resolver.cache_clear()
    core_config.get_settings.cache_clear()
