from __future__ import annotations

from petcatalog.db import session as db_session


def test_engine_rebuilds_do_not_register_exit_hooks(temp_db, monkeypatch):
    registered = []
    monkeypatch.setattr(db_session.atexit, "register", registered.append)

    first = db_session.get_engine()
    db_session.dispose_engine()
    second = db_session.get_engine()

    assert first is not second
    assert registered == []


def test_dispose_engine_forgets_cached_handles(temp_db):
    db_session.get_engine()
    with db_session.get_session():
        pass
    db_session.dispose_engine()
    assert db_session.get_engine.cache_info().currsize == 0
    assert db_session._get_sessionmaker.cache_info().currsize == 0
    # safe to call twice
    db_session.dispose_engine()
