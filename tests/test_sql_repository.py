"""
Smoke tests for the SQLRepository against a temporary SQLite database.
"""
from __future__ import annotations

import pytest

from petcatalog.domain.errors import StorageError
from petcatalog.repositories.sql_repository import SQLRepository


def _add(repo: SQLRepository, name: str, breed: str = "Terrier", gender: int = 1, weight: int = 0) -> int:
    new_id = repo.insert("pets", {"name": name, "breed": breed, "gender": gender, "weight": weight})
    assert new_id is not None
    return new_id


def test_insert_assigns_increasing_ids(temp_db):
    repo = SQLRepository()
    first = _add(repo, "Toto")
    second = _add(repo, "Rex")
    assert second > first
    rows = repo.query("pets", sort_order="id")
    assert [row["name"] for row in rows] == ["Toto", "Rex"]


def test_query_projection_selection_and_order(temp_db):
    repo = SQLRepository()
    _add(repo, "Toto", weight=7)
    _add(repo, "Rex", breed="Boxer", weight=30)
    _add(repo, "Bella", gender=2, weight=12)

    rows = repo.query("pets", projection=["name", "weight"], selection={"breed": "Terrier"}, sort_order="weight DESC")
    assert rows == [{"name": "Bella", "weight": 12}, {"name": "Toto", "weight": 7}]

    rows = repo.query("pets", projection=["name"], selection={"name": ["Rex", "Toto"]}, sort_order="name")
    assert [row["name"] for row in rows] == ["Rex", "Toto"]


def test_weight_defaults_at_storage_level(temp_db):
    repo = SQLRepository()
    new_id = repo.insert("pets", {"name": "Toto", "breed": "Terrier", "gender": 1})
    assert repo.query("pets", selection={"id": new_id})[0]["weight"] == 0


def test_insert_rejected_by_backend_returns_none(temp_db):
    repo = SQLRepository()
    # name is NOT NULL in the table
    assert repo.insert("pets", {"breed": "Terrier", "gender": 1}) is None
    assert repo.query("pets") == []


def test_update_and_delete_return_counts(temp_db):
    repo = SQLRepository()
    toto = _add(repo, "Toto")
    _add(repo, "Rex")

    assert repo.update("pets", {"weight": 8}, {"id": toto}) == 1
    assert repo.query("pets", projection=["weight"], selection={"id": toto}) == [{"weight": 8}]
    assert repo.update("pets", {"weight": 1}, {"id": 999}) == 0

    assert repo.delete("pets", {"name": "Nobody"}) == 0
    assert repo.delete("pets") == 2
    assert repo.query("pets") == []


@pytest.mark.parametrize(
    "call",
    [
        lambda repo: repo.query("pets", projection=["color"]),
        lambda repo: repo.query("pets", selection={"color": "brown"}),
        lambda repo: repo.query("pets", sort_order="color ASC"),
        lambda repo: repo.query("pets", sort_order="name sideways"),
        lambda repo: repo.query("dogs"),
        lambda repo: repo.delete("pets", {"color": "brown"}),
        lambda repo: repo.query("pets", selection={"name": {"a": 1}}),
        lambda repo: repo.query("pets", selection={"id": 10**30}),
        lambda repo: repo.delete("pets", {"name": {"a": 1}}),
        lambda repo: repo.delete("pets", {"id": 10**30}),
        lambda repo: repo.update("pets", {"weight": 1}, {"id": 10**30}),
    ],
)
def test_bad_names_and_values_raise_storage_error(temp_db, call):
    with pytest.raises(StorageError):
        call(SQLRepository())


def test_insert_with_unbindable_value_returns_none(temp_db):
    repo = SQLRepository()
    assert repo.insert("pets", {"name": "Toto", "breed": "Terrier", "gender": 1, "weight": 10**30}) is None
    assert repo.query("pets") == []
