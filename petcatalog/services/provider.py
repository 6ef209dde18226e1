"""
Content provider for the pets table.

Requests are addressed by content URI: ``content://<authority>/pets`` for the
whole collection and ``content://<authority>/pets/<id>`` for one pet. The
provider matches the URI, validates write payloads, delegates to the SQL
repository and publishes a change notification after every mutation that
touched at least one row.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence

from loguru import logger

from petcatalog.domain.contract import (
    COLUMN_ID,
    TABLE_NAME,
    content_authority,
    content_item_type,
    content_list_type,
)
from petcatalog.domain.errors import StorageWriteFailed, UnsupportedResource
from petcatalog.domain.uris import ResourceKind, UriMatch, get_matcher, strip_query, with_appended_id
from petcatalog.domain.validation import validate_pet
from petcatalog.repositories.sql_repository import Selection, SQLRepository
from petcatalog.services.notifications import ChangePublisher


class PetProvider:
    """CRUD dispatcher over the pets table."""

    def __init__(
        self,
        notifier: ChangePublisher,
        *,
        authority: Optional[str] = None,
        repository_factory: Callable[[], SQLRepository] = SQLRepository,
    ) -> None:
        self.notifier = notifier
        self.authority = authority or content_authority()
        self._matcher = get_matcher(self.authority)
        self._repository_factory = repository_factory
        self._repository: Optional[SQLRepository] = None

    @property
    def repository(self) -> SQLRepository:
        """Storage handle, opened on first use and reused afterwards."""
        if self._repository is None:
            self._repository = self._repository_factory()
        return self._repository

    # -------------------------------------- helpers --------------------------------------
    def _match(self, uri: str, operation: str) -> UriMatch:
        match = self._matcher.match(uri)
        if match is None:
            logger.warning("Unsupported URI for {}: {}", operation, uri)
            raise UnsupportedResource(uri, operation)
        logger.debug("{} {} -> {}", operation, uri, match)
        return match

    @staticmethod
    def _item_selection(match: UriMatch) -> dict[str, Any]:
        return {COLUMN_ID: match.pet_id}

    # -------------------------------------- operations --------------------------------------
    def query(
        self,
        uri: str,
        projection: Optional[Sequence[str]] = None,
        selection: Optional[Selection] = None,
        sort_order: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        match = self._match(uri, "query")
        if match.kind is ResourceKind.ITEM:
            selection = self._item_selection(match)
        return self.repository.query(TABLE_NAME, projection, selection, sort_order)

    def get_type(self, uri: str) -> str:
        match = self._match(uri, "resolve type of")
        if match.kind is ResourceKind.COLLECTION:
            return content_list_type(self.authority)
        return content_item_type(self.authority)

    def insert(self, uri: str, values: Optional[Mapping[str, Any]]) -> str:
        """Insert one pet and return its item URI."""
        match = self._match(uri, "insert into")
        if match.kind is not ResourceKind.COLLECTION:
            raise UnsupportedResource(uri, "insert into")
        accepted = validate_pet(values)
        new_id = self.repository.insert(TABLE_NAME, accepted)
        if new_id is None or new_id == -1:
            logger.error("Failed to insert row for {}", uri)
            raise StorageWriteFailed(f"Failed to insert row for {uri}")
        logger.info("Inserted pet {} ({})", new_id, accepted.get("name"))
        collection = strip_query(uri)
        self.notifier.notify_change(collection)
        return with_appended_id(collection, new_id)

    def delete(self, uri: str, selection: Optional[Selection] = None) -> int:
        match = self._match(uri, "delete from")
        if match.kind is ResourceKind.ITEM:
            selection = self._item_selection(match)
        rows_deleted = self.repository.delete(TABLE_NAME, selection)
        if rows_deleted:
            logger.info("Deleted {} row(s) for {}", rows_deleted, uri)
            self.notifier.notify_change(uri)
        return rows_deleted

    def update(
        self,
        uri: str,
        values: Optional[Mapping[str, Any]],
        selection: Optional[Selection] = None,
    ) -> int:
        match = self._match(uri, "update")
        if match.kind is ResourceKind.ITEM:
            selection = self._item_selection(match)
        accepted = validate_pet(values, partial=True)
        if not accepted:
            return 0
        rows_updated = self.repository.update(TABLE_NAME, accepted, selection)
        if rows_updated:
            logger.info("Updated {} row(s) for {}", rows_updated, uri)
            self.notifier.notify_change(uri)
        return rows_updated
