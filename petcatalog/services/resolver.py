"""Routes content URIs to the provider registered for their authority."""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping, Optional, Sequence

from petcatalog.domain.contract import content_authority
from petcatalog.domain.errors import UnsupportedResource
from petcatalog.domain.uris import authority_of
from petcatalog.repositories.sql_repository import Selection
from petcatalog.services.notifications import ChangeCallback, ChangeNotifier
from petcatalog.services.provider import PetProvider


class ContentResolver:
    """Entry point callers use instead of talking to providers directly."""

    def __init__(self, notifier: Optional[ChangeNotifier] = None, *, default_authority: Optional[str] = None) -> None:
        self.notifier = notifier or ChangeNotifier()
        self.default_authority = default_authority or content_authority()
        self._providers: dict[str, PetProvider] = {}

    def register_provider(self, authority: str, provider: PetProvider) -> None:
        self._providers[authority] = provider

    def _provider_for(self, uri: str, operation: str) -> PetProvider:
        authority = authority_of(uri) or self.default_authority
        provider = self._providers.get(authority)
        if provider is None:
            raise UnsupportedResource(uri, operation)
        return provider

    def query(
        self,
        uri: str,
        projection: Optional[Sequence[str]] = None,
        selection: Optional[Selection] = None,
        sort_order: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        return self._provider_for(uri, "query").query(uri, projection, selection, sort_order)

    def get_type(self, uri: str) -> str:
        return self._provider_for(uri, "resolve type of").get_type(uri)

    def insert(self, uri: str, values: Optional[Mapping[str, Any]]) -> str:
        return self._provider_for(uri, "insert into").insert(uri, values)

    def update(self, uri: str, values: Optional[Mapping[str, Any]], selection: Optional[Selection] = None) -> int:
        return self._provider_for(uri, "update").update(uri, values, selection)

    def delete(self, uri: str, selection: Optional[Selection] = None) -> int:
        return self._provider_for(uri, "delete from").delete(uri, selection)

    # -------------------------------------- observers --------------------------------------
    def register_content_observer(
        self, uri: str, callback: ChangeCallback, notify_for_descendants: bool = False
    ) -> None:
        self.notifier.register_observer(uri, callback, notify_for_descendants)

    def unregister_content_observer(self, callback: ChangeCallback) -> None:
        self.notifier.unregister_observer(callback)


@lru_cache
def get_resolver() -> ContentResolver:
    """Process-wide resolver with the pets provider registered."""
    resolver = ContentResolver()
    resolver.register_provider(
        resolver.default_authority,
        PetProvider(resolver.notifier, authority=resolver.default_authority),
    )
    return resolver
