"""Content URI matching for the pets collection and single pets."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from petcatalog.domain.contract import CONTENT_SCHEME, PATH_PETS, content_authority

# Wildcard segment matching one or more ASCII digits.
NUMBER = "#"

# Ids are signed 64-bit integers in storage.
MAX_ID = 2**63 - 1


class ResourceKind(Enum):
    COLLECTION = "collection"
    ITEM = "item"


@dataclass(frozen=True)
class UriMatch:
    kind: ResourceKind
    pet_id: Optional[int] = None


def _split(uri: str) -> tuple[Optional[str], list[str]] | None:
    """Return (authority, path segments), or None when the URI is malformed."""
    value = (uri or "").strip()
    if "://" in value:
        parts = urlsplit(value)
        if parts.scheme != CONTENT_SCHEME or not parts.netloc:
            return None
        authority, path = parts.netloc, parts.path
    else:
        authority, path = None, value.split("?", 1)[0].split("#", 1)[0]
    path = path.strip("/")
    if not path:
        return authority, []
    return authority, path.split("/")


def authority_of(uri: str) -> Optional[str]:
    """Authority of a full content URI, None for bare paths."""
    split = _split(uri)
    return split[0] if split else None


class UriMatcher:
    """Immutable table of path patterns for one content authority."""

    def __init__(self, authority: str) -> None:
        self.authority = authority
        self._patterns = MappingProxyType(
            {
                (PATH_PETS,): ResourceKind.COLLECTION,
                (PATH_PETS, NUMBER): ResourceKind.ITEM,
            }
        )

    def match(self, uri: str) -> Optional[UriMatch]:
        split = _split(uri)
        if split is None:
            return None
        authority, segments = split
        if authority is not None and authority != self.authority:
            return None
        for pattern, kind in self._patterns.items():
            pet_id = self._match_segments(pattern, segments)
            if pet_id is False:
                continue
            return UriMatch(kind=kind, pet_id=pet_id)
        return None

    @staticmethod
    def _match_segments(pattern: tuple[str, ...], segments: list[str]):
        if len(pattern) != len(segments):
            return False
        number = None
        for expected, segment in zip(pattern, segments):
            if expected == NUMBER:
                if not (segment.isascii() and segment.isdigit()):
                    return False
                number = int(segment)
                if number > MAX_ID:
                    return False
            elif expected != segment:
                return False
        return number


@lru_cache
def _matcher_for(authority: str) -> UriMatcher:
    return UriMatcher(authority)


def get_matcher(authority: Optional[str] = None) -> UriMatcher:
    """Shared matcher for an authority (the configured one by default)."""
    return _matcher_for(authority or content_authority())


def strip_query(uri: str) -> str:
    """Drop the query string and fragment: pets?x=1 -> pets"""
    parts = urlsplit((uri or "").strip())
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def with_appended_id(uri: str, pet_id: int) -> str:
    """content://authority/pets?x=1 + 3 -> content://authority/pets/3"""
    parts = urlsplit(strip_query(uri))
    path = f"{parts.path.rstrip('/')}/{int(pet_id)}"
    return urlunsplit((parts.scheme, parts.netloc, path, "", ""))


def parse_id(uri: str) -> int:
    """Return the trailing numeric segment of a URI."""
    split = _split(uri)
    segments = split[1] if split else []
    if not segments or not (segments[-1].isascii() and segments[-1].isdigit()):
        raise ValueError(f"URI {uri} does not end with a numeric id")
    return int(segments[-1])
