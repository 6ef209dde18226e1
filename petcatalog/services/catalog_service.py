"""
Catalog use cases: list pets, add the sample pet, clear the catalog.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from petcatalog.domain.contract import (
    COLUMN_PET_BREED,
    COLUMN_PET_GENDER,
    COLUMN_PET_NAME,
    COLUMN_PET_WEIGHT,
    LIST_PROJECTION,
    Gender,
    content_uri,
)
from petcatalog.domain.uris import with_appended_id
from petcatalog.services.resolver import ContentResolver, get_resolver

SAMPLE_PET = {
    COLUMN_PET_NAME: "Toto",
    COLUMN_PET_BREED: "Terrier",
    COLUMN_PET_GENDER: int(Gender.MALE),
    COLUMN_PET_WEIGHT: 7,
}


def _resolver(resolver: Optional[ContentResolver]) -> ContentResolver:
    return resolver or get_resolver()


def pet_uri(pet_id: int, resolver: Optional[ContentResolver] = None) -> str:
    """Item URI opened when a catalog entry is selected."""
    return with_appended_id(content_uri(_resolver(resolver).default_authority), pet_id)


def list_pets(resolver: Optional[ContentResolver] = None) -> list[dict]:
    res = _resolver(resolver)
    return res.query(content_uri(res.default_authority), projection=LIST_PROJECTION)


def insert_dummy_pet(resolver: Optional[ContentResolver] = None) -> str:
    res = _resolver(resolver)
    return res.insert(content_uri(res.default_authority), SAMPLE_PET)


def delete_all_pets(resolver: Optional[ContentResolver] = None) -> int:
    res = _resolver(resolver)
    rows_deleted = res.delete(content_uri(res.default_authority))
    logger.info("{} rows deleted from pet database", rows_deleted)
    return rows_deleted
