"""Schema constants for the pets table and its content URIs."""
from __future__ import annotations

from enum import IntEnum

from petcatalog.core.config import get_settings

CONTENT_SCHEME = "content"
PATH_PETS = "pets"

TABLE_NAME = "pets"

COLUMN_ID = "id"
COLUMN_PET_NAME = "name"
COLUMN_PET_BREED = "breed"
COLUMN_PET_GENDER = "gender"
COLUMN_PET_WEIGHT = "weight"

ALL_COLUMNS = (COLUMN_ID, COLUMN_PET_NAME, COLUMN_PET_BREED, COLUMN_PET_GENDER, COLUMN_PET_WEIGHT)
WRITABLE_COLUMNS = (COLUMN_PET_NAME, COLUMN_PET_BREED, COLUMN_PET_GENDER, COLUMN_PET_WEIGHT)

# Columns shown in the catalog list.
LIST_PROJECTION = (COLUMN_ID, COLUMN_PET_NAME, COLUMN_PET_BREED)


class Gender(IntEnum):
    UNKNOWN = 0
    MALE = 1
    FEMALE = 2


def is_valid_gender(value: object) -> bool:
    """Return True when value is one of the Gender integers (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value in Gender._value2member_map_


def content_authority() -> str:
    return get_settings().content_authority


def base_content_uri(authority: str | None = None) -> str:
    return f"{CONTENT_SCHEME}://{authority or content_authority()}"


def content_uri(authority: str | None = None) -> str:
    """URI of the whole pets collection, e.g. content://com.example.android.pets/pets."""
    return f"{base_content_uri(authority)}/{PATH_PETS}"


def content_list_type(authority: str | None = None) -> str:
    return f"vnd.android.cursor.dir/{authority or content_authority()}/{PATH_PETS}"


def content_item_type(authority: str | None = None) -> str:
    return f"vnd.android.cursor.item/{authority or content_authority()}/{PATH_PETS}"
