"""Field rules applied to pet payloads before they reach storage."""
from __future__ import annotations

from typing import Any, Mapping

from petcatalog.domain.contract import (
    COLUMN_ID,
    COLUMN_PET_BREED,
    COLUMN_PET_GENDER,
    COLUMN_PET_NAME,
    COLUMN_PET_WEIGHT,
    WRITABLE_COLUMNS,
    is_valid_gender,
)
from petcatalog.domain.errors import ValidationFailed

REQUIRED_ON_INSERT = (COLUMN_PET_NAME, COLUMN_PET_BREED, COLUMN_PET_GENDER)
DEFAULT_WEIGHT = 0


def _as_int(value: Any) -> int | None:
    """Integer view of value; digit strings are accepted, bools are not."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return None
    return None


def _non_empty_text(field: str, value: Any) -> str:
    if value is None:
        raise ValidationFailed(field, "is required")
    if not isinstance(value, str):
        raise ValidationFailed(field, "must be a string")
    if not value.strip():
        raise ValidationFailed(field, "must not be empty")
    return value


def validate_pet(values: Mapping[str, Any] | None, *, partial: bool = False) -> dict[str, Any]:
    """
    Check a payload and return the accepted copy.

    partial=False applies insert rules (name, breed and gender required,
    weight defaulted to 0). partial=True applies update rules, where any
    subset of the writable columns may be given.
    """
    payload = dict(values or {})

    for field in payload:
        if field == COLUMN_ID:
            raise ValidationFailed(field, "is assigned by storage and cannot be written")
        if field not in WRITABLE_COLUMNS:
            raise ValidationFailed(field, "is not a pet column")

    if not partial:
        for field in REQUIRED_ON_INSERT:
            if field not in payload:
                raise ValidationFailed(field, "is required")

    accepted: dict[str, Any] = {}

    if COLUMN_PET_NAME in payload:
        accepted[COLUMN_PET_NAME] = _non_empty_text(COLUMN_PET_NAME, payload[COLUMN_PET_NAME])

    if COLUMN_PET_BREED in payload:
        accepted[COLUMN_PET_BREED] = _non_empty_text(COLUMN_PET_BREED, payload[COLUMN_PET_BREED])

    if COLUMN_PET_GENDER in payload:
        gender = _as_int(payload[COLUMN_PET_GENDER])
        if gender is None or not is_valid_gender(gender):
            raise ValidationFailed(COLUMN_PET_GENDER, "must be 0 (unknown), 1 (male) or 2 (female)")
        accepted[COLUMN_PET_GENDER] = int(gender)

    if COLUMN_PET_WEIGHT in payload:
        weight = _as_int(payload[COLUMN_PET_WEIGHT])
        if weight is None:
            raise ValidationFailed(COLUMN_PET_WEIGHT, "must be an integer")
        if weight < 0:
            raise ValidationFailed(COLUMN_PET_WEIGHT, "must not be negative")
        accepted[COLUMN_PET_WEIGHT] = int(weight)
    elif not partial:
        accepted[COLUMN_PET_WEIGHT] = DEFAULT_WEIGHT

    return accepted
