from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, HTTPException, Request

from petcatalog.domain.contract import (
    COLUMN_PET_BREED,
    COLUMN_PET_GENDER,
    COLUMN_PET_NAME,
    COLUMN_PET_WEIGHT,
    content_uri,
)
from petcatalog.domain.errors import (
    ProviderError,
    StorageError,
    StorageWriteFailed,
    UnsupportedResource,
    ValidationFailed,
)
from petcatalog.domain.uris import parse_id
from petcatalog.services.catalog_service import insert_dummy_pet
from petcatalog.services.resolver import ContentResolver

router = APIRouter(prefix="/pets", tags=["pets"])


def _get_resolver(request: Request) -> ContentResolver:
    resolver = getattr(getattr(request.app, "state", None), "resolver", None)
    if not resolver:
        raise RuntimeError("ContentResolver not configured")
    return resolver


def _collection_uri(resolver: ContentResolver) -> str:
    return content_uri(resolver.default_authority)


def _item_uri(resolver: ContentResolver, pet_id: str) -> str:
    # pet_id stays a string so the URI matcher decides what a valid id is
    return f"{_collection_uri(resolver)}/{pet_id}"


def _http_error(exc: ProviderError) -> HTTPException:
    if isinstance(exc, UnsupportedResource):
        return HTTPException(404, "Unsupported resource")
    if isinstance(exc, ValidationFailed):
        return HTTPException(422, {"field": exc.field, "reason": exc.reason})
    if isinstance(exc, StorageWriteFailed):
        return HTTPException(409, "Storage write failed")
    if isinstance(exc, StorageError):
        return HTTPException(400, str(exc))
    return HTTPException(500, str(exc))


def _selection(
    name: Optional[str],
    breed: Optional[str],
    gender: Optional[int],
    weight: Optional[int],
) -> dict:
    given = {
        COLUMN_PET_NAME: name,
        COLUMN_PET_BREED: breed,
        COLUMN_PET_GENDER: gender,
        COLUMN_PET_WEIGHT: weight,
    }
    return {column: value for column, value in given.items() if value is not None}


def _created(uri: str) -> dict:
    return {"id": parse_id(uri), "uri": uri}


@router.get("")
def list_pets(
    request: Request,
    fields: str = "",
    sort: Optional[str] = None,
    name: Optional[str] = None,
    breed: Optional[str] = None,
    gender: Optional[int] = None,
    weight: Optional[int] = None,
):
    resolver = _get_resolver(request)
    projection = [f.strip() for f in fields.split(",") if f.strip()] or None
    try:
        return resolver.query(
            _collection_uri(resolver),
            projection=projection,
            selection=_selection(name, breed, gender, weight),
            sort_order=sort,
        )
    except ProviderError as exc:
        raise _http_error(exc) from exc


@router.post("", status_code=201)
def create_pet(request: Request, payload: dict = Body(...)):
    resolver = _get_resolver(request)
    try:
        uri = resolver.insert(_collection_uri(resolver), payload)
    except ProviderError as exc:
        raise _http_error(exc) from exc
    return _created(uri)


@router.post("/sample", status_code=201)
def create_sample_pet(request: Request):
    resolver = _get_resolver(request)
    try:
        uri = insert_dummy_pet(resolver)
    except ProviderError as exc:
        raise _http_error(exc) from exc
    return _created(uri)


@router.delete("")
def delete_pets(
    request: Request,
    name: Optional[str] = None,
    breed: Optional[str] = None,
    gender: Optional[int] = None,
    weight: Optional[int] = None,
):
    resolver = _get_resolver(request)
    try:
        deleted = resolver.delete(_collection_uri(resolver), _selection(name, breed, gender, weight) or None)
    except ProviderError as exc:
        raise _http_error(exc) from exc
    return {"deleted": deleted}


@router.get("/{pet_id}")
def get_pet(pet_id: str, request: Request):
    resolver = _get_resolver(request)
    try:
        rows = resolver.query(_item_uri(resolver, pet_id))
    except ProviderError as exc:
        raise _http_error(exc) from exc
    if not rows:
        raise HTTPException(404, "Pet not found")
    return rows[0]


@router.patch("/{pet_id}")
def update_pet(pet_id: str, request: Request, payload: dict = Body(...)):
    resolver = _get_resolver(request)
    try:
        updated = resolver.update(_item_uri(resolver, pet_id), payload)
    except ProviderError as exc:
        raise _http_error(exc) from exc
    return {"updated": updated}


@router.delete("/{pet_id}")
def delete_pet(pet_id: str, request: Request):
    resolver = _get_resolver(request)
    try:
        deleted = resolver.delete(_item_uri(resolver, pet_id))
    except ProviderError as exc:
        raise _http_error(exc) from exc
    return {"deleted": deleted}
