#!/usr/bin/env python3
"""
Add one pet to the catalog through the content resolver.

Usage:
  python scripts/add_pet.py --name Toto --breed Terrier [--gender male] [--weight 7]
"""
from __future__ import annotations

import argparse
import sys

from petcatalog.core.log import configure_logging
from petcatalog.domain.contract import Gender, content_uri
from petcatalog.domain.errors import ProviderError, ValidationFailed
from petcatalog.services.resolver import get_resolver

GENDER_NAMES = {gender.name.lower(): gender for gender in Gender}


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a pet to the catalog")
    ap.add_argument("--name", required=True, help="Pet name")
    ap.add_argument("--breed", required=True, help="Pet breed (e.g. Terrier)")
    ap.add_argument("--gender", choices=sorted(GENDER_NAMES), default="unknown", help="default: unknown")
    ap.add_argument("--weight", type=int, default=0, help="Weight in kg (default: 0)")
    args = ap.parse_args()

    configure_logging()
    resolver = get_resolver()
    values = {
        "name": args.name,
        "breed": args.breed,
        "gender": int(GENDER_NAMES[args.gender]),
        "weight": args.weight,
    }
    try:
        uri = resolver.insert(content_uri(resolver.default_authority), values)
    except ValidationFailed as exc:
        raise SystemExit(f"Invalid {exc.field}: {exc.reason}")
    except ProviderError as exc:
        raise SystemExit(f"Could not add pet: {exc}")

    print("OK: pet added")
    print(f"  URI: {uri}")
    print(f"  Name: {args.name}")
    print(f"  Breed: {args.breed}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
