#!/usr/bin/env python3
"""
Insert sample pets and/or clear the catalog.

Usage:
  python scripts/seed_pets.py [--clear] [--sample 3]
"""
from __future__ import annotations

import argparse
import sys

from petcatalog.core.log import configure_logging
from petcatalog.services.catalog_service import delete_all_pets, insert_dummy_pet


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed or clear the pet catalog")
    ap.add_argument("--clear", action="store_true", help="delete every pet first")
    ap.add_argument("--sample", type=int, default=0, help="number of sample pets (Toto) to insert")
    args = ap.parse_args()
    if args.sample < 0:
        raise SystemExit("--sample must not be negative")
    if not args.clear and not args.sample:
        ap.error("nothing to do: pass --clear and/or --sample N")

    configure_logging()
    if args.clear:
        print(f"OK: {delete_all_pets()} pet(s) deleted")
    for _ in range(args.sample):
        print(f"OK: inserted {insert_dummy_pet()}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
