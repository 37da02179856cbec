#!/usr/bin/env python3
"""
Seed products from a JSON file into the configured database.
Entries that fail product validation (blank name, negative stock) are skipped.

Usage:
    python scripts/seed_products.py --file products.json [--reset]
"""
import argparse
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from inventory_api.db import SessionLocal, init_db
from inventory_api.seed import seed_from_file


def main(argv=None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", required=True, help="Path to a JSON list of product entries")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate the products table first")
    args = parser.parse_args(argv)
    if not os.path.exists(args.file):
        print("File not found:", args.file)
        return 1

    # sample data is only wanted on an empty startup, not when loading a file
    init_db(reset=args.reset, seed=False)
    db = SessionLocal()
    try:
        seed_from_file(args.file, db)
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
