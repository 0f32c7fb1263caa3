#!/usr/bin/env python3
"""
Add a product listing directly to the configured store.

Usage:
  python scripts/add_product.py --seller S1 --name Widget [--price 10] [--field color=red ...]
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from marketplace.core.config import get_settings  # noqa: E402
from marketplace.repositories import build_store  # noqa: E402
from marketplace.services.product_service import ProductService  # noqa: E402


def parse_field(raw: str) -> tuple[str, object]:
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected key=value, got {raw!r}")
    try:
        parsed = json.loads(value)
    except ValueError:
        parsed = value
    return key.strip(), parsed


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a product to the marketplace store")
    ap.add_argument("--seller", required=True, help="seller id that owns the listing")
    ap.add_argument("--name", required=True, help="product name")
    ap.add_argument("--price", type=float, help="product price")
    ap.add_argument("--field", action="append", type=parse_field, default=[], help="extra field as key=value (JSON values allowed)")
    args = ap.parse_args()

    seller = args.seller.strip()
    if not seller:
        raise SystemExit("Seller id must not be empty")
    fields: dict = {"name": args.name, "sellerId": seller}
    if args.price is not None:
        fields["price"] = args.price
    fields.update(dict(args.field))

    store = build_store(get_settings())
    store.initialize()
    product = ProductService(store).create_product(fields)
    print("OK: product created")
    print(json.dumps(product, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
