"""One-off migration script: JSON document (db.json) -> SQL backend."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the marketplace package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from marketplace.core.config import get_settings  # noqa: E402
from marketplace.repositories import JsonDocumentStore, SQLDocumentStore  # noqa: E402
from marketplace.repositories.base import COLLECTIONS  # noqa: E402


def migrate(json_path: Path, database_url: str) -> dict:
    if not json_path.exists():
        raise SystemExit(f"File not found: {json_path}")
    document = JsonDocumentStore(json_path).read()
    target = SQLDocumentStore(database_url)
    target.initialize()
    if not target.write(document):
        raise SystemExit(f"Failed to write document to {database_url}")
    return {name: len(document[name]) for name in COLLECTIONS}


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy the JSON document into the SQL backend")
    ap.add_argument("--source", default=settings.data_file, help="JSON document path")
    ap.add_argument("--database-url", default=settings.database_url, help="SQLAlchemy URL of the target")
    args = ap.parse_args()
    counts = migrate(Path(args.source), args.database_url)
    summary = ", ".join(f"{name}={count}" for name, count in counts.items())
    print(f"JSON data migrated successfully ({summary}).")


if __name__ == "__main__":
    main()
