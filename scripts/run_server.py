#!/usr/bin/env python3
"""
Start the marketplace API with uvicorn.

Usage:
  python scripts/run_server.py [--host 0.0.0.0] [--port 5000] [--reload]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import uvicorn

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from marketplace.core.config import get_settings  # noqa: E402


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Run the marketplace API")
    ap.add_argument("--host", default=settings.host, help=f"bind address (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"bind port (default: {settings.port})")
    ap.add_argument("--reload", action="store_true", help="restart on code changes (development)")
    args = ap.parse_args()
    uvicorn.run(
        "marketplace.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
