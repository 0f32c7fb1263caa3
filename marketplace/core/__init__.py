"""
Core utilities shared across the marketplace API.

This package hosts:
- configuration helpers (env vars, paths, identity mode)
- logging setup
- small helpers for timestamps and identifiers

Routers and services depend on these primitives instead of reading the
environment or formatting timestamps themselves.
"""
