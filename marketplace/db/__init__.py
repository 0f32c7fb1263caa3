"""SQL backend helpers (engine/session export, declarative base)."""

from .session import Base, get_engine, get_session

__all__ = ["Base", "get_engine", "get_session"]
