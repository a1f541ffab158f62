"""Database helpers (engine/session export)."""

from .session import Base, make_engine, make_sessionmaker, session_scope

__all__ = ["Base", "make_engine", "make_sessionmaker", "session_scope"]
