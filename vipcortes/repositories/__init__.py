"""
Persistence adapters.

Each collection (users, profiles, appointments, reviews, loyalty accounts) is
reached through a ``RecordStore``. Two implementations exist: SQL (the normal
case) and one-JSON-file-per-collection (when the database is unreachable at
startup). ``select_storage`` picks one of them once and services only see the
interface.
"""

from .base import Collection, DuplicateRecordError, RecordStore, StorageError
from .collections import APPOINTMENTS, LOYALTY, PROFILES, REVIEWS, USERS
from .selector import Storage, StorageMode, select_storage

__all__ = [
    "APPOINTMENTS",
    "Collection",
    "DuplicateRecordError",
    "LOYALTY",
    "PROFILES",
    "REVIEWS",
    "RecordStore",
    "Storage",
    "StorageError",
    "StorageMode",
    "USERS",
    "select_storage",
]
