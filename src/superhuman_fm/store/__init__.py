"""Preference storage.

Callers depend on the PreferenceStore interface only; get_preference_store()
returns the process-wide instance for the configured backend.
"""

from functools import lru_cache

from ..config import get_settings
from .base import PreferenceStore
from .memory import InMemoryPreferenceStore
from .repo import SqlitePreferenceStore


@lru_cache()
def get_preference_store() -> PreferenceStore:
    settings = get_settings()
    backend = settings.PREFERENCE_BACKEND.lower()
    if backend == "memory":
        return InMemoryPreferenceStore()
    if backend == "sqlite":
        from .db import init_db
        init_db()
        return SqlitePreferenceStore()
    raise ValueError(f"Unknown PREFERENCE_BACKEND: {settings.PREFERENCE_BACKEND}")


__all__ = [
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "SqlitePreferenceStore",
    "get_preference_store",
]
