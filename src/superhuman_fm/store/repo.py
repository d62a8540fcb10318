"""Repository pattern for preference storage in SQLite.

Each user's channel selection is a single JSON-encoded row, so a save is one
atomic upsert.
"""

import json
import sqlite3
from typing import Optional, Sequence
from .base import PreferenceStore
from .db import get_db_connection
from ..schemas.preferences import UserPreference
import logging

logger = logging.getLogger("preferences")

class SqlitePreferenceStore(PreferenceStore):
    def get(self, user_id: str) -> Optional[UserPreference]:
        """
        Saved selection, or None when there is none.
        A read error is logged and treated as "no saved selection".
        """
        try:
            with get_db_connection() as conn:
                row = conn.execute(
                    "SELECT channel_ids FROM user_preferences WHERE user_id = ?",
                    (user_id,)
                ).fetchone()
        except sqlite3.Error as e:
            logger.error(f"DB Error reading preferences for {user_id}: {e}")
            return None
        if not row:
            return None
        return UserPreference(user_id=user_id, channel_ids=json.loads(row["channel_ids"]))

    def set(self, user_id: str, channel_ids: Sequence[str]) -> bool:
        """
        Upsert the user's selection.
        Returns False (and logs) if the database rejects the write.
        """
        try:
            with get_db_connection() as conn:
                conn.execute(
                    """
                    INSERT INTO user_preferences (user_id, channel_ids)
                    VALUES (?, ?)
                    ON CONFLICT(user_id) DO UPDATE SET
                        channel_ids = excluded.channel_ids,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (user_id, json.dumps(list(channel_ids)))
                )
                conn.commit()
                return True
        except sqlite3.Error as e:
            logger.error(f"DB Error saving preferences for {user_id}: {e}")
            return False
