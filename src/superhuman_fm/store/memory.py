"""In-process preference store.

Records live for the lifetime of the process only.
"""

import threading
from typing import Dict, Optional, Sequence, Tuple

from ..schemas.preferences import UserPreference
from .base import PreferenceStore


class InMemoryPreferenceStore(PreferenceStore):
    def __init__(self):
        self._lock = threading.Lock()
        self._records: Dict[str, Tuple[str, ...]] = {}

    def get(self, user_id: str) -> Optional[UserPreference]:
        with self._lock:
            channel_ids = self._records.get(user_id)
        if channel_ids is None:
            return None
        return UserPreference(user_id=user_id, channel_ids=list(channel_ids))

    def set(self, user_id: str, channel_ids: Sequence[str]) -> bool:
        # Stored as a tuple so readers never see a list being mutated
        record = tuple(channel_ids)
        with self._lock:
            self._records[user_id] = record
        return True
