from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..schemas.preferences import UserPreference


class PreferenceStore(ABC):
    """Keyed store of the channels each user wants monitored."""

    @abstractmethod
    def get(self, user_id: str) -> Optional[UserPreference]:
        """Return the saved preference, or None if the user never saved one."""

    @abstractmethod
    def set(self, user_id: str, channel_ids: Sequence[str]) -> bool:
        """
        Replace the user's preference with `channel_ids` as given.
        Returns True when the write succeeded.
        """
