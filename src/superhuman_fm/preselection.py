"""Default channel selection for users who have never saved settings."""

from typing import List, Optional, Sequence

from .schemas.preferences import ChannelRef, UserPreference

DEFAULT_PREFIX = "all-"
DEFAULT_LIMIT = 10


def candidate_channels(
    channels: Sequence[ChannelRef],
    prefix: str = DEFAULT_PREFIX,
    limit: int = DEFAULT_LIMIT,
) -> List[str]:
    """
    Ids of channels whose name starts with `prefix`, in the order the
    platform returned them, capped at `limit`.
    """
    matches = [c.id for c in channels if c.name and c.name.startswith(prefix)]
    return matches[:limit]


def preselect_channels(
    channels: Sequence[ChannelRef],
    existing: Optional[UserPreference],
    prefix: str = DEFAULT_PREFIX,
    limit: int = DEFAULT_LIMIT,
) -> List[str]:
    """
    Channels to pre-check in the settings form.
    A saved preference always wins, including an empty one.
    """
    if existing is not None:
        return list(existing.channel_ids)
    return candidate_channels(channels, prefix=prefix, limit=limit)
