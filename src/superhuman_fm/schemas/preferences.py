"""Pydantic schemas for user preferences and channel data.

Defines UserPreference, ChannelRef and ChannelSummary models.
"""

from pydantic import BaseModel
from typing import List, Optional

class UserPreference(BaseModel):
    user_id: str
    channel_ids: List[str]

class ChannelRef(BaseModel):
    """A channel as returned by users.conversations or conversations.info."""
    id: str
    name: Optional[str] = None

class ChannelSummary(BaseModel):
    """
    Outcome of resolving one channel id to a display label.
    `resolved` is False when the lookup failed and `display_name` holds the
    mention fallback instead of the channel name.
    """
    id: str
    display_name: str
    resolved: bool = True
    error: Optional[str] = None
