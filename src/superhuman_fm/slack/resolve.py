"""Channel id to display label resolution.

Every id gets a ChannelSummary: `#name` on success, `<#id>` mention syntax when
the lookup fails. Failures never propagate past this module.
"""

import logging
from typing import List, Sequence

from pydantic import ValidationError
from slack_sdk.errors import SlackClientError

from ..schemas.preferences import ChannelSummary
from .client import SlackClientWrapper

logger = logging.getLogger("resolver")


def fallback_label(channel_id: str) -> str:
    return f"<#{channel_id}>"


class ChannelResolver:
    def __init__(self, platform: SlackClientWrapper):
        self.platform = platform

    def resolve(self, channel_id: str) -> ChannelSummary:
        # KeyError and ValidationError cover malformed "ok" responses
        try:
            channel = self.platform.get_channel(channel_id)
        except (SlackClientError, OSError, KeyError, ValidationError) as e:
            logger.warning(f"Could not resolve channel {channel_id}: {e}")
            return ChannelSummary(
                id=channel_id,
                display_name=fallback_label(channel_id),
                resolved=False,
                error=str(e),
            )

        if not channel.name:
            return ChannelSummary(
                id=channel_id,
                display_name=fallback_label(channel_id),
                resolved=False,
                error="channel has no name",
            )
        return ChannelSummary(id=channel_id, display_name=f"#{channel.name}")

    def resolve_all(self, channel_ids: Sequence[str]) -> List[ChannelSummary]:
        """Resolve each id independently; output order matches input order."""
        return [self.resolve(channel_id) for channel_id in channel_ids]
