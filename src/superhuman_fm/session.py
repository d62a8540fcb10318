"""Per-event orchestration for the settings and podcast flows.

Each method handles one inbound event kind after the listener has acked it.
Pure work (preselection, composition) lives in preselection.py and
rendering/notification.py; this module only reads/writes the store and talks
to Slack.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List

from slack_sdk.errors import SlackClientError

from .config import get_settings
from .log import get_logger
from .preselection import preselect_channels
from .rendering.notification import (
    compose_podcast_message,
    compose_settings_confirmation,
    compose_settings_failure,
)
from .schemas.preferences import ChannelRef
from .slack.client import SlackClientWrapper
from .slack.post_blocks import build_post_payload
from .slack.resolve import ChannelResolver
from .slack.views import build_home_view, build_settings_modal
from .store.base import PreferenceStore

logger = get_logger("session")
settings = get_settings()


class SessionOrchestrator:
    def __init__(
        self,
        store: PreferenceStore,
        platform: SlackClientWrapper,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.platform = platform
        self.resolver = ChannelResolver(platform)
        self.clock = clock

    def publish_home(self, user_id: str) -> bool:
        try:
            self.platform.publish_home(user_id, build_home_view())
        except (SlackClientError, OSError) as e:
            logger.error(f"❌ Error publishing home view for {user_id}: {e}")
            return False
        logger.info(f"✅ Home view published for {user_id}")
        return True

    def fetch_member_channels(self, user_id: str) -> List[ChannelRef]:
        """Live membership; a failed fetch degrades to no candidates."""
        try:
            return self.platform.list_member_channels(user_id)
        except (SlackClientError, OSError) as e:
            logger.warning(f"Could not list channels for {user_id}, nothing preselected: {e}")
            return []

    def initial_channels(self, user_id: str) -> List[str]:
        existing = self.store.get(user_id)
        # Membership only matters when there is no saved selection
        channels = [] if existing is not None else self.fetch_member_channels(user_id)
        preselected = preselect_channels(
            channels,
            existing,
            prefix=settings.PRESELECT_PREFIX,
            limit=settings.MAX_CHANNELS,
        )
        if existing is not None:
            logger.info(f"📋 Using {len(preselected)} saved channel(s) for {user_id}")
            return preselected
        logger.info(
            f"📋 Found {len(channels)} channels, preselecting {len(preselected)} "
            f"\"{settings.PRESELECT_PREFIX}*\" channels"
        )
        return preselected

    def open_settings(self, user_id: str, trigger_id: str) -> bool:
        view = build_settings_modal(self.initial_channels(user_id), settings.MAX_CHANNELS)
        try:
            self.platform.open_view(trigger_id, view)
        except (SlackClientError, OSError) as e:
            logger.error(f"❌ Error opening settings modal: {e}")
            return False
        logger.info("✅ Settings modal opened")
        return True

    def submit_settings(self, user_id: str, channel_ids: List[str]) -> bool:
        if not self.store.set(user_id, channel_ids):
            logger.error(f"❌ Settings for {user_id} were not saved")
            self.dispatch(user_id, compose_settings_failure())
            return False

        logger.info(f"✅ Settings saved for user {user_id}: {channel_ids}")
        channels = self.resolver.resolve_all(channel_ids)
        self.dispatch(user_id, compose_settings_confirmation(channels))
        return True

    def request_notification(self, user_id: str) -> bool:
        existing = self.store.get(user_id)
        channel_ids = existing.channel_ids if existing else []
        channels = self.resolver.resolve_all(channel_ids)
        message = compose_podcast_message(user_id, channels, self.clock())
        sent = self.dispatch(user_id, message)
        if sent:
            logger.info(f"✅ Podcast message sent to user: {user_id}")
        return sent

    def dispatch(self, user_id: str, message: Dict[str, Any]) -> bool:
        """Send to the user's DM with the app. Failures are logged, not retried."""
        payload = build_post_payload(user_id, message["text"], blocks=message.get("blocks"))
        try:
            self.platform.post_payload(payload)
        except (SlackClientError, OSError) as e:
            logger.error(f"❌ Error sending message to {user_id}: {e}")
            return False
        return True
