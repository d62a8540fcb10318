from typing import Any, Dict, List, Optional
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from ..config import get_settings
from ..log import get_logger
from ..schemas.preferences import ChannelRef

logger = get_logger("slack_client")
settings = get_settings()

class SlackClientWrapper:
    """
    Thin wrapper over the Web API calls the app needs.
    Errors are logged and re-raised; callers decide how to degrade.
    """
    def __init__(self, client: Optional[WebClient] = None):
        self.client = client or WebClient(token=settings.SLACK_BOT_TOKEN)

    def list_member_channels(self, user_id: str) -> List[ChannelRef]:
        """
        Channels (public and private, not archived) the user belongs to,
        in the order Slack returns them.
        Requires 'channels:read' and 'groups:read' scopes.
        """
        try:
            response = self.client.users_conversations(
                user=user_id,
                types="public_channel,private_channel",
                exclude_archived=True,
                limit=settings.MEMBERSHIP_FETCH_LIMIT
            )
            return [ChannelRef.model_validate(c) for c in response.get("channels") or []]
        except SlackApiError as e:
            logger.error(f"Error listing channels for {user_id}: {e.response['error']}")
            raise

    def get_channel(self, channel_id: str) -> ChannelRef:
        try:
            response = self.client.conversations_info(channel=channel_id)
            return ChannelRef.model_validate(response["channel"])
        except SlackApiError as e:
            logger.debug(f"conversations.info failed for {channel_id}: {e.response['error']}")
            raise

    def post_payload(self, payload: Dict[str, Any]):
        """
        Post a prepared payload (dict) directly to Slack using chat_postMessage.
        """
        try:
            self.client.chat_postMessage(**payload)
        except SlackApiError as e:
            logger.error(f"Slack API error: {e.response['error']}")
            raise

    def publish_home(self, user_id: str, view: Dict[str, Any]):
        try:
            response = self.client.views_publish(user_id=user_id, view=view)
            return response["ok"]
        except SlackApiError as e:
            logger.error(f"Error publishing home view: {e.response['error']}")
            raise

    def open_view(self, trigger_id: str, view: Dict[str, Any]):
        try:
            self.client.views_open(trigger_id=trigger_id, view=view)
        except SlackApiError as e:
            logger.error(f"Error opening view: {e.response['error']}")
            raise

slack_client = SlackClientWrapper()
