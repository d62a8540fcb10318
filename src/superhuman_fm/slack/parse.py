from typing import Any, Dict, List, Optional

from .views import CHANNELS_ACTION_ID, CHANNELS_BLOCK_ID


def parse_user_id(body: Dict[str, Any]) -> Optional[str]:
    """User id from a block_actions or view_submission payload."""
    return (body.get("user") or {}).get("id")


def parse_selected_channels(view: Dict[str, Any]) -> List[str]:
    """
    Channel ids submitted in the settings modal, in the order Slack sent them.
    Returns an empty list when the user cleared the selection.
    """
    values = (view.get("state") or {}).get("values") or {}
    element = (values.get(CHANNELS_BLOCK_ID) or {}).get(CHANNELS_ACTION_ID) or {}
    return list(element.get("selected_conversations") or [])
