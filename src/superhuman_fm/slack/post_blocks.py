"""Slack message payload builders.

Provides build_post_payload() for chat.postMessage with optional Block Kit blocks.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


def build_post_payload(
    channel: str,
    text: str,
    blocks: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    Payload for chat.postMessage.
    `text` is the notification fallback when blocks are present.
    Posting to a user id delivers to the app's Messages tab for that user.
    """
    payload: Dict[str, Any] = {
        "channel": channel,
        "text": text,
        "mrkdwn": True,
        "unfurl_links": False,
        "unfurl_media": False,
    }
    if blocks:
        payload["blocks"] = blocks
    return payload
