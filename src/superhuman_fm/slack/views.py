"""Block Kit views for the Home tab and the settings modal."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

OPEN_SETTINGS_ACTION = "open_settings_modal"
SEND_PODCAST_ACTION = "send_podcast_to_me"
SETTINGS_CALLBACK_ID = "settings_modal_submit"
CHANNELS_BLOCK_ID = "channels_input"
CHANNELS_ACTION_ID = "selected_channels"


def _button(text: str, action_id: str, style: str | None = None) -> Dict[str, Any]:
    button: Dict[str, Any] = {
        "type": "button",
        "text": {"type": "plain_text", "text": text, "emoji": True},
        "action_id": action_id,
    }
    if style:
        button["style"] = style
    return button


def build_home_view() -> Dict[str, Any]:
    return {
        "type": "home",
        "blocks": [
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": "*Welcome to your Superhuman FM!* 🎉"},
            },
            {"type": "divider"},
            {
                "type": "actions",
                "elements": [_button("⚙️ Settings", OPEN_SETTINGS_ACTION)],
            },
            {"type": "divider"},
            {
                "type": "actions",
                "elements": [_button("🎙️ Send Podcast to Me", SEND_PODCAST_ACTION, style="primary")],
            },
        ],
    }


def build_channel_select(initial_channels: Sequence[str], max_channels: int = 10) -> Dict[str, Any]:
    """
    multi_conversations_select limited to public and private channels.
    initial_conversations is omitted when nothing is preselected; Slack
    rejects an empty list there.
    """
    element: Dict[str, Any] = {
        "type": "multi_conversations_select",
        "action_id": CHANNELS_ACTION_ID,
        "placeholder": {"type": "plain_text", "text": "Select channels..."},
        "filter": {"include": ["public", "private"], "exclude_bot_users": True},
        "max_selected_items": max_channels,
    }
    if initial_channels:
        element["initial_conversations"] = list(initial_channels)
    return element


def build_settings_modal(initial_channels: Sequence[str], max_channels: int = 10) -> Dict[str, Any]:
    blocks: List[Dict[str, Any]] = [
        {
            "type": "section",
            "text": {"type": "mrkdwn", "text": "*Configure your preferences*"},
        },
        {"type": "divider"},
        {
            "type": "section",
            "text": {
                "type": "mrkdwn",
                "text": f"*📢 Channels*\nSelect channels to monitor (up to {max_channels})",
            },
        },
        {
            "type": "input",
            "block_id": CHANNELS_BLOCK_ID,
            "element": build_channel_select(initial_channels, max_channels),
            "label": {"type": "plain_text", "text": "Channels"},
        },
    ]
    return {
        "type": "modal",
        "callback_id": SETTINGS_CALLBACK_ID,
        "title": {"type": "plain_text", "text": "Settings"},
        "submit": {"type": "plain_text", "text": "Save"},
        "close": {"type": "plain_text", "text": "Cancel"},
        "blocks": blocks,
    }
