"""Notification message composition.

Builds the podcast notification and the settings confirmation from resolved
channel summaries. No I/O here; the orchestrator sends what these return.
"""

from __future__ import annotations

import locale
import logging
from datetime import datetime
from typing import Any, Dict, List, Sequence

from ..schemas.preferences import ChannelSummary

logger = logging.getLogger("rendering")

PODCAST_HEADER = "🎙️ Superhuman FM - Your Daily Podcast"
PODCAST_FALLBACK_TEXT = "🎙️ Your Superhuman FM podcast is ready!"
NO_CHANNELS_TEXT = "_No channels selected yet. Update your settings!_"
PLACEHOLDER_BODY = (
    "🔊 *Test Audio Message*\n"
    "This is a placeholder for your generated podcast. The full feature will include "
    "AI-generated audio summaries of your selected channels!"
)


def use_system_locale() -> bool:
    """
    Switch LC_TIME to the environment's locale so the timestamp line renders
    dates and times the way the host expects. Falls back to the C locale.
    """
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Could not apply system locale, using C locale: {e}")
        return False
    return True


def join_channel_names(channels: Sequence[ChannelSummary]) -> str:
    return ", ".join(c.display_name for c in channels)


def format_generated_at(generated_at: datetime) -> str:
    # %x / %X follow the process locale
    return f"📅 Generated on {generated_at.strftime('%x')} at {generated_at.strftime('%X')}"


def format_monitoring_line(channels: Sequence[ChannelSummary]) -> str:
    names = join_channel_names(channels) if channels else NO_CHANNELS_TEXT
    return f"*📢 Monitoring {len(channels)} channel(s):*\n{names}"


def compose_podcast_message(
    user_id: str,
    channels: Sequence[ChannelSummary],
    generated_at: datetime,
) -> Dict[str, Any]:
    """
    Podcast notification as {"blocks": [...], "text": fallback}.
    Layout: header, greeting, monitored channels, placeholder body, timestamp.
    """
    blocks: List[Dict[str, Any]] = [
        {
            "type": "header",
            "text": {"type": "plain_text", "text": PODCAST_HEADER, "emoji": True},
        },
        {
            "type": "section",
            "text": {
                "type": "mrkdwn",
                "text": f"Hey <@{user_id}>! Here's your personalized podcast summary.",
            },
        },
        {"type": "divider"},
        {
            "type": "section",
            "text": {"type": "mrkdwn", "text": format_monitoring_line(channels)},
        },
        {
            "type": "section",
            "text": {"type": "mrkdwn", "text": PLACEHOLDER_BODY},
        },
        {"type": "divider"},
        {
            "type": "context",
            "elements": [{"type": "mrkdwn", "text": format_generated_at(generated_at)}],
        },
    ]
    return {"blocks": blocks, "text": PODCAST_FALLBACK_TEXT}


def compose_settings_confirmation(channels: Sequence[ChannelSummary]) -> Dict[str, Any]:
    names = join_channel_names(channels) if channels else "None selected"
    return {"text": f"✅ *Settings saved!*\n\n📢 *Channels:* {names}"}


def compose_settings_failure() -> Dict[str, Any]:
    return {"text": "⚠️ *Your settings could not be saved.* Please try again."}
