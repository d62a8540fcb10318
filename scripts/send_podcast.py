#!/usr/bin/env python3
"""
Utility: send the podcast notification to a user outside the socket process.

Usage:
  python scripts/send_podcast.py U12345

Uses the configured preference store, so set PREFERENCE_BACKEND=sqlite to
pick up selections saved by a running listener.

Requires: SLACK_BOT_TOKEN in environment (same as the main app).
"""
from __future__ import annotations
import argparse
import sys

from superhuman_fm.log import setup_logging
from superhuman_fm.rendering.notification import use_system_locale
from superhuman_fm.session import SessionOrchestrator
from superhuman_fm.slack.client import slack_client
from superhuman_fm.store import get_preference_store


def main() -> int:
    parser = argparse.ArgumentParser(description="Send the podcast notification to a Slack user")
    parser.add_argument("user_id", help="Slack user id (U...)")
    args = parser.parse_args()

    setup_logging()
    use_system_locale()
    orchestrator = SessionOrchestrator(store=get_preference_store(), platform=slack_client)
    return 0 if orchestrator.request_notification(args.user_id) else 1


if __name__ == "__main__":
    sys.exit(main())
