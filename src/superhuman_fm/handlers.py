"""Bolt listeners.

Every listener acks before doing any work; Slack expects the ack within
3 seconds.
"""

import logging
from slack_bolt import App
from slack_sdk import WebClient
from .session import SessionOrchestrator
from .slack.client import SlackClientWrapper
from .slack.parse import parse_selected_channels, parse_user_id
from .slack.views import OPEN_SETTINGS_ACTION, SEND_PODCAST_ACTION, SETTINGS_CALLBACK_ID
from .store import get_preference_store

logger = logging.getLogger("handlers")


def build_orchestrator(client: WebClient) -> SessionOrchestrator:
    return SessionOrchestrator(
        store=get_preference_store(),
        platform=SlackClientWrapper(client),
    )


def _require_user(body):
    user_id = parse_user_id(body)
    if not user_id:
        logger.warning(f"Ignoring {body.get('type', 'payload')} without a user id")
    return user_id


def log_request(body, next):
    payload_type = body.get("type") or (body.get("event") or {}).get("type") or "unknown"
    logger.debug(f"📥 Received: {payload_type}")
    next()


def handle_app_home_opened(event, client):
    user_id = event.get("user")
    if not user_id:
        logger.warning("Ignoring app_home_opened without a user id")
        return
    logger.info(f"🏠 app_home_opened event received for user: {user_id}")
    build_orchestrator(client).publish_home(user_id)


def handle_open_settings(ack, body, client):
    ack()
    logger.info("⚙️ Settings button clicked")
    user_id = _require_user(body)
    if user_id:
        build_orchestrator(client).open_settings(user_id, body.get("trigger_id"))


def handle_send_podcast(ack, body, client):
    ack()
    logger.info("🎙️ Send Podcast to Me button clicked")
    user_id = _require_user(body)
    if user_id:
        build_orchestrator(client).request_notification(user_id)


def handle_settings_submit(ack, body, view, client):
    ack()
    logger.info("📝 Settings modal submitted")
    user_id = _require_user(body)
    if user_id:
        build_orchestrator(client).submit_settings(user_id, parse_selected_channels(view))


def handle_errors(error, body):
    logger.error(f"❌ App error: {error}", exc_info=error)


def register_handlers(app: App) -> App:
    app.middleware(log_request)
    app.event("app_home_opened")(handle_app_home_opened)
    app.action(OPEN_SETTINGS_ACTION)(handle_open_settings)
    app.action(SEND_PODCAST_ACTION)(handle_send_podcast)
    app.view(SETTINGS_CALLBACK_ID)(handle_settings_submit)
    app.error(handle_errors)
    return app
