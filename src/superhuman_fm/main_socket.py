"""
Socket Mode entry point for Superhuman FM.
Connects to Slack via WebSocket - no public URL needed.
"""
import logging
from slack_bolt import App
from slack_bolt.adapter.socket_mode import SocketModeHandler
from .config import get_settings
from .log import setup_logging
from .handlers import register_handlers
from .rendering.notification import use_system_locale
from .store import get_preference_store

setup_logging()
logger = logging.getLogger("socket_listener")
settings = get_settings()

def create_app() -> App:
    app = App(
        token=settings.SLACK_BOT_TOKEN,
        # Socket Mode doesn't need signing secret for request verification
    )
    return register_handlers(app)

def main():
    """Start the Socket Mode handler."""
    logger.info("Starting Socket Mode listener...")
    logger.info(f"Preference backend: {settings.PREFERENCE_BACKEND}")
    use_system_locale()

    # Initialize the store up front so a bad backend setting fails at startup
    get_preference_store()

    handler = SocketModeHandler(create_app(), settings.SLACK_APP_TOKEN)
    logger.info("⚡️ Superhuman FM is running!")
    handler.start()

if __name__ == "__main__":
    main()
