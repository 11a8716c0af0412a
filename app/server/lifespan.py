from contextlib import asynccontextmanager
import sys
import threading
from typing import AsyncIterator, Optional, TYPE_CHECKING

from fastapi import FastAPI
from slack_bolt import App
from slack_bolt.adapter.socket_mode import SocketModeHandler
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_configuration_store, get_settings
from integrations.pagerduty import ConfigurationError
from packages.pagerduty.platforms import slack as pagerduty_slack

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _load_pagerduty_configuration(settings: "Settings", logger: BoundLogger) -> bool:
    """Load the PagerDuty configuration and report whether it is usable."""
    configuration = get_configuration_store().reload(settings)
    try:
        configuration.is_valid()
    except ConfigurationError as exc:
        logger.warning("pagerduty_configuration_invalid", error=str(exc))
        return False
    logger.info("pagerduty_configuration_valid")
    return True


def _start_socket_mode(
    bot: App, app_token: str, logger: BoundLogger
) -> tuple[SocketModeHandler, threading.Thread]:
    handler = SocketModeHandler(bot, app_token)
    thread = threading.Thread(
        target=handler.connect,
        daemon=True,
        name="slack-socket-mode",
    )
    thread.start()
    logger.info("socket_mode_started")
    return handler, thread


def _get_bot(settings: "Settings") -> Optional[App]:
    """Create Slack App instance if token available and not in test environment."""
    if _is_test_environment():
        return None

    slack_token = settings.slack.SLACK_TOKEN
    if not bool(slack_token):
        return None

    return App(token=slack_token)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = configure_logging(settings=settings)

    app.state.settings = settings
    logger.info("application_startup", git_sha=settings.GIT_SHA)

    app.state.pagerduty_configured = _load_pagerduty_configuration(settings, logger)

    bot = _get_bot(settings)
    app.state.bot = bot

    socket_mode_handler = None
    if bot is not None:
        pagerduty_slack.register(bot)
        logger.info("slack_commands_registered", prefix=settings.PREFIX)
        socket_mode_handler, socket_mode_thread = _start_socket_mode(
            bot,
            settings.slack.APP_TOKEN,
            logger,
        )
        app.state.socket_mode_thread = socket_mode_thread
    else:
        logger.info("api_only_mode", message="Slack not configured")

    app.state.socket_mode_handler = socket_mode_handler

    yield

    logger.info("application_shutdown")

    if app.state.socket_mode_handler is not None:
        app.state.socket_mode_handler.close()
        logger.info("socket_mode_stopped")
