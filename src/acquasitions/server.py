"""Process entrypoint: serve the application with uvicorn.

Run with: python -m acquasitions
"""

import copy
import logging
import socket
from typing import Any

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from acquasitions.app import create_app
from acquasitions.config import Settings, load_settings

logger = logging.getLogger(__name__)

UVICORN_BANNER = "Uvicorn running on"


class StartupBannerFilter(logging.Filter):
    """Drop uvicorn's own "running on" record; ReadyServer logs readiness."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not record.getMessage().startswith(UVICORN_BANNER)


def uvicorn_log_config() -> dict[str, Any]:
    """uvicorn's default logging config with the startup banner filtered out."""
    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_config.setdefault("filters", {})["startup_banner"] = {"()": StartupBannerFilter}
    log_config["loggers"]["uvicorn.error"]["filters"] = ["startup_banner"]
    return log_config


class ReadyServer(uvicorn.Server):
    """uvicorn server that logs one readiness line once the socket is bound."""

    def __init__(self, config: uvicorn.Config, ready_url: str) -> None:
        super().__init__(config)
        self.ready_url = ready_url

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("listening on %s ..", self.ready_url)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_server(settings: Settings) -> ReadyServer:
    """Create the uvicorn server bound to the configured host and port."""
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=uvicorn_log_config(),
    )
    return ReadyServer(config, ready_url=settings.ready_url)


def serve(settings: Settings | None = None) -> None:
    """Bind to ``settings.port`` and serve until terminated."""
    settings = settings or load_settings()
    configure_logging(settings)
    build_server(settings).run()


def main() -> None:
    serve()
