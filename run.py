"""Entry point for the Coffee Shop API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
come from the same environment variables as the rest of the settings
(``HOST``, ``PORT``, ``LOG_LEVEL``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from coffee_shop_api.app.core.config import settings
from coffee_shop_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
