"""Entry point that serves the Project Tracker API with uvicorn.

Host, port, keep‑alive timeout and log level are read from the
environment through ``project_tracker_api.app.core.config`` (``HOST``,
``PORT``, ``KEEP_ALIVE_TIMEOUT``, ``LOG_LEVEL``).

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from project_tracker_api.app.core.config import settings
from project_tracker_api.app.main import app


def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        timeout_keep_alive=settings.keep_alive_timeout,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server starting on %s:%s", settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
