"""Entry point serving the BookWise API with uvicorn.

Host and port are read from the environment variables ``API_HOST``
and ``API_PORT`` (defaults ``127.0.0.1`` and ``8000``).  Everything
else is configured through the variables read by
``bookwise_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from bookwise_api.app.main import app


async def run_api() -> None:
    host = os.getenv("API_HOST", "127.0.0.1")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
