"""Entry point for running the FastAPI application."""

import logging
import os

import uvicorn
from dotenv import load_dotenv

from .services.config import get_config

load_dotenv()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or get_config().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run_server(host: str = "127.0.0.1", port: int | None = None) -> None:
    """Serve the API with uvicorn."""
    configure_logging()
    # PORT=9000 python -m linkgraph.main
    port = port or int(os.getenv("PORT", "8000"))
    uvicorn.run(
        "linkgraph.api.main:app",
        host=host,
        port=port,
        log_level="info",
    )


if __name__ == "__main__":
    run_server()
