"""Entrypoint for serving the news reader API."""

from __future__ import annotations

import logging

import uvicorn

from .client import NewsClient
from .config import load_config
from .server import create_app


def main() -> None:
    config = load_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # Request URLs carry the API key; keep httpx's per-request logging quiet.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    client = NewsClient.from_config(config)
    app = create_app(client, default_language=config.default_language)

    logging.info("Using news endpoint %s", config.base_url)
    logging.info("Starting API server on %s:%s", config.api_host, config.api_port)
    uvicorn.run(app, host=config.api_host, port=config.api_port)


if __name__ == "__main__":  # pragma: no cover
    main()
