from __future__ import annotations

import logging

import uvicorn

from .env import get_settings


def main() -> None:
    """Main entry point for the stream API."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"Starting {settings.app_name} v{settings.app_version}")
    print(f"Safe: {settings.safe_address} on {settings.safe_network}")
    print(f"API will be available at: http://{settings.api_host}:{settings.api_port}")
    print(f"API Documentation: http://{settings.api_host}:{settings.api_port}/docs")

    uvicorn.run(
        "safestream.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
