"""
Run the Amigos API with uvicorn.

Usage:
    python -m amigos
"""

import uvicorn

from amigos.core.config import settings


def main() -> None:
    """Serve the application on the configured host and port."""
    uvicorn.run(
        "amigos.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
