"""
Main entry point for BlogWare.
Serves the app built by src.server.create_app with uvicorn.
"""

import uvicorn
from loguru import logger

from src.config import CONTENT_DIR, DEV, HOST, PORT


def main() -> None:
    logger.info(f"Serving posts from {CONTENT_DIR} on {HOST}:{PORT} (dev={DEV})")
    try:
        uvicorn.run(
            "src.server:create_app",
            factory=True,
            host=HOST,
            port=PORT,
            reload=DEV,
        )
    except KeyboardInterrupt:
        logger.info("Server stopped by user.")


if __name__ == "__main__":
    main()
