import os

import uvicorn

from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    setup_logging(log_level=os.getenv("LOG_LEVEL", "INFO"), log_file=os.getenv("LOG_FILE"))
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 8000))
    logger.info(f"Starting Musical Lotto server on {host}:{port}")
    uvicorn.run("lotto_backend.app:app", host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
