"""Запуск: python -m savepoint"""
import logging

import uvicorn

from .config import get_config
from .main import app

logger = logging.getLogger(__name__)


def main() -> None:
    config = get_config()
    logger.info("Save Point API running on http://%s:%d", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
