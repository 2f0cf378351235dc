import os
import sys
from typing import Optional

from loguru import logger


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """Consola a `level`; si hay `log_dir`, además un archivo diario en DEBUG."""
    logger.remove()
    logger.add(sys.stderr, level=level)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logger.add(
            os.path.join(log_dir, "coin_charts_{time:YYYY-MM-DD}.log"),
            rotation="1 day",
            retention="1 week",
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} - {message}",
            backtrace=True,
        )
