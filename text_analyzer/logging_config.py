import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

LOG_FILE_NAME = "text_analyzer.log"


def setup_logging(log_dir: Union[str, Path] = "logs", level: str = "INFO"):
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Avoid duplicate handlers
    if not logger.handlers:
        # File handler (rotating)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME, maxBytes=5_000_000, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

    return logger
