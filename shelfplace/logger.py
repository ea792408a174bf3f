import logging
import os
from logging.handlers import TimedRotatingFileHandler

from shelfplace.config import settings

logger = logging.getLogger("shelfplace")
logger.setLevel(settings.log_level)

formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(formatter)
logger.addHandler(stream_handler)

if settings.log_dir:
    os.makedirs(settings.log_dir, exist_ok=True)
    file_handler = TimedRotatingFileHandler(
        filename=os.path.join(settings.log_dir, "shelfplace.log"),
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
