import logging
import os

from config.config import LOG_DIR, LOG_LEVEL


def get_logger() -> logging.Logger:
    logger = logging.getLogger("zone_checker")
    logger.setLevel(LOG_LEVEL)

    # Avoid duplicate handlers on re-import (tests, uvicorn reloads)
    if not logger.handlers:
        sh = logging.StreamHandler()
        sh.setLevel(LOG_LEVEL)
        fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        sh.setFormatter(fmt)
        logger.addHandler(sh)

        # File handler (logs/app.log unless LOG_DIR says otherwise)
        os.makedirs(LOG_DIR, exist_ok=True)
        fh = logging.FileHandler(os.path.join(LOG_DIR, "app.log"))
        fh.setLevel(LOG_LEVEL)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger

logger = get_logger()
