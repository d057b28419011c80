import logging
import os
from logging.handlers import TimedRotatingFileHandler

LOG_DIR = os.path.join("data", "logs")
LOG_FILE_NAME = "sugar_token.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _file_handler(log_dir: str) -> TimedRotatingFileHandler:
    os.makedirs(log_dir, exist_ok=True)
    # one file per day, a week of history
    handler = TimedRotatingFileHandler(os.path.join(log_dir, LOG_FILE_NAME),
                                       when="midnight", interval=1, backupCount=7)
    handler.setLevel(logging.DEBUG)
    return handler


def get_logger(name: str = __name__, level: int = logging.INFO,
               log_dir: str | None = LOG_DIR) -> logging.Logger:
    """
    Return a sugar_token logger.
    - Console at ``level``; debug detail (dropped ticks, generation) goes to
      the rotating file under ``log_dir``.
    - ``log_dir=None`` keeps the logger console-only.
    - Handlers are attached once per name.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        handlers = [console_handler]
        if log_dir is not None:
            handlers.append(_file_handler(log_dir))

        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        logger.propagate = False

    return logger
