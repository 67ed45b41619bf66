import logging
import sys

LOGGER_NAME = "leetpatch"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL_ENV = "LEETPATCH_LOG_LEVEL"


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """
    Attach a stderr handler to the `leetpatch` logger.

    Calling it again replaces the handler installed by the previous call.
    Propagation is disabled so records are not printed twice when the host
    application configures the root logger too.
    """

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if existing.get_name() == LOGGER_NAME:
            logger.removeHandler(existing)

    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(LOGGER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
