import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"


def setup_logger(name: str, level: str = "INFO") -> logging.Logger:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logger = logging.getLogger(name)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return logger
