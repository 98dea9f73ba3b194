import logging

LOG_FORMAT = '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'


def get_logger(name="catalog_api"):
    logger = logging.getLogger(name)
    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


logger = get_logger()
