import logging, json, sys, time, os

_FORMAT = json.dumps({
    "ts": "%(asctime)s",
    "level": "%(levelname)s",
    "name": "%(name)s",
    "msg": "%(message)s"
})


def get_logger(name="keystash", level=None, to_file=None):
    """
    JSON-line logger for keystash components.

    level falls back to KEYSTASH_LOG_LEVEL (default INFO) and to_file to
    KEYSTASH_LOG_FILE. Handlers are attached once per logger name.
    """
    level = level or os.getenv("KEYSTASH_LOG_LEVEL", "INFO").upper()
    to_file = to_file or os.getenv("KEYSTASH_LOG_FILE")

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        formatter = logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%SZ")
        formatter.converter = time.gmtime  # UTC timestamps

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
