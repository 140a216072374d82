import logging

PACKAGE_LOGGER = "banglaphonetic"


def get_logger(name=PACKAGE_LOGGER):
    # the handler lives on the package logger, module loggers inherit it
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        package_logger.setLevel(logging.WARNING)
        ch = logging.StreamHandler()
        fmt = logging.Formatter('[%(asctime)s] %(levelname)s %(name)s: %(message)s')
        ch.setFormatter(fmt)
        package_logger.addHandler(ch)
    return logging.getLogger(name)


def configure_logging(level):
    """Sets the level of every banglaphonetic logger"""
    get_logger().setLevel(level)
