import logging
import sys

LOGGER_NAME = "bigint_toolkit"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Global verbose flag that can be set by the command-line front end
verbose_mode = False


def set_verbose_mode(verbose):
    """Set the global verbose mode flag."""
    global verbose_mode
    verbose_mode = bool(verbose)


def setup_logger():
    """
    Configure and return the package logger.

    Library modules log through ``logging.getLogger(__name__)`` and never
    touch handlers; only the command-line front end calls this.

    Returns:
        The configured ``bigint_toolkit`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)

    # change the log level no matter if it has been set up or not based on verbosity
    level = logging.DEBUG if verbose_mode else logging.INFO
    logger.setLevel(level)

    handler = _find_console_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(LOGGER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(level)

    return logger


def _find_console_handler(logger):
    for handler in logger.handlers:
        if handler.get_name() == LOGGER_NAME:
            return handler
    return None


def get_logger():
    """
    Get the package logger configured with the global verbose setting.

    Returns:
        A configured logger instance
    """
    return setup_logger()
