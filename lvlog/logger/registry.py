"""
This module holds the process-wide active logger and the module-level logging functions
that forward to it. While no logger is installed the functions write to a default logger
configured from the environment
"""
import contextlib
import threading
from typing import Optional, Union

from lvlog.config import DEFAULT_LOG_LEVEL, get_config, new_logger

from .level import InvalidLevelError, Severity
from .logger import Logger

_lock = threading.Lock()
_active: Optional[Logger] = None
_default: Optional[Logger] = None


def build_default_logger() -> Logger:
    """
    Creates the logger used while none is installed. An invalid LOG_LEVEL or an unusable
    LOG_FILE is reported through the logger itself instead of raising
    """
    config = get_config()
    problems = []
    try:
        Severity.from_string(config.level)
    except InvalidLevelError as e:
        problems.append("{}, using {}".format(e, DEFAULT_LOG_LEVEL))
        config = config.with_mutations(level=DEFAULT_LOG_LEVEL)
    try:
        logger = new_logger(config)
    except OSError as e:
        problems.append("could not open log file {}: {}".format(config.log_file, e))
        logger = new_logger(config.with_mutations(log_file=None))
    for problem in problems:
        logger.warn(problem)
    return logger


def default_logger() -> Logger:
    """ Returns the default logger, creating it on first use """
    global _default  # pylint: disable=global-statement
    with _lock:
        if _default is None:
            _default = build_default_logger()
        return _default


def set_logger(logger: Logger) -> Optional[Logger]:
    """ Installs the given logger as the active one and returns the logger it replaced """
    global _active  # pylint: disable=global-statement
    if not isinstance(logger, Logger):
        raise TypeError("expected a Logger, got {}".format(type(logger).__name__))
    with _lock:
        previous, _active = _active, logger
    return previous


def unset_logger() -> Optional[Logger]:
    """ Uninstalls the active logger and returns it """
    global _active  # pylint: disable=global-statement
    with _lock:
        previous, _active = _active, None
    return previous


def get_logger() -> Logger:
    """ Returns the active logger, or the default logger if none is installed """
    with _lock:
        active = _active
    return active if active is not None else default_logger()


@contextlib.contextmanager
def use_logger(logger: Logger):
    """ Installs the given logger for the duration of the block, then restores whatever was active before """
    previous = set_logger(logger)
    try:
        yield logger
    finally:
        if previous is None:
            unset_logger()
        else:
            set_logger(previous)


def log(level: Union[Severity, int, str], msg, *args):
    """ Logs the given message with the given severity on the active logger """
    get_logger().log(level, msg, *args)


def debug(msg, *args):
    """ Logs the given message with the debug level on the active logger """
    get_logger().debug(msg, *args)


def info(msg, *args):
    """ Logs the given message with the info level on the active logger """
    get_logger().info(msg, *args)


def warn(msg, *args):
    """ Logs the given message with the warn level on the active logger """
    get_logger().warn(msg, *args)


warning = warn


def error(msg, *args):
    """ Logs the given message or exception with the error level on the active logger """
    get_logger().error(msg, *args)


def fatal(msg, *args):
    """ Logs the given message or exception with the fatal level, then calls the exit handler """
    get_logger().fatal(msg, *args)
