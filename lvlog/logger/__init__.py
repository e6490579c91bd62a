""" This module defines the leveled logger and the process-wide active logger """
from .level import InvalidLevelError, Severity
from .exit import call_exit_handler, exit_handler, on_exit, reset_exit_handler, set_exit_handler
from .logger import Logger, format_message
from .registry import (
    debug,
    default_logger,
    error,
    fatal,
    get_logger,
    info,
    log,
    set_logger,
    unset_logger,
    use_logger,
    warn,
    warning,
)
