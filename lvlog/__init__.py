"""
lvlog is a leveled logger that writes tagged lines to one or more byte sinks. Call sites use
the module-level functions, which forward to the process-wide active logger
"""
import colorama

from .__version__ import __version__
from .logger import (
    InvalidLevelError,
    Logger,
    Severity,
    debug,
    default_logger,
    error,
    exit_handler,
    fatal,
    get_logger,
    info,
    log,
    on_exit,
    reset_exit_handler,
    set_exit_handler,
    set_logger,
    unset_logger,
    use_logger,
    warn,
    warning,
)
from .sink import BufferSink, ConsoleSink, FileSink, LockedSink, Sink

colorama.init()
