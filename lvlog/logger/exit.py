"""
This module holds the termination hook that runs after a fatal record has been written. The
hook terminates the process by default and can be swapped out so the fatal path can be
observed in tests
"""
import contextlib
import os
import sys
import threading
from typing import Callable

ExitHandler = Callable[[], None]


def terminate():
    """
    The default exit handler. From the main thread this raises SystemExit(1); from any other
    thread it flushes the standard streams and ends the process immediately, since SystemExit
    would only end the calling thread
    """
    if threading.current_thread() is threading.main_thread():
        sys.exit(1)
    try:
        for stream in (sys.stdout, sys.stderr):
            if stream is None:
                continue
            try:
                stream.flush()
            except (OSError, ValueError):
                # closed or broken streams must not keep the process alive
                continue
    finally:
        os._exit(1)  # pylint: disable=protected-access


_lock = threading.Lock()
_handler: ExitHandler = terminate


def exit_handler() -> ExitHandler:
    """ Returns the currently installed exit handler """
    with _lock:
        return _handler


def set_exit_handler(handler: ExitHandler) -> ExitHandler:
    """ Installs the given exit handler and returns the one it replaced """
    global _handler  # pylint: disable=global-statement
    if not callable(handler):
        raise TypeError("exit handler must be callable")
    with _lock:
        previous, _handler = _handler, handler
    return previous


def reset_exit_handler() -> ExitHandler:
    """ Restores the default exit handler and returns the one it replaced """
    return set_exit_handler(terminate)


@contextlib.contextmanager
def on_exit(handler: ExitHandler):
    """ Installs the given exit handler for the duration of the block, then restores the previous one """
    previous = set_exit_handler(handler)
    try:
        yield handler
    finally:
        set_exit_handler(previous)


def call_exit_handler():
    """ Invokes the current exit handler. The handler is not assumed to be non-returning """
    exit_handler()()
