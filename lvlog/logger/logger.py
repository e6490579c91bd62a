""" This module defines the main logger """
from typing import Optional, Tuple, Union

from lvlog.sink.sink import Sink

from .exit import call_exit_handler
from .level import Severity


def format_message(msg, args) -> str:
    """
    Interpolates args into msg printf-style. msg may be any object (typically an exception),
    in which case its string form is used. Without args the message is returned verbatim. A
    format that does not match its arguments is reported inline instead of raising
    """
    message = str(msg)
    if not args:
        return message
    try:
        return message % args
    except (TypeError, ValueError, KeyError):
        return "{} (bad format args: {!r})".format(message, args)


def to_severity(level) -> Optional[Severity]:
    """ Returns the Severity for a Severity, its integer value or its name, or None if there is none """
    if isinstance(level, Severity):
        return level
    try:
        return Severity(level) if isinstance(level, int) else Severity.from_string(level)
    except ValueError:
        return None


class Logger:
    """
    Logger writes records at or above its threshold to each of its sinks. A Logger does not
    change after it is constructed: reconfiguring means creating a new one and installing it
    """

    __slots__ = ("_level", "_sinks")

    def __init__(self, level: Union[str, Severity], *sinks: Sink):
        self._level = level if isinstance(level, Severity) else Severity.from_string(level)
        self._sinks = tuple(sinks)

    def __repr__(self):
        return "Logger(level={}, sinks={})".format(self._level.name, len(self._sinks))

    @property
    def level(self) -> Severity:
        """ The minimum severity this logger emits """
        return self._level

    @property
    def sinks(self) -> Tuple[Sink, ...]:
        """ The sinks written to, in write order """
        return self._sinks

    def enabled_for(self, level: Severity) -> bool:
        """ Returns true if a record at the given severity would be written """
        return level >= self._level

    def log(self, level: Union[Severity, int, str], msg, *args):
        """
        Writes a line tagged with the given severity to every sink if the severity passes the
        threshold. A sink that fails does not stop the line from reaching the others. Fatal
        records invoke the exit handler once every sink has been written to. An unknown
        severity is logged as an error that names the bad value
        """
        severity = to_severity(level)
        suffix = ""
        if severity is None:
            severity, suffix = Severity.ERROR, " (bad severity: {!r})".format(level)
        if not self.enabled_for(severity):
            return

        line = "{} {}{}\n".format(severity.tag, format_message(msg, args), suffix).encode("utf-8")
        for sink in self._sinks:
            try:
                sink.write(line)
            except Exception:  # pylint: disable=broad-except
                # sink errors are never reported to the caller
                continue

        if severity == Severity.FATAL:
            call_exit_handler()

    def debug(self, msg, *args):
        """ Logs the given message with the debug level """
        self.log(Severity.DEBUG, msg, *args)

    def info(self, msg, *args):
        """ Logs the given message with the info level """
        self.log(Severity.INFO, msg, *args)

    def warn(self, msg, *args):
        """ Logs the given message with the warn level """
        self.log(Severity.WARN, msg, *args)

    warning = warn

    def error(self, msg, *args):
        """ Logs the given message or exception with the error level """
        self.log(Severity.ERROR, msg, *args)

    def fatal(self, msg, *args):
        """ Logs the given message or exception with the fatal level, then calls the exit handler """
        self.log(Severity.FATAL, msg, *args)

    def close(self):
        """
        Closes every sink. All sinks are attempted; the first failure is raised once the rest
        have been closed
        """
        first_error = None
        for sink in self._sinks:
            try:
                sink.close()
            except Exception as e:  # pylint: disable=broad-except
                first_error = first_error or e
        if first_error is not None:
            raise first_error
