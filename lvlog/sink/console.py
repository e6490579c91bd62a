""" This module defines a sink that writes to a console stream """
import sys
from typing import Optional, TextIO

from colorama import Style, initialise
from colorama.ansitowin32 import StreamWrapper

from lvlog.logger.level import Severity

from .sink import LockedSink

TAG_COLORS = {level.tag.encode(): level.color for level in Severity}


def colorize(data: bytes) -> bytes:
    """
    Wraps the leading severity tag of a log line in the severity's color. The tag itself is
    left intact between the color codes. Lines without a known tag are returned unchanged
    """
    for tag, color in TAG_COLORS.items():
        if data.startswith(tag):
            return color.encode() + tag + Style.RESET_ALL.encode() + data[len(tag) :]
    return data


class ConsoleSink(LockedSink):
    """
    ConsoleSink writes log lines to a text stream, standard error by default. Colors are
    enabled when the stream is a terminal unless explicitly set. Forcing colors on the default
    stream bypasses colorama's stderr wrapper, which strips them when stderr is not a terminal
    """

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None):
        super().__init__()
        if stream is None:
            stream = sys.stderr
            if color and isinstance(stream, StreamWrapper) and initialise.orig_stderr is not None:
                stream = initialise.orig_stderr
        self.stream = stream
        if color is None:
            isatty = getattr(self.stream, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color

    def _write(self, data: bytes) -> int:
        out = colorize(data) if self.color else data
        self.stream.write(out.decode("utf-8", errors="replace"))
        self.stream.flush()
        return len(data)

    def _close(self):
        # the standard streams belong to the process, so they are only flushed
        self.stream.flush()
