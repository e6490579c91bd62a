""" This module defines sinks backed by a file or an in-memory buffer """
import io

from .sink import LockedSink


class FileSink(LockedSink):
    """
    FileSink appends log lines to the file at the given path. The file is opened when the sink
    is created and flushed after every write
    """

    def __init__(self, path: str, mode: str = "ab"):
        super().__init__()
        if "b" not in mode:
            raise ValueError("FileSink requires a binary file mode, got {!r}".format(mode))
        self.path = path
        self.file = open(path, mode)  # pylint: disable=consider-using-with

    def _write(self, data: bytes) -> int:
        written = self.file.write(data)
        self.file.flush()
        return written

    def _close(self):
        self.file.close()


class BufferSink(LockedSink):
    """ BufferSink collects everything written to it in memory """

    def __init__(self):
        super().__init__()
        self.buffer = io.BytesIO()

    def _write(self, data: bytes) -> int:
        return self.buffer.write(data)

    def getvalue(self) -> bytes:
        """ Returns every byte written so far """
        with self.lock:
            return self.buffer.getvalue()

    def text(self) -> str:
        """ Returns the contents decoded as UTF-8 """
        return self.getvalue().decode("utf-8")

    def reset(self):
        """ Discards the contents """
        with self.lock:
            self.buffer = io.BytesIO()
