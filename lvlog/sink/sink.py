""" This module defines the sink interface that loggers write to """
import threading
from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """
    Sink is any destination that accepts raw bytes. write returns the number of bytes written
    and raises on failure; close releases the underlying resource
    """

    def write(self, data: bytes) -> int:
        ...

    def close(self) -> None:
        ...


class LockedSink:
    """
    LockedSink serializes writes and closes to an underlying destination that is not safe to
    use from several threads at once. Subclasses implement _write and _close
    """

    def __init__(self):
        self.lock = threading.Lock()
        self.closed = False

    def write(self, data: bytes) -> int:
        """ Writes the data while holding the sink's lock """
        with self.lock:
            if self.closed:
                raise ValueError("write to closed sink")
            return self._write(data)

    def close(self):
        """ Closes the sink. Closing more than once has no effect """
        with self.lock:
            if self.closed:
                return
            self.closed = True
            self._close()

    def _write(self, data: bytes) -> int:
        raise NotImplementedError

    def _close(self):
        pass
