""" Sinks are the byte destinations a logger fans its lines out to """
from .sink import LockedSink, Sink
from .console import ConsoleSink
from .file import BufferSink, FileSink
