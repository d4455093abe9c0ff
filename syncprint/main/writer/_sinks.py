"""
Sinks - Buffered destinations that a WriterConfig guards with its lock.

A sink accepts formatted text through write(), keeps the encoded bytes in
an internal buffer of fixed capacity and hands them to the destination on
flush(). None of the sinks here are thread-safe on their own: they are
only ever touched while the lock of the owning WriterConfig is held.
"""

import codecs
import errno
import io
import sys
from typing import Optional

from ._errors import SinkFullError

DEFAULT_CAPACITY = 1024


def _check_capacity(capacity) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
    return capacity


def _check_codec(encoding, errors):
    if encoding is not None:
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding {encoding!r}") from None
    if errors is not None:
        try:
            codecs.lookup_error(errors)
        except LookupError:
            raise ValueError(f"Unknown encoding error policy {errors!r}") from None


def _is_text_stream(stream) -> bool:
    return isinstance(stream, io.TextIOBase) or hasattr(stream, "encoding")


class BufferedSink:
    """
    Fixed-capacity byte buffer in front of a text or binary stream.

    Text handed to write() is encoded immediately, so encoding errors surface
    while the caller still holds the lock and nothing has reached the stream.
    The buffer is drained to the stream whenever the next write would not fit,
    and on every flush().

    How bytes reach the stream depends on its kind:
    - binary streams (BytesIO, BufferedWriter, ...) receive the bytes as is
    - text streams with a ``buffer`` attribute (sys.stdout, TextIOWrapper) are
      flushed at the text layer first, then receive the bytes on ``buffer``
    - other text streams (StringIO, ...) receive the decoded text
    """

    def __init__(
        self,
        stream,
        capacity: int = DEFAULT_CAPACITY,
        encoding: Optional[str] = "utf-8",
        errors: Optional[str] = "strict",
    ):
        """
        Args:
            stream: Destination stream, text or binary.
            capacity (int): Size of the internal buffer in bytes. Default is 1024.
            encoding (Optional[str]): Encoding used for the text. Defaults to "utf-8".
            errors (Optional[str]): Encoding error policy. Defaults to "strict".

        Raises:
            ValueError: If capacity is not a positive integer, or encoding or
                errors name no registered codec or error handler.
        """
        self.capacity = _check_capacity(capacity)
        _check_codec(encoding, errors)
        self._stream = stream
        self._encoding = encoding
        self._errors = errors
        self._buffer = bytearray()

    @property
    def stream(self):
        return self._stream

    @property
    def encoding(self) -> str:
        return self._encoding or "utf-8"

    @property
    def errors(self) -> str:
        return self._errors or "strict"

    @property
    def pending(self) -> int:
        """Number of bytes held in the buffer and not yet delivered."""
        return len(self._buffer)

    def write(self, text: str) -> int:
        """
        Encode text into the buffer, draining first if it would overflow.

        Chunks larger than the whole buffer bypass it and go straight to the
        stream once the buffer has been drained.

        Returns:
            int: Number of bytes accepted.
        """
        data = text.encode(self.encoding, self.errors)
        if len(self._buffer) + len(data) > self.capacity:
            self._drain()
            if len(data) > self.capacity:
                self._deliver(data)
                return len(data)
        self._buffer += data
        return len(data)

    def flush(self) -> None:
        """Deliver all buffered bytes and flush the stream."""
        self._drain()
        self.stream.flush()

    def discard(self) -> None:
        """Drop buffered bytes without delivering them."""
        self._buffer.clear()

    def _drain(self) -> None:
        if not self._buffer:
            return
        data = bytes(self._buffer)
        # cleared before delivery: a failed delivery must not be re-sent later
        self._buffer.clear()
        self._deliver(data)

    def _deliver(self, data: bytes) -> None:
        stream = self.stream
        if not _is_text_stream(stream):
            stream.write(data)
            return
        raw = getattr(stream, "buffer", None)
        if raw is None:
            stream.write(data.decode(self.encoding, self.errors))
            return
        stream.flush()
        raw.write(data)

    def __repr__(self):
        return f"{type(self).__name__}(stream={self._stream!r}, capacity={self.capacity}, pending={self.pending})"


class StandardStreamSink(BufferedSink):
    """
    BufferedSink over ``sys.stdout`` or ``sys.stderr``.

    The stream is looked up on every access, so redirecting ``sys.stdout``
    (contextlib.redirect_stdout, pytest capture, ...) is honoured. Encoding
    and error policy default to the ones of the stream currently installed.
    """

    STREAM_NAMES = ("stdout", "stderr")

    def __init__(
        self,
        name: str,
        capacity: int = DEFAULT_CAPACITY,
        encoding: Optional[str] = None,
        errors: Optional[str] = None,
    ):
        if name not in self.STREAM_NAMES:
            raise ValueError(f"Unknown standard stream '{name}'. Expected one of {self.STREAM_NAMES}.")
        super().__init__(None, capacity=capacity, encoding=encoding, errors=errors)
        self.name = name

    @property
    def stream(self):
        stream = getattr(sys, self.name, None)
        if stream is None:
            raise OSError(errno.EBADF, f"sys.{self.name} is not available")
        return stream

    @property
    def encoding(self) -> str:
        return self._encoding or getattr(self.stream, "encoding", None) or "utf-8"

    @property
    def errors(self) -> str:
        return self._errors or getattr(self.stream, "errors", None) or "strict"

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, capacity={self.capacity}, pending={self.pending})"


class FixedBufferSink:
    """
    Bounded in-memory sink.

    Bytes land directly in a buffer of fixed capacity; there is no further
    destination, so flush() and discard() have nothing to do. A write that
    does not fit is rejected as a whole with SinkFullError and leaves the
    sink unchanged.
    """

    def __init__(self, capacity: int, encoding: str = "utf-8", errors: str = "strict"):
        self.capacity = _check_capacity(capacity)
        _check_codec(encoding, errors)
        self.encoding = encoding
        self.errors = errors
        self._data = bytearray()

    @property
    def end(self) -> int:
        """Offset of the end of the written data."""
        return len(self._data)

    def write(self, text: str) -> int:
        data = text.encode(self.encoding, self.errors)
        if self.end + len(data) > self.capacity:
            raise SinkFullError(
                f"Cannot write {len(data)} bytes: {self.capacity - self.end} of {self.capacity} bytes left",
                capacity=self.capacity,
                requested=len(data),
            )
        self._data += data
        return len(data)

    def flush(self) -> None:
        pass

    def discard(self) -> None:
        pass

    def getvalue(self) -> bytes:
        return bytes(self._data)

    def text(self) -> str:
        return self._data.decode(self.encoding, self.errors)

    def __repr__(self):
        return f"{type(self).__name__}(capacity={self.capacity}, end={self.end})"
