"""
WriterConfig - Binding of a re-entrant lock to the sink it protects.
"""

import threading
from dataclasses import dataclass
from typing import Any, Optional

from ._sinks import BufferedSink, DEFAULT_CAPACITY


@dataclass(frozen=True)
class WriterConfig:
    """
    Pairs a lock with the sink it guards.

    The sink must never be written without holding the lock; going through
    print() (or the stdout/stderr entry points) is what guarantees that.
    The lock has to be re-entrant (threading.RLock) so that output produced
    while the same thread already holds it does not deadlock.

    Attributes:
        lock: Re-entrant lock, e.g. threading.RLock().
        sink: Buffered sink exposing write(), flush() and discard().
    """

    lock: Any
    sink: Any

    def __post_init__(self):
        if self.lock is None or not all(hasattr(self.lock, attr) for attr in ("__enter__", "__exit__")):
            raise TypeError(f"WriterConfig lock must be usable in a with statement, got {self.lock!r}")
        if self.sink is None or not all(hasattr(self.sink, attr) for attr in ("write", "flush")):
            raise TypeError(f"WriterConfig sink must provide write() and flush(), got {self.sink!r}")

    @classmethod
    def for_stream(
        cls,
        stream,
        capacity: int = DEFAULT_CAPACITY,
        encoding: Optional[str] = "utf-8",
        errors: Optional[str] = "strict",
    ) -> "WriterConfig":
        """
        Build a config with a fresh RLock and a BufferedSink over stream.

        Args:
            stream: Text or binary stream to write to.
            capacity (int): Buffer size in bytes. Default is 1024.
            encoding (Optional[str]): Text encoding. Defaults to "utf-8".
            errors (Optional[str]): Encoding error policy. Defaults to "strict".

        Returns:
            WriterConfig: The new configuration.
        """
        return cls(
            lock=threading.RLock(),
            sink=BufferedSink(stream, capacity=capacity, encoding=encoding, errors=errors),
        )
