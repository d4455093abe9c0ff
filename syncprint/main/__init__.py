"""
syncprint - Thread-safe, buffered, formatted output for command-line applications.

A WriterConfig binds a re-entrant lock to a buffered sink; print() formats,
writes and flushes through it as one critical section. Ready-made configs
for stdout and stderr back the write_* and debug_* entry points.
"""

from .writer import (
    PrintError,
    TemplateError,
    SinkFullError,
    BufferedSink,
    StandardStreamSink,
    FixedBufferSink,
    WriterConfig,
    StandardStreams,
    init_streams,
    get_streams,
    stdout_config,
    stderr_config,
    print,
    locked,
    write_stdout,
    write_stderr,
    debug_stdout,
    debug_stderr,
)
from .config import load_config
from .logging import enable_logging, disable_logging

__all__ = [
    "PrintError",
    "TemplateError",
    "SinkFullError",
    "BufferedSink",
    "StandardStreamSink",
    "FixedBufferSink",
    "WriterConfig",
    "StandardStreams",
    "init_streams",
    "get_streams",
    "stdout_config",
    "stderr_config",
    "print",
    "locked",
    "write_stdout",
    "write_stderr",
    "debug_stdout",
    "debug_stderr",
    "load_config",
    "enable_logging",
    "disable_logging",
]
