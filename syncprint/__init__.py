"""
syncprint - Thread-safe, buffered, formatted output for command-line applications.

This package provides synchronized printing to stdout, stderr and custom
sinks: every call formats, writes and flushes under the sink's lock, so
concurrent output never interleaves within a call.
"""

from loguru import logger

from .main import (
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
    load_config,
    enable_logging,
    disable_logging,
)

logger.disable("syncprint")

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
