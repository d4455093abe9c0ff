"""
Synchronized writer - thread-safe, buffered, formatted output.

This module provides the lock/sink binding and the print operations built
on top of it:
- WriterConfig: re-entrant lock bound to the sink it protects
- print / locked: synchronized formatted writes to any WriterConfig
- write_stdout / write_stderr: print to the standard streams, raising PrintError
- debug_stdout / debug_stderr: print to the standard streams, ignoring failures
- StandardStreams: process-lifetime owner of the stdout/stderr configs
"""

from ._errors import PrintError, TemplateError, SinkFullError
from ._sinks import BufferedSink, StandardStreamSink, FixedBufferSink, DEFAULT_CAPACITY
from ._writer_config import WriterConfig
from ._streams import StandardStreams, init_streams, get_streams, stdout_config, stderr_config
from ._printer import print, locked, write_stdout, write_stderr, debug_stdout, debug_stderr

__all__ = [
    "PrintError",
    "TemplateError",
    "SinkFullError",
    "BufferedSink",
    "StandardStreamSink",
    "FixedBufferSink",
    "DEFAULT_CAPACITY",
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
]
