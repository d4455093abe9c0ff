"""
Shared pytest fixtures for the synchronized writer test suite.

Tests build fresh WriterConfigs over in-memory sinks; the process-wide
StandardStreams is reset around every test that touches it.
"""

import errno
import io
import threading

import pytest

from syncprint.main.writer import WriterConfig, BufferedSink, FixedBufferSink
from syncprint.main.writer import _streams as streams_module


# ========================================================================================
# IN-MEMORY SINK FIXTURES
# ========================================================================================

@pytest.fixture
def fixed_config():
    """
    WriterConfig over a 512-byte FixedBufferSink.

    Usage: def test_something(fixed_config):
           print(fixed_config, "x")
           assert fixed_config.sink.text() == "x"
    """
    return WriterConfig(lock=threading.RLock(), sink=FixedBufferSink(512))


@pytest.fixture
def bytes_stream():
    """Binary in-memory destination."""
    return io.BytesIO()


@pytest.fixture
def buffered_config(bytes_stream):
    """
    WriterConfig over a BufferedSink draining into a BytesIO.
    """
    return WriterConfig(lock=threading.RLock(), sink=BufferedSink(bytes_stream))


# ========================================================================================
# FAILURE INJECTION FIXTURES
# ========================================================================================

class FlakyStream(io.BytesIO):
    """BytesIO whose write/flush raise a broken pipe error while `failing` is set."""

    def __init__(self):
        super().__init__()
        self.failing = False
        self.fail_on = "flush"

    def write(self, data):
        if self.failing and self.fail_on == "write":
            raise OSError(errno.EPIPE, "Broken pipe")
        return super().write(data)

    def flush(self):
        if self.failing and self.fail_on == "flush":
            raise OSError(errno.EPIPE, "Broken pipe")
        return super().flush()


@pytest.fixture
def flaky_stream():
    return FlakyStream()


@pytest.fixture
def flaky_config(flaky_stream):
    """
    WriterConfig whose destination fails on demand.

    Set flaky_config.sink.stream.failing = True to make the next flush fail.
    """
    return WriterConfig(lock=threading.RLock(), sink=BufferedSink(flaky_stream))


# ========================================================================================
# PROCESS STANDARD STREAMS FIXTURES
# ========================================================================================

@pytest.fixture
def reset_streams(monkeypatch):
    """
    Run the test against a fresh, uninitialized StandardStreams singleton.
    """
    monkeypatch.setattr(streams_module, "_streams", None)
    yield streams_module
