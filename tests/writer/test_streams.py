"""
Test suite for StandardStreams and the standard-stream entry points.

The process singleton is reset by the reset_streams fixture, so these
tests never depend on whichever test touched the real streams first.
"""

import io
import sys
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

import syncprint
from syncprint import PrintError, StandardStreams, StandardStreamSink
from syncprint.main.config import load_config

pytestmark = pytest.mark.integration


class TestStandardStreams:
    """StandardStreams owns one config per stream."""

    def test_default_configs(self):
        streams = StandardStreams()

        assert isinstance(streams.stdout.sink, StandardStreamSink)
        assert streams.stdout.sink.name == "stdout"
        assert streams.stderr.sink.name == "stderr"
        assert streams.stdout.sink.capacity == 1024
        assert streams.stderr.sink.capacity == 1024

    def test_streams_do_not_share_lock_or_sink(self):
        streams = StandardStreams()

        assert streams.stdout.lock is not streams.stderr.lock
        assert streams.stdout.sink is not streams.stderr.sink

    def test_from_config_applies_per_stream_settings(self):
        config = load_config()
        config["streams"]["stderr"]["capacity"] = 4096
        config["streams"]["stdout"]["errors"] = "replace"

        streams = StandardStreams.from_config(config)

        assert streams.stderr.sink.capacity == 4096
        assert streams.stdout.sink.capacity == 1024
        assert streams.stdout.sink.errors == "replace"


class TestStreamsSingleton:
    """init_streams / get_streams manage exactly one context per process."""

    def test_get_streams_creates_once(self, reset_streams):
        first = syncprint.get_streams()
        second = syncprint.get_streams()

        assert first is second
        assert syncprint.stdout_config() is first.stdout
        assert syncprint.stderr_config() is first.stderr

    def test_concurrent_first_access_creates_one_context(self, reset_streams):
        barrier = threading.Barrier(8)

        def access(_):
            barrier.wait(5)
            return syncprint.get_streams()

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(access, range(8)))

        assert all(result is results[0] for result in results)

    def test_init_streams_from_dict(self, reset_streams):
        config = load_config()
        config["streams"]["stdout"]["capacity"] = 2048

        streams = syncprint.init_streams(config=config)

        assert syncprint.get_streams() is streams
        assert streams.stdout.sink.capacity == 2048

    def test_init_streams_from_file(self, reset_streams, tmp_path):
        config_file = tmp_path / "syncprint.yaml"
        config_file.write_text("streams:\n  stderr:\n    capacity: 256\n")

        streams = syncprint.init_streams(config_path=str(config_file))

        assert streams.stderr.sink.capacity == 256
        assert streams.stdout.sink.capacity == 1024

    def test_init_streams_rejects_unknown_encoding(self, reset_streams, tmp_path):
        config_file = tmp_path / "syncprint.yaml"
        config_file.write_text("streams:\n  stdout:\n    encoding: no-such-codec\n")

        with pytest.raises(ValueError, match="no-such-codec"):
            syncprint.init_streams(config_path=str(config_file))

        assert reset_streams._streams is None

    def test_init_streams_twice_raises_error(self, reset_streams):
        syncprint.init_streams()

        with pytest.raises(RuntimeError, match="already initialized"):
            syncprint.init_streams()

    def test_init_after_lazy_creation_raises_error(self, reset_streams):
        syncprint.get_streams()

        with pytest.raises(RuntimeError):
            syncprint.init_streams()


class TestStandardStreamEntryPoints:
    """write_* and debug_* go through the process configs."""

    def test_write_stdout(self, reset_streams, capsys):
        syncprint.write_stdout("Hello {}! Number: {}\n", "world", 42)

        captured = capsys.readouterr()
        assert captured.out == "Hello world! Number: 42\n"
        assert captured.err == ""

    def test_write_stderr(self, reset_streams, capsys):
        syncprint.write_stderr("warning: {}\n", "disk almost full")

        captured = capsys.readouterr()
        assert captured.err == "warning: disk almost full\n"
        assert captured.out == ""

    def test_builtin_print_and_write_stdout_keep_order(self, reset_streams, capsys):
        print("first", end=";")
        syncprint.write_stdout("second;")
        print("third")

        assert capsys.readouterr().out == "first;second;third\n"

    def test_debug_variants_write_normally(self, reset_streams, capsys):
        syncprint.debug_stdout("out {}\n", 1)
        syncprint.debug_stderr("err {}\n", 2)

        captured = capsys.readouterr()
        assert captured.out == "out 1\n"
        assert captured.err == "err 2\n"

    def test_write_stdout_to_closed_stream_raises(self, reset_streams, monkeypatch):
        closed = io.StringIO()
        closed.close()
        monkeypatch.setattr(sys, "stdout", closed)

        with pytest.raises(PrintError):
            syncprint.write_stdout("nobody listens\n")

    def test_debug_stdout_to_closed_stream_is_silent(self, reset_streams, monkeypatch):
        closed = io.StringIO()
        closed.close()
        monkeypatch.setattr(sys, "stdout", closed)

        assert syncprint.debug_stdout("nobody listens\n") is None

    def test_debug_stderr_without_stream_is_silent(self, reset_streams, monkeypatch):
        monkeypatch.setattr(sys, "stderr", None)

        assert syncprint.debug_stderr("nobody listens\n") is None
