"""
StandardStreams - Process-lifetime owner of the stdout and stderr configs.

There is exactly one StandardStreams per process. It is created either
explicitly with init_streams() (typically right at program start) or
lazily from the default configuration on first use, and is never
replaced afterwards.
"""

import threading
from typing import Optional

from loguru import logger

from ..config import load_config
from ..logging import enable_logging
from ._sinks import StandardStreamSink, DEFAULT_CAPACITY
from ._writer_config import WriterConfig


class StandardStreams:
    """
    Holds one WriterConfig per standard stream.

    Each config pairs its own RLock with its own StandardStreamSink, so
    stdout and stderr never block each other and no ordering between them
    is implied.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        encoding: Optional[str] = None,
        errors: Optional[str] = None,
        stream_confs: Optional[dict] = None,
    ):
        """
        Args:
            capacity (int): Buffer size in bytes used for both streams. Default is 1024.
            encoding (Optional[str]): Encoding used for both streams. Defaults to the stream's own.
            errors (Optional[str]): Encoding error policy for both streams. Defaults to the stream's own.
            stream_confs (Optional[dict]): Per-stream overrides, e.g. {"stderr": {"capacity": 4096}}.
        """
        defaults = {"capacity": capacity, "encoding": encoding, "errors": errors}
        stream_confs = stream_confs or {}
        self.stdout = self._make_config("stdout", {**defaults, **stream_confs.get("stdout", {})})
        self.stderr = self._make_config("stderr", {**defaults, **stream_confs.get("stderr", {})})

    @staticmethod
    def _make_config(name: str, conf: dict) -> WriterConfig:
        sink = StandardStreamSink(
            name,
            capacity=conf["capacity"],
            encoding=conf["encoding"],
            errors=conf["errors"],
        )
        logger.debug(f"Created {sink!r}")
        return WriterConfig(lock=threading.RLock(), sink=sink)

    @classmethod
    def from_config(cls, conf: dict) -> "StandardStreams":
        """
        Build from a configuration dictionary as returned by load_config().

        Args:
            conf (dict): Configuration with a 'streams' section.

        Returns:
            StandardStreams: The new context.
        """
        streams = conf.get("streams", {})
        stream_confs = {
            name: {k: v for k, v in (streams.get(name) or {}).items() if k in ("capacity", "encoding", "errors")}
            for name in StandardStreamSink.STREAM_NAMES
        }
        return cls(stream_confs=stream_confs)


_streams: Optional[StandardStreams] = None
_streams_lock = threading.Lock()


def _create_streams(config: dict) -> StandardStreams:
    if (config.get("logging") or {}).get("enabled"):
        enable_logging(config)
    return StandardStreams.from_config(config)


def init_streams(config_path: Optional[str] = None, config: Optional[dict] = None) -> StandardStreams:
    """
    Create the process StandardStreams from a configuration.

    Call once at program start, before anything prints through the
    standard-stream entry points.

    Args:
        config_path (Optional[str]): Path to a YAML configuration file.
        config (Optional[dict]): Already loaded configuration; takes precedence over config_path.

    Returns:
        StandardStreams: The initialized context.

    Raises:
        RuntimeError: If the context already exists.
    """
    global _streams
    if config is None:
        config = load_config(config_path)
    with _streams_lock:
        if _streams is not None:
            raise RuntimeError("Standard streams are already initialized.")
        _streams = _create_streams(config)
        logger.info("Standard streams initialized from configuration.")
        return _streams


def get_streams() -> StandardStreams:
    """Get the process StandardStreams, creating it from the default configuration if needed."""
    global _streams
    if _streams is None:
        with _streams_lock:
            if _streams is None:
                _streams = _create_streams(load_config())
                logger.debug("Standard streams initialized with default configuration.")
    return _streams


def stdout_config() -> WriterConfig:
    return get_streams().stdout


def stderr_config() -> WriterConfig:
    return get_streams().stderr
