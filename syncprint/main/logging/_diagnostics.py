"""
Diagnostics - loguru output for syncprint's own events.

syncprint logs through loguru under the "syncprint" namespace, which is
disabled on import so that an application sees nothing unless it asks for
it. enable_logging() turns the namespace on and adds one handler built from
the 'logging' section of the configuration; disable_logging() undoes it.

The print path never logs: a failed write reported through another write
could fail the same way.

The handler writes to its sink on its own, without taking the lock of the
stderr WriterConfig. With the default "sys.stderr" sink, a diagnostics line
can therefore land between the bytes of a write_stderr() call that is
being drained at the same time. Point the sink at a file when stderr
output must stay contiguous.
"""

import sys
import threading
from typing import Optional

from loguru import logger

from ..config import load_config

NAMESPACE = "syncprint"

_handler_id: Optional[int] = None
_handler_lock = threading.Lock()


def _modify_handler_conf(logging_conf: dict, format_conf: dict) -> dict:
    """
    Turn the 'logging' section into keyword arguments for logger.add().

    - a format naming an entry of the 'formats' section is replaced by it
    - the sink strings "sys.stdout" and "sys.stderr" become the streams
    - the level is upper-cased
    - a filter restricting the handler to syncprint records is added
    """
    handler_conf = {k: v for k, v in logging_conf.items() if k != "enabled"}
    handler_conf.setdefault("sink", "sys.stderr")
    handler_conf.setdefault("level", "DEBUG")

    format_str = handler_conf.get("format")
    if format_str in format_conf:
        handler_conf["format"] = format_conf[format_str]
    elif format_str is None:
        handler_conf.pop("format", None)

    if handler_conf["sink"] == "sys.stdout":
        handler_conf["sink"] = sys.stdout
    elif handler_conf["sink"] == "sys.stderr":
        handler_conf["sink"] = sys.stderr

    handler_conf["level"] = handler_conf["level"].upper()
    handler_conf["filter"] = _namespace_filter
    return handler_conf


def _namespace_filter(record) -> bool:
    name = record["name"] or ""
    return name == NAMESPACE or name.startswith(NAMESPACE + ".")


def enable_logging(config: Optional[dict] = None) -> int:
    """
    Enable syncprint diagnostics and add a loguru handler for them.

    Calling it again replaces the previously added handler.

    Args:
        config (Optional[dict]): Configuration with 'logging' and 'formats' sections.
            Defaults to the packaged default configuration.

    Returns:
        int: Id of the loguru handler.
    """
    global _handler_id
    if config is None:
        config = load_config()
    handler_conf = _modify_handler_conf(config.get("logging") or {}, config.get("formats") or {})

    with _handler_lock:
        if _handler_id is not None:
            logger.remove(_handler_id)
        _handler_id = logger.add(**handler_conf)
        logger.enable(NAMESPACE)
        return _handler_id


def disable_logging() -> None:
    """Remove the diagnostics handler and disable the syncprint namespace. Safe to call repeatedly."""
    global _handler_id
    with _handler_lock:
        if _handler_id is not None:
            logger.remove(_handler_id)
            _handler_id = None
        logger.disable(NAMESPACE)
