"""
Synchronized print operations.

print() formats, writes and flushes inside one critical section on the
config's lock, so the output of one call is never interleaved with the
output of another call on the same config. The stdout/stderr entry points
apply print() to the configs of the process StandardStreams; the debug_*
variants do the same but swallow PrintError.
"""

from contextlib import contextmanager
from typing import Iterator

from ._errors import PrintError, TemplateError
from ._streams import stdout_config, stderr_config
from ._writer_config import WriterConfig


def _render(template: str, args: tuple, kwargs: dict) -> str:
    if not isinstance(template, str):
        raise TemplateError(f"Template must be a str, got {type(template).__name__}")
    try:
        return template.format(*args, **kwargs)
    except Exception as e:
        # includes whatever an argument's own __format__ raises
        raise TemplateError(f"Cannot render template {template!r}: {e}") from e


def print(config: WriterConfig, template: str, *args, **kwargs) -> None:
    """
    Format a message into config's sink and flush it, holding config's lock.

    The template uses str.format syntax; literal braces are written as
    ``{{`` and ``}}``. The lock is released on every exit path.

    Args:
        config (WriterConfig): Lock and sink to write through.
        template (str): Format template.
        *args: Positional template arguments.
        **kwargs: Keyword template arguments.

    Raises:
        TemplateError: If template and arguments do not match, or an argument
            fails to format itself.
        PrintError: If the text cannot be encoded or delivered. Bytes of the
            failed call still in the buffer are dropped.
    """
    with config.lock:
        text = _render(template, args, kwargs)
        try:
            config.sink.write(text)
            config.sink.flush()
        except PrintError:
            _discard(config.sink)
            raise
        except (OSError, ValueError, LookupError) as e:
            _discard(config.sink)
            raise PrintError(f"Failed to write to {config.sink!r}: {e}") from e


def _discard(sink) -> None:
    discard = getattr(sink, "discard", None)
    if discard is not None:
        discard()


@contextmanager
def locked(config: WriterConfig) -> Iterator[WriterConfig]:
    """
    Hold config's lock for a block of print() calls.

    Output of all calls made inside the block by the holding thread is
    contiguous; other threads printing to the same config wait until the
    block exits.

    Usage::

        with locked(config):
            print(config, "header\\n")
            for row in rows:
                print(config, "  {}\\n", row)
    """
    with config.lock:
        yield config


def write_stdout(template: str, *args, **kwargs) -> None:
    """Print to stdout. Raises PrintError on failure."""
    print(stdout_config(), template, *args, **kwargs)


def write_stderr(template: str, *args, **kwargs) -> None:
    """Print to stderr. Raises PrintError on failure."""
    print(stderr_config(), template, *args, **kwargs)


def debug_stdout(template: str, *args, **kwargs) -> None:
    """Print to stdout, silently returning on failure."""
    try:
        write_stdout(template, *args, **kwargs)
    except PrintError:
        return


def debug_stderr(template: str, *args, **kwargs) -> None:
    """Print to stderr, silently returning on failure."""
    try:
        write_stderr(template, *args, **kwargs)
    except PrintError:
        return
