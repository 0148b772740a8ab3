"""Message body variants and the re-readable stream capability."""

import io
import logging
from concurrent.futures import Future
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

BUILTINS_PREFIX = "builtins."

logger = logging.getLogger(__name__)


@runtime_checkable
class StreamCache(Protocol):
    """A stream that can be read and then rewound for the next reader."""

    def read(self, size: int | None = -1, /) -> bytes: ...

    def reset(self) -> None: ...


class InputStreamCache(io.BytesIO):
    """In-memory stream cache backed by a bytes buffer."""

    def reset(self) -> None:
        """Rewind to the start of the cached content."""
        self.seek(0)


class PlainBody(BaseModel):
    """A body held as an ordinary value."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    value: Any = None


class StreamBody(BaseModel):
    """A body backed by a readable stream."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    stream: Any


class PendingBody(BaseModel):
    """A body that is still being computed."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    future: Future


Body = PlainBody | StreamBody | PendingBody


def is_stream(value: Any) -> bool:
    """Check if a value is a readable stream.

    Args:
        value: The body value to inspect

    Returns:
        True for stream caches, readable io objects and file-likes with read();
        False for anything that cannot be inspected
    """
    try:
        if isinstance(value, StreamCache):
            return True
        if isinstance(value, io.IOBase):
            return not value.closed and value.readable()
        return callable(getattr(value, "read", None))
    except Exception as e:
        logger.debug("Unable to inspect %s body: %s", type_name(type(value)), e)
        return False


def body_variant(value: Any) -> Body:
    """Classify a raw body value into its variant."""
    if isinstance(value, Future):
        return PendingBody(future=value)
    if is_stream(value):
        return StreamBody(stream=value)
    return PlainBody(value=value)


def to_stream_cache(value: Any) -> StreamCache | None:
    """Convert a stream body into a re-readable stream cache.

    An existing stream cache is returned as is. Any other stream is read to
    the end and its content buffered; text is encoded as UTF-8.

    Args:
        value: The body value to convert

    Returns:
        The stream cache, or None if the value is not a stream
    """
    if isinstance(value, StreamCache):
        return value
    if not is_stream(value):
        return None

    data = value.read()
    if isinstance(data, str):
        data = data.encode("utf-8")
    elif data is None:
        data = b""
    return InputStreamCache(bytes(data))


def type_name(cls: type) -> str:
    """Get the canonical dotted name of a type.

    Builtin types are reported without their module, e.g. ``int`` rather than
    ``builtins.int``.

    Args:
        cls: The type to name

    Returns:
        Canonical type name
    """
    module = getattr(cls, "__module__", None)
    qualname = getattr(cls, "__qualname__", None) or getattr(cls, "__name__", repr(cls))
    name = f"{module}.{qualname}" if module else qualname
    if name.startswith(BUILTINS_PREFIX):
        return name[len(BUILTINS_PREFIX) :]
    return name
