"""Body type conversion helpers."""

from decimal import Decimal
from fractions import Fraction
from functools import singledispatch
from typing import Any

from exchangelog.models.body import InputStreamCache, StreamCache, type_name

__all__ = ["convert_to_str", "type_name"]


@singledispatch
def convert_to_str(value: Any) -> str | None:
    """Coerce a body value to a string.

    Returns None when there is no conversion for the value's type, in which
    case callers fall back to the value's default textual representation.
    """
    if isinstance(value, StreamCache):
        return _read_stream_cache(value)
    return None


@convert_to_str.register
def _(value: str) -> str:
    return value


@convert_to_str.register(bytes)
@convert_to_str.register(bytearray)
@convert_to_str.register(memoryview)
def _(value: bytes | bytearray | memoryview) -> str:
    return bytes(value).decode("utf-8", errors="replace")


@convert_to_str.register(int)
@convert_to_str.register(float)
@convert_to_str.register(complex)
@convert_to_str.register(Decimal)
@convert_to_str.register(Fraction)
def _(value: int | float | complex | Decimal | Fraction) -> str:
    return str(value)


@convert_to_str.register
def _(value: InputStreamCache) -> str:
    return _read_stream_cache(value)


def _read_stream_cache(cache: StreamCache) -> str:
    """Read the remaining content of a stream cache as text."""
    data = cache.read()
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8", errors="replace")
