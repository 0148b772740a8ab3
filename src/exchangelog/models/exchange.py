"""Pydantic models for message exchanges."""

import logging
import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from exchangelog.models.body import StreamCache, is_stream, to_stream_cache, type_name

logger = logging.getLogger(__name__)

# Property under which an error handler stores the exception it caught
EXCEPTION_CAUGHT = "ExchangeExceptionCaught"


class Message(BaseModel):
    """A message within an exchange: headers plus a body."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    headers: dict[str, Any] = Field(default_factory=dict)
    body: Any = None
    body_type: str | None = None  # Declared type name, overrides the body's own

    def cache_stream(self) -> StreamCache | None:
        """Replace a stream body with its re-readable cached form.

        The original stream's type name is kept as the body type descriptor
        so the reported type does not change once the stream is cached.

        Returns:
            The stream cache now held as the body, or None if the body is
            not a stream
        """
        if not is_stream(self.body):
            return None

        cache = to_stream_cache(self.body)
        if cache is not self.body:
            if self.body_type is None:
                self.body_type = type_name(type(self.body))
            logger.debug("Cached %s body as %s", self.body_type, type(cache).__name__)
            self.body = cache
        return cache


class Exchange(BaseModel):
    """One message-processing event."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    exchange_id: str = Field(default_factory=lambda: f"ID-{uuid.uuid4()}")
    properties: dict[str, Any] = Field(default_factory=dict)
    message: Message = Field(default_factory=Message)
    out: Message | None = None
    exception: BaseException | None = None

    def has_out(self) -> bool:
        """Check if the exchange carries an out message."""
        return self.out is not None

    def get_property(self, name: str, default: Any = None) -> Any:
        """Get an exchange property by name."""
        return self.properties.get(name, default)

    @property
    def caught_exception(self) -> BaseException | None:
        """The exception stored by an error handler, if any."""
        value = self.get_property(EXCEPTION_CAUGHT)
        return value if isinstance(value, BaseException) else None
