"""Pydantic models for exchange records stored as JSON."""

import builtins
import io
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from exchangelog.models.exchange import EXCEPTION_CAUGHT, Exchange, Message


class ErrorRecord(BaseModel):
    """An exception captured as type name and message."""

    type: str
    message: str = ""

    def to_exception(self) -> BaseException:
        """Rebuild the exception.

        Builtin exception names resolve to the builtin class. Any other name
        gets an Exception subclass created with that module and name, so the
        exception reports the recorded type.

        Returns:
            Exception instance carrying the recorded message
        """
        module, _, name = self.type.rpartition(".")
        cls: Any = None
        if module in ("", "builtins"):
            cls = getattr(builtins, name, None)
        if not (isinstance(cls, type) and issubclass(cls, BaseException)):
            cls = type(name, (Exception,), {"__module__": module or "builtins"})
        return cls(self.message) if self.message else cls()


class MessageRecord(BaseModel):
    """A recorded message."""

    headers: dict[str, Any] = {}
    body: Any = None
    body_type: str | None = None
    stream: bool = False  # Expose the body as a raw byte stream

    def to_message(self) -> Message:
        """Build the message, wrapping the body in a stream if requested."""
        body = self.body
        if self.stream:
            text = body if isinstance(body, str) else ("" if body is None else str(body))
            body = io.BytesIO(text.encode("utf-8"))
        return Message(headers=dict(self.headers), body=body, body_type=self.body_type)


class ExchangeRecord(BaseModel):
    """A recorded exchange as found in a records file."""

    model_config = ConfigDict(populate_by_name=True)

    exchange_id: str | None = None
    properties: dict[str, Any] = {}
    in_: MessageRecord = Field(default_factory=MessageRecord, alias="in")
    out: MessageRecord | None = None
    exception: ErrorRecord | None = None
    caught_exception: ErrorRecord | None = None

    def to_exchange(self) -> Exchange:
        """Build the exchange described by this record."""
        properties = dict(self.properties)
        if self.caught_exception is not None:
            properties[EXCEPTION_CAUGHT] = self.caught_exception.to_exception()

        fields: dict[str, Any] = {
            "properties": properties,
            "message": self.in_.to_message(),
            "out": self.out.to_message() if self.out is not None else None,
            "exception": self.exception.to_exception() if self.exception else None,
        }
        if self.exchange_id is not None:
            fields["exchange_id"] = self.exchange_id
        return Exchange(**fields)
