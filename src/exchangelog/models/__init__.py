"""Pydantic models for exchangelog."""

from exchangelog.models.body import (
    InputStreamCache,
    PendingBody,
    PlainBody,
    StreamBody,
    StreamCache,
    body_variant,
)
from exchangelog.models.exchange import EXCEPTION_CAUGHT, Exchange, Message
from exchangelog.models.output import FormatOptions
from exchangelog.models.records import ErrorRecord, ExchangeRecord, MessageRecord

__all__ = [
    "EXCEPTION_CAUGHT",
    "ErrorRecord",
    "Exchange",
    "ExchangeRecord",
    "FormatOptions",
    "InputStreamCache",
    "Message",
    "MessageRecord",
    "PendingBody",
    "PlainBody",
    "StreamBody",
    "StreamCache",
    "body_variant",
]
