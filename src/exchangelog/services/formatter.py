"""Formatter service for exchange log output."""

import logging
import traceback
from concurrent.futures import CancelledError, Future
from typing import Any, Protocol

from exchangelog.models.body import (
    BUILTINS_PREFIX,
    PendingBody,
    PlainBody,
    StreamBody,
    body_variant,
)
from exchangelog.models.exchange import Exchange, Message
from exchangelog.models.output import FormatOptions
from exchangelog.services.converter import convert_to_str, type_name

logger = logging.getLogger(__name__)

NULL = "null"
ELLIPSIS = "..."


class ExchangeFormatter(Protocol):
    """Anything that renders an exchange as a log string."""

    def format(self, exchange: Exchange) -> str: ...


class FormatterService:
    """Service for formatting exchanges as single diagnostic strings.

    The options are fixed for the lifetime of the service, so one instance can
    be shared between threads.
    """

    def __init__(self, options: FormatOptions | None = None):
        self.options = options if options is not None else FormatOptions()

    def format(self, exchange: Exchange) -> str:
        """Format an exchange.

        Args:
            exchange: The exchange to format

        Returns:
            String of the form ``Exchange[...]``
        """
        opts = self.options
        segments: list[str] = []

        if opts.show_all or opts.show_exchange_id:
            self._append(segments, "Id", exchange.exchange_id)
        if opts.show_all or opts.show_properties:
            self._append(segments, "Properties", exchange.properties)

        self._append_message(segments, exchange.message, prefix="")
        self._append_exception(segments, exchange)

        if opts.show_all or opts.show_out:
            if exchange.has_out():
                self._append_message(segments, exchange.out, prefix="Out")
            else:
                self._append(segments, "Out", None, separator=" ")

        text = "".join(segments)
        if opts.max_chars > 0:
            text = self._truncate_lines(text)
        return self._wrap(text)

    def _append(
        self,
        segments: list[str],
        label: str,
        value: Any,
        separator: str = "",
        newline: bool = True,
    ) -> None:
        """Append a ``, Label:value`` segment.

        Args:
            segments: Buffer to append to
            label: Segment label
            value: Value to render
            separator: Text between the colon and the value
            newline: Whether multiline mode starts this segment on a new line
        """
        if newline and self.options.multiline:
            segments.append("\n")
        segments.append(f", {label}:{separator}{self._safe_str(value)}")

    def _append_message(self, segments: list[str], message: Message, prefix: str) -> None:
        """Append the headers, body type and body of a message."""
        opts = self.options
        if opts.show_all or opts.show_headers:
            self._append(segments, f"{prefix}Headers", message.headers)
        if opts.show_all or opts.show_body_type:
            self._append(segments, f"{prefix}BodyType", self._get_body_type_as_string(message))
        if opts.show_all or opts.show_body:
            self._append(segments, f"{prefix}Body", self._get_body_as_string(message))

    def _append_exception(self, segments: list[str], exchange: Exchange) -> None:
        """Append the exception type, message and optionally stack trace."""
        opts = self.options
        show_caught = opts.show_all or opts.show_caught_exception
        if not (opts.show_all or opts.show_exception or show_caught):
            return

        exception = exchange.exception
        label = "Exception"
        if exception is None and show_caught:
            exception = exchange.caught_exception
            label = "CaughtException"
        if exception is None:
            return

        self._append(segments, f"{label}Type", type_name(type(exception)))
        self._append(segments, f"{label}Message", exception, newline=False)
        if opts.show_all or opts.show_stack_trace:
            self._append(segments, "StackTrace", self._format_stack_trace(exception), newline=False)

    def _get_body_as_string(self, message: Message) -> Any:
        """Extract the body of a message for display.

        Pending bodies are only waited on when show_future is enabled. Stream
        bodies are cached on the message and rewound after reading so later
        readers see the full content.

        Args:
            message: The message whose body to render

        Returns:
            Body string, or the raw body if it has no string conversion
        """
        match body_variant(message.body):
            case PendingBody(future=future) if not self.options.show_future:
                return future
            case PendingBody(future=future):
                return self._wait_for(future)
            case StreamBody(stream=stream):
                try:
                    return self._read_stream(message)
                except Exception as e:
                    logger.debug("Unable to read stream body: %s", e)
                    return stream
            case PlainBody(value=value):
                answer = self._convert(value)
                return answer if answer is not None else value

    def _read_stream(self, message: Message) -> Any:
        """Read a stream body through its cache, rewinding it afterwards."""
        cache = message.cache_stream()
        try:
            answer = convert_to_str(cache)
        finally:
            cache.reset()
        return answer if answer is not None else cache

    def _wait_for(self, future: Future) -> Any:
        """Block until a pending body completes and convert its result.

        Args:
            future: The pending body

        Returns:
            The converted result, or the future itself if it did not succeed
        """
        logger.debug("Waiting for pending body %r", future)
        try:
            result = future.result()
        except (CancelledError, Exception) as e:
            logger.debug("Pending body did not complete: %s", e)
            return future
        answer = self._convert(result)
        return answer if answer is not None else result

    def _convert(self, value: Any) -> str | None:
        """Coerce a value to a string, or None if that is not possible."""
        try:
            return convert_to_str(value)
        except Exception as e:
            logger.debug("Unable to convert %s: %s", type_name(type(value)), e)
            return None

    def _get_body_type_as_string(self, message: Message) -> str | None:
        """Get the type name of a message body, without the builtins prefix."""
        if message.body_type is not None:
            name = message.body_type
        elif message.body is None:
            return None
        else:
            name = type_name(type(message.body))
        return name.removeprefix(BUILTINS_PREFIX)

    def _format_stack_trace(self, exception: BaseException) -> str:
        """Render the full traceback of an exception."""
        try:
            return "".join(traceback.format_exception(exception))
        except Exception as e:
            logger.debug("Unable to render stack trace: %s", e)
            return ""

    def _safe_str(self, value: Any) -> str:
        """Render a value, never raising.

        Args:
            value: Value to render

        Returns:
            ``str(value)``, ``null`` for None, or a placeholder if str() fails
        """
        if value is None:
            return NULL
        try:
            return str(value)
        except Exception as e:
            name = type_name(type(value))
            logger.debug("Unable to render %s: %s", name, e)
            return f"<unprintable {name}>"

    def _truncate_lines(self, text: str) -> str:
        """Cut every line longer than max_chars and mark it with an ellipsis.

        Lines are only re-joined with line breaks in multiline mode; otherwise
        they are concatenated with nothing between them.

        Args:
            text: The assembled segments

        Returns:
            Truncated text
        """
        max_chars = self.options.max_chars
        lines = text.split("\n")
        while lines and not lines[-1]:
            lines.pop()

        parts: list[str] = []
        for line in lines:
            if len(line) > max_chars:
                line = line[:max_chars] + ELLIPSIS
            parts.append(line)
            if self.options.multiline:
                parts.append("\n")
        return "".join(parts)

    def _wrap(self, text: str) -> str:
        """Wrap assembled segments as ``Exchange[...]``."""
        if self.options.multiline:
            if text and not text.endswith("\n"):
                text += "\n"
            return f"Exchange[{text}]"
        # Drop the leading ", " of the first segment
        return f"Exchange[{text[2:]}]"
