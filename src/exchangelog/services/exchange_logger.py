"""Logger that sends formatted exchanges to a stdlib logging logger."""

import logging
from collections.abc import Iterable

from exchangelog.models.exchange import Exchange
from exchangelog.models.output import FormatOptions
from exchangelog.services.formatter import ExchangeFormatter, FormatterService

DEFAULT_LOGGER_NAME = "exchangelog"


class ExchangeLogger:
    """Formats exchanges and emits them on a named logger at a fixed level."""

    def __init__(
        self,
        logger_name: str = DEFAULT_LOGGER_NAME,
        level: int = logging.INFO,
        options: FormatOptions | None = None,
        formatter: ExchangeFormatter | None = None,
    ):
        self.logger = logging.getLogger(logger_name)
        self.level = level
        self.formatter = formatter if formatter is not None else FormatterService(options)

    def log(self, exchange: Exchange) -> str:
        """Format an exchange and log it.

        Args:
            exchange: The exchange to log

        Returns:
            The formatted string that was logged
        """
        formatted = self.formatter.format(exchange)
        self.logger.log(self.level, formatted)
        return formatted

    def log_all(self, exchanges: Iterable[Exchange]) -> int:
        """Log several exchanges in order.

        Args:
            exchanges: The exchanges to log

        Returns:
            Number of exchanges logged
        """
        count = 0
        for exchange in exchanges:
            self.log(exchange)
            count += 1
        return count
