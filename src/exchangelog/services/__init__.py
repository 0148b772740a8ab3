"""Service layer for business logic."""

from exchangelog.services.exchange_logger import ExchangeLogger
from exchangelog.services.formatter import ExchangeFormatter, FormatterService

__all__ = ["ExchangeFormatter", "ExchangeLogger", "FormatterService"]
