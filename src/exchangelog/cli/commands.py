"""CLI command definitions."""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from exchangelog.cli.help import get_help
from exchangelog.cli.options import (
    DebugOption,
    HideBodyOption,
    HideBodyTypeOption,
    LevelOption,
    LoggerNameOption,
    MaxCharsOption,
    MultilineOption,
    RecordsArgument,
    ShowAllOption,
    ShowCaughtExceptionOption,
    ShowExceptionOption,
    ShowExchangeIdOption,
    ShowFutureOption,
    ShowHeadersOption,
    ShowOutOption,
    ShowPropertiesOption,
    ShowStackTraceOption,
)
from exchangelog.models.output import FormatOptions
from exchangelog.repositories.records import RecordLoadError, RecordRepository
from exchangelog.services.exchange_logger import DEFAULT_LOGGER_NAME, ExchangeLogger
from exchangelog.services.formatter import FormatterService
from exchangelog.settings import settings

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool = False) -> None:
    """Send log records to stderr through rich."""
    level = logging.DEBUG if debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, markup=False)],
        force=True,
    )


def _parse_level(level: str) -> int:
    """Resolve a level name like 'info' to its logging constant."""
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def _build_format_options(
    show_exchange_id: bool = False,
    show_properties: bool = False,
    show_headers: bool = False,
    no_body_type: bool = False,
    no_body: bool = False,
    show_out: bool = False,
    show_exception: bool = False,
    show_caught_exception: bool = False,
    show_stack_trace: bool = False,
    show_all: bool = False,
    multiline: bool = False,
    show_future: bool = False,
    max_chars: int | None = None,
) -> FormatOptions:
    """Build FormatOptions from CLI options over the environment settings."""
    return settings.format_options(
        show_exchange_id=show_exchange_id or None,
        show_properties=show_properties or None,
        show_headers=show_headers or None,
        show_body_type=False if no_body_type else None,
        show_body=False if no_body else None,
        show_out=show_out or None,
        show_exception=show_exception or None,
        show_caught_exception=show_caught_exception or None,
        show_stack_trace=show_stack_trace or None,
        show_all=show_all or None,
        multiline=multiline or None,
        show_future=show_future or None,
        max_chars=max_chars,
    )


def format_records(
    records: RecordsArgument,
    show_exchange_id: ShowExchangeIdOption = False,
    show_properties: ShowPropertiesOption = False,
    show_headers: ShowHeadersOption = False,
    no_body_type: HideBodyTypeOption = False,
    no_body: HideBodyOption = False,
    show_out: ShowOutOption = False,
    show_exception: ShowExceptionOption = False,
    show_caught_exception: ShowCaughtExceptionOption = False,
    show_stack_trace: ShowStackTraceOption = False,
    show_all: ShowAllOption = False,
    multiline: MultilineOption = False,
    show_future: ShowFutureOption = False,
    max_chars: MaxCharsOption = None,
    debug: DebugOption = False,
) -> None:
    """Print each exchange in a records file as a formatted line."""
    try:
        _configure_logging(debug)
        options = _build_format_options(
            show_exchange_id,
            show_properties,
            show_headers,
            no_body_type,
            no_body,
            show_out,
            show_exception,
            show_caught_exception,
            show_stack_trace,
            show_all,
            multiline,
            show_future,
            max_chars,
        )
        logger.debug("Formatting %s with %s", records, options)

        with RecordRepository(records) as repo:
            exchanges = repo.load()

        formatter = FormatterService(options)
        for exchange in exchanges:
            # Raw output, formatted exchanges contain brackets rich would parse
            console.out(formatter.format(exchange), highlight=False)

    except RecordLoadError as e:
        err_console.print(str(e), markup=False)
        raise typer.Exit(1) from None
    except ValueError as e:
        err_console.print(f"Error: {e}", markup=False)
        raise typer.Exit(1) from None


def log_records(
    records: RecordsArgument,
    logger_name: LoggerNameOption = DEFAULT_LOGGER_NAME,
    level: LevelOption = "INFO",
    show_exchange_id: ShowExchangeIdOption = False,
    show_properties: ShowPropertiesOption = False,
    show_headers: ShowHeadersOption = False,
    no_body_type: HideBodyTypeOption = False,
    no_body: HideBodyOption = False,
    show_out: ShowOutOption = False,
    show_exception: ShowExceptionOption = False,
    show_caught_exception: ShowCaughtExceptionOption = False,
    show_stack_trace: ShowStackTraceOption = False,
    show_all: ShowAllOption = False,
    multiline: MultilineOption = False,
    show_future: ShowFutureOption = False,
    max_chars: MaxCharsOption = None,
    debug: DebugOption = False,
) -> None:
    """Log each exchange in a records file."""
    try:
        _configure_logging(debug)
        options = _build_format_options(
            show_exchange_id,
            show_properties,
            show_headers,
            no_body_type,
            no_body,
            show_out,
            show_exception,
            show_caught_exception,
            show_stack_trace,
            show_all,
            multiline,
            show_future,
            max_chars,
        )

        with RecordRepository(records) as repo:
            exchanges = repo.load()

        exchange_logger = ExchangeLogger(logger_name, _parse_level(level), options)
        count = exchange_logger.log_all(exchanges)
        logger.debug("Logged %d exchanges on %s", count, logger_name)

    except RecordLoadError as e:
        err_console.print(str(e), markup=False)
        raise typer.Exit(1) from None
    except ValueError as e:
        err_console.print(f"Error: {e}", markup=False)
        raise typer.Exit(1) from None


def show_help(
    command: Annotated[
        str | None,
        typer.Argument(help="Command to get help for"),
    ] = None,
) -> None:
    """Show detailed help and examples."""
    help_text = get_help(command)
    console.print(help_text, markup=False, highlight=False)
