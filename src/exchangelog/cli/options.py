"""Reusable CLI option definitions."""

from pathlib import Path
from typing import Annotated

import typer

# Input
RecordsArgument = Annotated[
    Path,
    typer.Argument(
        help="JSON file holding one exchange record or a list of records",
    ),
]

# Section options, flags only switch sections on over the EXCHANGELOG_* settings
ShowExchangeIdOption = Annotated[
    bool,
    typer.Option(
        "--show-exchange-id",
        "-i",
        help="Show the exchange id",
    ),
]

ShowPropertiesOption = Annotated[
    bool,
    typer.Option(
        "--show-properties",
        "-p",
        help="Show exchange properties",
    ),
]

ShowHeadersOption = Annotated[
    bool,
    typer.Option(
        "--show-headers",
        "-H",
        help="Show message headers",
    ),
]

HideBodyTypeOption = Annotated[
    bool,
    typer.Option(
        "--no-body-type",
        help="Hide the body type",
    ),
]

HideBodyOption = Annotated[
    bool,
    typer.Option(
        "--no-body",
        help="Hide the message body",
    ),
]

ShowOutOption = Annotated[
    bool,
    typer.Option(
        "--show-out",
        "-o",
        help="Show the out message",
    ),
]

ShowExceptionOption = Annotated[
    bool,
    typer.Option(
        "--show-exception",
        "-e",
        help="Show the exchange exception",
    ),
]

ShowCaughtExceptionOption = Annotated[
    bool,
    typer.Option(
        "--show-caught-exception",
        "-c",
        help="Fall back to the exception caught by an error handler",
    ),
]

ShowStackTraceOption = Annotated[
    bool,
    typer.Option(
        "--show-stack-trace",
        "-t",
        help="Show the exception stack trace",
    ),
]

ShowAllOption = Annotated[
    bool,
    typer.Option(
        "--show-all",
        "-a",
        help="Show every section",
    ),
]

# Layout options
MultilineOption = Annotated[
    bool,
    typer.Option(
        "--multiline",
        "-m",
        help="Put each section on its own line",
    ),
]

ShowFutureOption = Annotated[
    bool,
    typer.Option(
        "--show-future",
        help="Wait for pending bodies to complete (records files never hold one)",
    ),
]

MaxCharsOption = Annotated[
    int | None,
    typer.Option(
        "--max-chars",
        "-n",
        min=0,
        help="Truncate each line to N characters (0 = unlimited)",
    ),
]

# Log command options
LoggerNameOption = Annotated[
    str,
    typer.Option(
        "--logger",
        help="Name of the logger to log exchanges on",
    ),
]

LevelOption = Annotated[
    str,
    typer.Option(
        "--level",
        "-l",
        help="Level to log exchanges at (DEBUG, INFO, WARNING, ERROR)",
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Enable debug logging to stderr",
    ),
]
