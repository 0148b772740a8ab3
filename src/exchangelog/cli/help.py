"""Help content for exchangelog CLI."""

OVERVIEW = """
exchangelog - Exchange Log Formatter

Render message exchanges as single diagnostic log lines of the form
Exchange[BodyType:str, Body:Hello World].

COMMANDS:
  format  Print each exchange in a records file
  log     Log each exchange through Python logging
  help    Show detailed help and examples

QUICK START:
  # Body type and body only
  exchangelog format exchanges.json

  # Everything, one section per line
  exchangelog format exchanges.json --show-all --multiline

SETTINGS:
  Every option can be preset from the environment, e.g.
  EXCHANGELOG_SHOW_HEADERS=true or EXCHANGELOG_MAX_CHARS=120.

For more help on a specific command, use: exchangelog help <command>
"""

SECTION_OPTIONS = """
SECTION OPTIONS:
  -i, --show-exchange-id       Show the exchange id
  -p, --show-properties        Show exchange properties
  -H, --show-headers           Show message headers
  --no-body-type               Hide the body type
  --no-body                    Hide the message body
  -o, --show-out               Show the out message, or "Out: null"
  -e, --show-exception         Show the exchange exception
  -c, --show-caught-exception  Fall back to the caught exception
  -t, --show-stack-trace       Show the exception stack trace
  -a, --show-all               Show every section

LAYOUT OPTIONS:
  -m, --multiline              Put each section on its own line
  --show-future                Wait for pending bodies (no effect on records files)
  -n, --max-chars INT          Truncate each line to N characters (0 = unlimited)
"""

FORMAT_HELP = f"""
FORMAT COMMAND

Print each exchange in a records file as a formatted line.

USAGE:
  exchangelog format <records-file> [OPTIONS]
{SECTION_OPTIONS}
EXAMPLES:
  # Id, headers and body
  exchangelog format exchanges.json -i -H

  # Failed exchanges with their stack traces
  exchangelog format failed.json --show-exception --show-stack-trace

  # Long bodies cut at 80 characters
  exchangelog format exchanges.json --max-chars 80

RECORDS FILE:
  One JSON object or a list of objects:
  {{
    "exchange_id": "ID-1",
    "properties": {{"retries": 0}},
    "in": {{"headers": {{"foo": 123}}, "body": "Hello World", "stream": false}},
    "out": null,
    "exception": {{"type": "ValueError", "message": "boom"}},
    "caught_exception": null
  }}
"""

LOG_HELP = f"""
LOG COMMAND

Log each exchange in a records file through Python logging.

USAGE:
  exchangelog log <records-file> [OPTIONS]

OPTIONS:
  --logger TEXT                Logger name (default: exchangelog)
  -l, --level TEXT             Level to log at (default: INFO)
{SECTION_OPTIONS}
EXAMPLES:
  # Log on a custom logger at WARNING
  exchangelog log exchanges.json --logger orders --level warning

  # Full detail, multiline
  exchangelog log exchanges.json -a -m
"""

COMMAND_HELP = {
    "format": FORMAT_HELP,
    "log": LOG_HELP,
}


def get_help(command: str | None = None) -> str:
    """Get help text for a command or overview.

    Args:
        command: Optional command name

    Returns:
        Help text string
    """
    if command is None:
        return OVERVIEW.strip()

    help_text = COMMAND_HELP.get(command.lower())
    if help_text is None:
        return f"Unknown command: {command}\n\nAvailable commands: format, log"

    return help_text.strip()
