"""Main Typer application."""

import typer

from exchangelog.cli.commands import format_records, log_records, show_help

app = typer.Typer(
    name="exchangelog",
    help="CLI tool for rendering message exchanges as diagnostic log lines.",
    no_args_is_help=True,
)

# Register commands
app.command("format", help="Print each exchange in a records file")(format_records)
app.command("log", help="Log each exchange through Python logging")(log_records)
app.command("help", help="Show detailed help and examples")(show_help)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """exchangelog - Exchange Log Formatter."""


if __name__ == "__main__":
    app()
