"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from richmd.cli.commands import links_cmd, render_cmd, stats_cmd, table_cmd, text_cmd
from richmd.logger import setup_logger


app = typer.Typer(name="richmd", no_args_is_help=True, help="Rich text document to Markdown toolkit")


@app.callback()
def main(
    verbose: Annotated[int, typer.Option("--verbose", "-v", count=True, help="Increase log verbosity")] = 0,
    ):
    """Configure logging before any command runs."""
    setup_logger(verbose)


app.command(name="render")(render_cmd)
app.command(name="text")(text_cmd)
app.command(name="stats")(stats_cmd)
app.command(name="links")(links_cmd)
app.command(name="table")(table_cmd)
