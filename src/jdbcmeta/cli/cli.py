"""CLI application for JDBC external table metadata."""

import typer

from jdbcmeta.cli.commands.resources import resources_app
from jdbcmeta.cli.commands.tables import tables_app
from jdbcmeta.cli.common.options import VerboseOpt
from jdbcmeta.cli.common.output import configure_logging

app = typer.Typer(
    help="jdbcmeta - JDBC external table metadata tooling",
    no_args_is_help=True,
)


@app.callback()
def _main(verbose: bool = VerboseOpt):
    """Configure logging for all commands."""
    configure_logging(verbose)


app.add_typer(resources_app, name="resources")
app.add_typer(tables_app, name="tables")


if __name__ == "__main__":
    app()
