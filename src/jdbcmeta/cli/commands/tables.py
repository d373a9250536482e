"""Commands for building JDBC table descriptors."""

import json

import typer

from jdbcmeta.cli.common.context import AppContext, build_context
from jdbcmeta.cli.common.exits import EXIT_CONFIGURATION, exit_code_for, exit_from_exc
from jdbcmeta.cli.common.options import (
    JsonOpt,
    PropertyOpt,
    ResourcesFileOpt,
    SessionVariablesOpt,
    ShowPasswordOpt,
)
from jdbcmeta.cli.common.output import mask, out
from jdbcmeta.cli.common.properties import parse_property_options
from jdbcmeta.core.drivers import build_driver_name
from jdbcmeta.core.errors import ConfigurationError, UnsupportedCapabilityError
from jdbcmeta.core.models import Column
from jdbcmeta.core.properties import uses_resource
from jdbcmeta.core.tables import JdbcTable

tables_app = typer.Typer(
    help="Build JDBC external table descriptors.",
    no_args_is_help=False,
    invoke_without_command=True,
)


@tables_app.callback()
def _init(ctx: typer.Context, resources_file: str | None = ResourcesFileOpt):
    """Load resource definitions used by resource-backed tables."""
    if ctx.invoked_subcommand == "driver-name":
        return
    ctx.obj = build_context(resources_file)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


def _parse_columns_or_exit(items: list[str]) -> list[Column]:
    """Convert `name:type` options into columns."""
    columns: list[Column] = []
    for item in items:
        name, sep, type_ = item.partition(":")
        if not sep or not name or not type_:
            out.error(f"Invalid column: '{item}' (expected name:type)")
            raise typer.Exit(EXIT_CONFIGURATION)
        columns.append(Column(name=name.strip(), type=type_.strip().upper()))
    return columns


@tables_app.command("describe")
def describe(
    ctx: typer.Context,
    name: str = typer.Option("jdbc_table", "--name", help="Logical table name"),
    table_id: int = typer.Option(1000, "--id", help="Catalog table id"),
    db: str | None = typer.Option(None, "--db", help="Database (inline tables)"),
    catalog: str | None = typer.Option(
        None, "--catalog", help="External catalog (inline tables)"
    ),
    column: list[str] = typer.Option(
        [], "--column", "-c", help="Column (name:type). This is reusable.", show_default=False
    ),
    prop: list[str] = PropertyOpt,
    session_variables: str = SessionVariablesOpt,
    as_json: bool = JsonOpt,
    show_password: bool = ShowPasswordOpt,
):
    """Build and print the descriptor of a JDBC table."""
    appctx: AppContext = ctx.obj
    columns = _parse_columns_or_exit(column)

    try:
        properties = parse_property_options(prop)
    except ValueError as exc:
        exit_from_exc(exc, message=str(exc), code=EXIT_CONFIGURATION)

    try:
        if uses_resource(properties):
            table = JdbcTable.from_resource(
                table_id, name, columns, properties, appctx.registry
            )
        else:
            table = JdbcTable.from_properties(
                table_id, name, columns, db or "", catalog or "", properties
            )
        descriptor = table.to_table_descriptor(session_variables)
    except (ConfigurationError, UnsupportedCapabilityError) as exc:
        exit_from_exc(exc, message=str(exc), code=exit_code_for(exc))

    record = descriptor.to_record()
    if as_json:
        jdbc = record["jdbc_table"]
        jdbc["jdbc_passwd"] = mask(jdbc["jdbc_passwd"], show=show_password)
        out.print(json.dumps(record, indent=2))
        return

    out.header(f"Table {descriptor.table_name}")
    out.kv(
        {
            "id": descriptor.id,
            "type": descriptor.table_type,
            "database": descriptor.db_name or "-",
            "columns": descriptor.num_columns,
            "resource": table.resource_name or "-",
        }
    )
    out.descriptor_table(record["jdbc_table"], show_password=show_password)


@tables_app.command("driver-name")
def driver_name(
    driver_url: str = typer.Option(..., "--driver-url", help="Driver jar location"),
    driver_class: str = typer.Option(..., "--driver-class", help="Driver class name"),
    checksum: str = typer.Option("", "--checksum", help="Driver jar checksum"),
):
    """Print the driver identifier used to de-duplicate driver artifacts."""
    out.print(build_driver_name(driver_url, checksum, driver_class))
