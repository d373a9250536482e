"""Commands for inspecting registered resources."""

import typer

from jdbcmeta.cli.common.context import AppContext, build_context
from jdbcmeta.cli.common.exits import EXIT_CONFIGURATION, die
from jdbcmeta.cli.common.options import ResourcesFileOpt, ShowPasswordOpt
from jdbcmeta.cli.common.output import mask, out

resources_app = typer.Typer(
    help="Inspect catalog resources.",
    no_args_is_help=False,
    invoke_without_command=True,
)


@resources_app.callback()
def _init(ctx: typer.Context, resources_file: str | None = ResourcesFileOpt):
    """Load resource definitions."""
    ctx.obj = build_context(resources_file)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@resources_app.command("list")
def resources_list(ctx: typer.Context):
    """List all resources."""
    appctx: AppContext = ctx.obj
    resources = appctx.registry.list_resources()

    if not resources:
        out.warn(f"No resources found in {appctx.resources_file}.")
        raise typer.Exit(0)

    out.header("Resources")
    out.info(f"File: {appctx.resources_file} | Resources: {len(resources)}")
    out.resources_table(resources)


@resources_app.command("show")
def resources_show(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Resource name"),
    show_password: bool = ShowPasswordOpt,
):
    """Show the properties of one resource."""
    appctx: AppContext = ctx.obj
    resource = appctx.registry.lookup(name)
    if resource is None:
        die(f"Resource '{name}' does not exist.", code=EXIT_CONFIGURATION)

    out.header(f"Resource {resource.name}")
    out.kv({"type": resource.kind.value})
    out.kv(
        {
            key: mask(value, show=show_password) if key == "password" else value
            for key, value in sorted(resource.properties.items())
        }
    )
