"""Common CLI options for the CLI."""

import typer

ResourcesFileOpt = typer.Option(
    None,
    "--resources",
    "-r",
    envvar="JDBCMETA_RESOURCES_FILE",
    help="JSON file with resource definitions "
    "(default: $XDG_CONFIG_HOME/jdbcmeta/resources.json)",
)

VerboseOpt = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Log resolution and URL rewrite details to stderr",
)

SessionVariablesOpt = typer.Option(
    "",
    "--session-variables",
    "-s",
    envvar="JDBCMETA_SESSION_VARIABLES",
    help="Session variables to propagate (k1=v1,@k2=v2). MySQL only.",
)

PropertyOpt = typer.Option(
    [],
    "--property",
    "-P",
    help="Table property (key=value). This is reusable.",
    show_default=False,
)

JsonOpt = typer.Option(
    False,
    "--json",
    help="Print the descriptor record as JSON",
)

ShowPasswordOpt = typer.Option(
    False,
    "--show-password",
    help="Do not mask the password in the output",
)
