"""Exit handling utilities for the CLI."""

from typing import NoReturn

import typer

from jdbcmeta.cli.common.output import out
from jdbcmeta.core.errors import ConfigurationError, UnsupportedCapabilityError

EXIT_CONFIGURATION = 2
EXIT_CAPABILITY = 3


def die(msg: str, code: int = 1) -> NoReturn:
    """Exit with an error message and optional exit code."""
    out.error(msg)
    raise typer.Exit(code)


def exit_from_exc(exc: Exception, *, message: str, code: int = 1) -> NoReturn:
    """
    Helper function to print an error message and exit with a given code.

    Exists to satisfy pylint W0707 and to standardize error exits.
    """
    out.error(message)
    raise typer.Exit(code) from exc


def exit_code_for(exc: Exception) -> int:
    """Map core errors onto process exit codes."""
    if isinstance(exc, ConfigurationError):
        return EXIT_CONFIGURATION
    if isinstance(exc, UnsupportedCapabilityError):
        return EXIT_CAPABILITY
    return 1
