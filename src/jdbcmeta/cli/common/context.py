"""Application context management for the CLI."""

from dataclasses import dataclass
from pathlib import Path

from jdbcmeta.cli.common.exits import EXIT_CONFIGURATION, exit_from_exc
from jdbcmeta.core.adapters.jsonfile import FileResourceRegistry
from jdbcmeta.core.errors import ConfigurationError


@dataclass
class AppContext:
    """Application context holding the resource registry."""

    resources_file: Path
    registry: FileResourceRegistry


def build_context(resources_file: str | None) -> AppContext:
    """Build and return the application context with a file-backed registry.

    Args:
        resources_file: Optional path of the resource definitions file.

    Returns:
        AppContext: Application context with a loaded registry.
    """
    try:
        registry = FileResourceRegistry(resources_file)
    except ConfigurationError as exc:
        exit_from_exc(exc, message=str(exc), code=EXIT_CONFIGURATION)
    return AppContext(resources_file=registry.path, registry=registry)
