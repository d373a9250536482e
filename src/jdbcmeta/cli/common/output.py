"""Output formatting utilities for the CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.theme import Theme

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

_MASK = "******"

console = Console(theme=_THEME)
err_console = Console(theme=_THEME, stderr=True)


def configure_logging(verbose: bool) -> None:
    """Route `jdbcmeta` log records to stderr through Rich."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("jdbcmeta")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(
            RichHandler(console=err_console, show_path=False, markup=False)
        )


def mask(value: str, *, show: bool) -> str:
    """Return the value, or a fixed mask when secrets must stay hidden."""
    if show or not value:
        return value
    return _MASK


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {msg}")

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        err_console.print(f"[warn]⚠[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        err_console.print(f"[err]✗[/] {msg}")

    def header(self, title: str) -> None:
        """Print a header message."""
        console.print(f"[title]{title}[/]")

    def print(self, msg: str) -> None:
        """Print a raw message to the console."""
        console.print(msg, markup=False, highlight=False, soft_wrap=True)

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs."""
        for k, v in items.items():
            console.print(f"[meta]{k}[/]: {v}", highlight=False, soft_wrap=True)

    def resources_table(self, resources: Iterable[Any], title: str = "Resources") -> None:
        """
        Expects objects with .name .kind .properties (like jdbcmeta.core.models.Resource)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Name", style="ok", no_wrap=True)
        t.add_column("Type")
        t.add_column("URI", style="meta")

        for r in resources:
            kind = r.kind.value if hasattr(r.kind, "value") else str(r.kind)
            t.add_row(r.name, kind, (r.properties or {}).get("jdbc_uri", ""))

        console.print(t)

    def descriptor_table(
        self, record: Mapping[str, str], *, show_password: bool, title: str = "JDBC table"
    ) -> None:
        """Render a flat connection record (see ConnectionDescriptor.to_record)."""
        t = Table(title=title, show_lines=False)
        t.add_column("Field", style="meta", no_wrap=True)
        t.add_column("Value", style="ok", overflow="fold")

        for key, value in record.items():
            if key == "jdbc_passwd":
                value = mask(value, show=show_password)
            t.add_row(key, value)

        console.print(t)


out = Out()
