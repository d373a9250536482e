"""Resource registry backed by a JSON definitions file.

File layout:

    {
      "resources": [
        {"name": "jdbc0", "type": "jdbc", "properties": {"jdbc_uri": "..."}}
      ]
    }

The file is read once when the registry is created.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from jdbcmeta.core.adapters.memory import InMemoryResourceRegistry
from jdbcmeta.core.errors import ConfigErrorKind, ConfigurationError
from jdbcmeta.core.models import Resource, ResourceKind


class FileResourceRegistry(InMemoryResourceRegistry):
    """Adapter loading resource definitions from a JSON file."""

    _PATH_ENV = "JDBCMETA_RESOURCES_FILE"

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = self.resolve_path(path)
        super().__init__(self._load())

    @classmethod
    def resolve_path(cls, path: str | Path | None = None) -> Path:
        """Return the definitions path, honoring env and XDG overrides."""
        if path:
            return Path(path).expanduser()
        env_path = os.getenv(cls._PATH_ENV)
        if env_path:
            return Path(env_path).expanduser()
        xdg = os.getenv("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else Path.home() / ".config"
        return base / "jdbcmeta" / "resources.json"

    def _fail(self, reason: str) -> ConfigurationError:
        return ConfigurationError(
            f"Invalid resource file {self.path}: {reason}",
            kind=ConfigErrorKind.INVALID_RESOURCE_FILE,
            key=str(self.path),
        )

    def _load(self) -> list[Resource]:
        """Parse the definitions file into resources."""
        if not self.path.exists():
            return []
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise self._fail(str(exc)) from exc

        entries = payload.get("resources") if isinstance(payload, dict) else None
        if not isinstance(entries, list):
            raise self._fail("expected a top-level 'resources' list")

        return [self._parse_entry(i, entry) for i, entry in enumerate(entries)]

    def _parse_entry(self, index: int, entry: Any) -> Resource:
        if not isinstance(entry, dict):
            raise self._fail(f"resource #{index} is not an object")
        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise self._fail(f"resource #{index} has no name")
        try:
            kind = ResourceKind.parse(str(entry.get("type", "")))
        except ValueError as exc:
            raise self._fail(f"resource '{name}': {exc}") from exc

        props = entry.get("properties")
        if props is None:
            props = {}
        if not isinstance(props, dict):
            raise self._fail(f"resource '{name}' properties must be an object")
        return Resource(
            name=name,
            kind=kind,
            properties={str(k): str(v) for k, v in props.items()},
        )
