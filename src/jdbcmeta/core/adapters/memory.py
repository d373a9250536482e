"""In-memory resource registry."""

from __future__ import annotations

import threading
from typing import Iterable

from jdbcmeta.core.models import Resource


class InMemoryResourceRegistry:
    """Thread-safe, dict-backed resource registry."""

    def __init__(self, resources: Iterable[Resource] = ()) -> None:
        self._lock = threading.Lock()
        self._resources: dict[str, Resource] = {r.name: r for r in resources}

    def register(self, resource: Resource) -> None:
        """Add or replace a resource."""
        with self._lock:
            self._resources[resource.name] = resource

    def drop(self, name: str) -> None:
        """Remove a resource if present."""
        with self._lock:
            self._resources.pop(name, None)

    def lookup(self, name: str) -> Resource | None:
        """Return the resource registered under `name`, or None."""
        with self._lock:
            return self._resources.get(name)

    def list_resources(self) -> list[Resource]:
        """Return all resources sorted by name."""
        with self._lock:
            return sorted(self._resources.values(), key=lambda r: r.name)
