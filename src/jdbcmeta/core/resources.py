"""Resolution of named JDBC resources into connection info."""

from __future__ import annotations

import logging
from typing import Protocol

from jdbcmeta.core.errors import UnknownResourceError, WrongResourceKindError
from jdbcmeta.core.models import ConnectionInfo, Resource, ResourceKind
from jdbcmeta.core.properties import (
    CHECK_SUM,
    DRIVER_CLASS,
    DRIVER_URL,
    PASSWORD,
    URI,
    USER,
)

logger = logging.getLogger(__name__)


class ResourceRegistry(Protocol):
    """Interface for looking up named catalog resources."""

    def lookup(self, name: str) -> Resource | None:
        """Return the resource registered under `name`, or None."""
        ...


def resolve_resource(registry: ResourceRegistry, name: str) -> ConnectionInfo:
    """
    Look up a resource and extract its JDBC connection info.

    The registry is called exactly once. Connection fields the resource does
    not define are returned as empty strings.

    Raises:
        UnknownResourceError: If the registry has no such resource.
        WrongResourceKindError: If the resource is not a JDBC resource.
    """
    resource = registry.lookup(name)
    if resource is None:
        raise UnknownResourceError(name)
    if resource.kind is not ResourceKind.JDBC:
        raise WrongResourceKindError(
            name, actual=resource.kind.value, expected=ResourceKind.JDBC.value
        )

    props = resource.properties
    logger.debug("Resolved JDBC resource %s (uri=%s)", name, props.get(URI, ""))
    return ConnectionInfo(
        uri=props.get(URI, ""),
        driver_url=props.get(DRIVER_URL, ""),
        driver_class=props.get(DRIVER_CLASS, ""),
        checksum=props.get(CHECK_SUM, ""),
        user=props.get(USER, ""),
        password=props.get(PASSWORD, ""),
    )
