"""Validation of DDL properties for JDBC external tables.

A table is declared either against a named resource (`resource` + `table`)
or with the full connection parameters inline. The two styles are never
mixed.
"""

from __future__ import annotations

from jdbcmeta.core.errors import (
    ConfigErrorKind,
    ConfigurationError,
    MissingPropertyError,
)
from jdbcmeta.core.models import ConnectionInfo, RawProperties

RESOURCE = "resource"
TABLE = "table"

URI = "jdbc_uri"
DRIVER_URL = "driver_url"
DRIVER_CLASS = "driver_class"
CHECK_SUM = "checksum"
USER = "user"
PASSWORD = "password"

CONNECTION_KEYS: tuple[str, ...] = (
    URI,
    DRIVER_CLASS,
    DRIVER_URL,
    CHECK_SUM,
    USER,
    PASSWORD,
)


def uses_resource(properties: RawProperties) -> bool:
    """Return True if the properties reference a named resource."""
    return RESOURCE in properties


def _require(properties: RawProperties, key: str) -> str:
    value = properties.get(key)
    if value is None or value == "":
        raise MissingPropertyError(key)
    return value


def validate_resource_properties(properties: RawProperties) -> tuple[str, str]:
    """
    Validate a resource-backed declaration.

    Returns:
        A `(resource_name, remote_table)` tuple.

    Raises:
        MissingPropertyError: If `resource` or `table` is absent or empty.
        ConfigurationError: If inline connection keys are mixed in.
    """
    resource_name = _require(properties, RESOURCE)
    remote_table = _require(properties, TABLE)

    mixed = [key for key in CONNECTION_KEYS if key in properties]
    if mixed:
        raise ConfigurationError(
            f"Properties reference resource '{resource_name}' and also define "
            f"connection parameters inline: {', '.join(mixed)}",
            kind=ConfigErrorKind.CONFLICTING_PROPERTIES,
            key=mixed[0],
        )
    return resource_name, remote_table


def validate_inline_properties(
    properties: RawProperties, *, db_name: str | None, catalog_name: str | None
) -> ConnectionInfo:
    """
    Validate an inline declaration and return its connection info.

    The remote table identity comes from the database and catalog the table
    is created in, so both names are required alongside the property keys.
    """
    values = {key: _require(properties, key) for key in CONNECTION_KEYS}
    if not db_name:
        raise MissingPropertyError("database", context="remote table identity")
    if not catalog_name:
        raise MissingPropertyError("catalog", context="remote table identity")

    return ConnectionInfo(
        uri=values[URI],
        driver_url=values[DRIVER_URL],
        driver_class=values[DRIVER_CLASS],
        checksum=values[CHECK_SUM],
        user=values[USER],
        password=values[PASSWORD],
    )


def validate_properties(
    properties: RawProperties,
    *,
    db_name: str | None = None,
    catalog_name: str | None = None,
) -> tuple[str, str] | ConnectionInfo:
    """Dispatch to the resource or inline validation depending on `resource`."""
    if uses_resource(properties):
        return validate_resource_properties(properties)
    return validate_inline_properties(
        properties, db_name=db_name, catalog_name=catalog_name
    )
