"""JDBC external table entity.

A JdbcTable is declared in one of two ways:

- against a named JDBC resource (`resource` and `table` properties). The
  resource is resolved through the injected registry, the resource name is
  used as the driver name and the URL is taken as configured.
- inline, inside a database of an external catalog. Connection parameters
  come from the properties, the driver name is derived from the driver
  artifact and the database name is injected into the URL when missing.

Validation and resolution happen eagerly at construction time, so a table
object always holds a complete ConnectionInfo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from jdbcmeta.core.descriptors import build_descriptor, build_table_descriptor
from jdbcmeta.core.drivers import build_driver_name
from jdbcmeta.core.models import (
    Column,
    ConnectionDescriptor,
    ConnectionInfo,
    RawProperties,
    TableDescriptor,
)
from jdbcmeta.core.properties import (
    validate_inline_properties,
    validate_resource_properties,
)
from jdbcmeta.core.resources import ResourceRegistry, resolve_resource
from jdbcmeta.core.urls import build_jdbc_url, parse_session_variables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JdbcTable:
    """
    An external table backed by a remote JDBC database.

    Attributes:
        id: Catalog id of the table.
        name: Logical table name.
        columns: Declared columns.
        connection: Validated connection info.
        jdbc_table: Name of the table on the remote side.
        resource_name: Resource the table was declared against, if any.
        db_name: Database the table lives in (inline declarations).
        catalog_name: External catalog the table lives in (inline declarations).
    """

    id: int
    name: str
    columns: tuple[Column, ...]
    connection: ConnectionInfo
    jdbc_table: str
    resource_name: str | None = None
    db_name: str | None = None
    catalog_name: str | None = None
    driver_name: str = field(default="", compare=False)

    @classmethod
    def from_resource(
        cls,
        table_id: int,
        name: str,
        columns: Iterable[Column],
        properties: RawProperties,
        registry: ResourceRegistry,
    ) -> JdbcTable:
        """Create a table declared with `resource` and `table` properties."""
        resource_name, remote_table = validate_resource_properties(properties)
        connection = resolve_resource(registry, resource_name)
        logger.debug(
            "Table %s bound to resource %s (remote table %s)",
            name,
            resource_name,
            remote_table,
        )
        return cls(
            id=table_id,
            name=name,
            columns=tuple(columns),
            connection=connection,
            jdbc_table=remote_table,
            resource_name=resource_name,
            driver_name=resource_name,
        )

    @classmethod
    def from_properties(
        cls,
        table_id: int,
        name: str,
        columns: Iterable[Column],
        db_name: str,
        catalog_name: str,
        properties: RawProperties,
    ) -> JdbcTable:
        """Create a table of an external catalog with inline connection properties."""
        connection = validate_inline_properties(
            properties, db_name=db_name, catalog_name=catalog_name
        )
        return cls(
            id=table_id,
            name=name,
            columns=tuple(columns),
            connection=connection,
            jdbc_table=name,
            db_name=db_name,
            catalog_name=catalog_name,
            driver_name=build_driver_name(
                connection.driver_url, connection.checksum, connection.driver_class
            ),
        )

    def to_descriptor(
        self, session_variables: str | Iterable[str] = ""
    ) -> ConnectionDescriptor:
        """
        Build the connection descriptor for this table.

        Args:
            session_variables: Session context variables, either the raw
                comma-separated string or already split entries.
        """
        if isinstance(session_variables, str):
            entries = parse_session_variables(session_variables)
        else:
            entries = tuple(session_variables)

        jdbc_url = build_jdbc_url(
            self.connection.uri, database=self.db_name, session_variables=entries
        )
        return build_descriptor(
            self.connection,
            driver_name=self.driver_name,
            jdbc_url=jdbc_url,
            jdbc_table=self.jdbc_table,
        )

    def to_table_descriptor(
        self, session_variables: str | Iterable[str] = ""
    ) -> TableDescriptor:
        """Build the table-level descriptor wrapping `to_descriptor()`."""
        return build_table_descriptor(
            self.to_descriptor(session_variables),
            table_id=self.id,
            table_name=self.name,
            db_name=self.db_name or "",
            num_columns=len(self.columns),
        )
