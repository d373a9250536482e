"""Core domain models for JDBC external tables.

These models are plain immutable records, free of registry, wire-format
and CLI concerns, so they can be built and compared directly in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

RawProperties = Mapping[str, str]
SessionVariables = tuple[str, ...]


class ResourceKind(str, Enum):
    """Closed set of resource kinds known to the catalog."""

    JDBC = "JDBC"
    SPARK = "SPARK"
    HIVE = "HIVE"
    ICEBERG = "ICEBERG"
    HUDI = "HUDI"
    ODBC = "ODBC"

    @classmethod
    def parse(cls, value: str) -> ResourceKind:
        """Return the kind for a case-insensitive name (e.g. `jdbc`)."""
        try:
            return cls(value.strip().upper())
        except ValueError as exc:
            known = ", ".join(k.value.lower() for k in cls)
            raise ValueError(
                f"Unknown resource type '{value}' (expected one of: {known})"
            ) from exc


@dataclass(frozen=True)
class Resource:
    """A named catalog resource as returned by a registry lookup."""

    name: str
    kind: ResourceKind
    properties: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ConnectionInfo:
    """
    How to reach a remote JDBC database.

    Attributes:
        uri: JDBC connection URL as configured (before any rewriting).
        driver_url: Location of the driver artifact (jar).
        driver_class: Fully qualified driver class name.
        checksum: Checksum of the driver artifact; may be empty.
        user: Remote user name.
        password: Remote password.
    """

    uri: str
    driver_url: str
    driver_class: str
    checksum: str
    user: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Finalized connection record handed over to the execution layer."""

    driver_name: str
    driver_url: str
    driver_class: str
    driver_checksum: str
    jdbc_url: str
    jdbc_table: str
    user: str
    password: str = field(repr=False)

    def to_record(self) -> dict[str, str]:
        """Return the flat wire record with the field names consumers expect."""
        return {
            "jdbc_driver_name": self.driver_name,
            "jdbc_driver_url": self.driver_url,
            "jdbc_driver_class": self.driver_class,
            "jdbc_driver_checksum": self.driver_checksum,
            "jdbc_url": self.jdbc_url,
            "jdbc_table": self.jdbc_table,
            "jdbc_user": self.user,
            "jdbc_passwd": self.password,
        }


@dataclass(frozen=True)
class Column:
    """Column of an external table as declared in DDL."""

    name: str
    type: str
    nullable: bool = True


@dataclass(frozen=True)
class TableDescriptor:
    """Table-level envelope around a connection descriptor."""

    id: int
    table_name: str
    db_name: str
    num_columns: int
    jdbc_table: ConnectionDescriptor
    table_type: str = "JDBC_TABLE"

    def to_record(self) -> dict[str, Any]:
        """Return the nested wire record for this table."""
        return {
            "id": self.id,
            "table_type": self.table_type,
            "num_columns": self.num_columns,
            "table_name": self.table_name,
            "db_name": self.db_name,
            "jdbc_table": self.jdbc_table.to_record(),
        }
