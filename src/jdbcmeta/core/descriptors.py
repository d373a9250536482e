"""Assembly of connection and table descriptors."""

from __future__ import annotations

from jdbcmeta.core.models import ConnectionDescriptor, ConnectionInfo, TableDescriptor


def build_descriptor(
    info: ConnectionInfo, *, driver_name: str, jdbc_url: str, jdbc_table: str
) -> ConnectionDescriptor:
    """Build the connection descriptor from validated connection info."""
    return ConnectionDescriptor(
        driver_name=driver_name,
        driver_url=info.driver_url,
        driver_class=info.driver_class,
        driver_checksum=info.checksum,
        jdbc_url=jdbc_url,
        jdbc_table=jdbc_table,
        user=info.user,
        password=info.password,
    )


def build_table_descriptor(
    connection: ConnectionDescriptor,
    *,
    table_id: int,
    table_name: str,
    db_name: str = "",
    num_columns: int = 0,
) -> TableDescriptor:
    """Wrap a connection descriptor into the table-level envelope."""
    return TableDescriptor(
        id=table_id,
        table_name=table_name,
        db_name=db_name,
        num_columns=num_columns,
        jdbc_table=connection,
    )
