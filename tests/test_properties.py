import pytest

from jdbcmeta.core.errors import (
    ConfigErrorKind,
    ConfigurationError,
    MissingPropertyError,
)
from jdbcmeta.core.models import ConnectionInfo
from jdbcmeta.core.properties import (
    validate_inline_properties,
    validate_properties,
    validate_resource_properties,
)


def _inline_props() -> dict[str, str]:
    return {
        "jdbc_uri": "jdbc:mysql://127.0.0.1:3306",
        "driver_url": "driver_url0",
        "checksum": "check_sum0",
        "driver_class": "driver_class0",
        "user": "user0",
        "password": "password0",
    }


def test_resource_properties_return_resource_and_table():
    assert validate_resource_properties({"resource": "jdbc0", "table": "table0"}) == (
        "jdbc0",
        "table0",
    )


@pytest.mark.parametrize("missing", ["resource", "table"])
def test_resource_properties_require_resource_and_table(missing: str):
    props = {"resource": "jdbc0", "table": "table0"}
    props.pop(missing)

    with pytest.raises(MissingPropertyError) as exc_info:
        validate_properties(props)

    assert exc_info.value.kind is ConfigErrorKind.MISSING_PROPERTY
    if missing == "table":
        assert exc_info.value.key == "table"


def test_resource_properties_reject_empty_table():
    with pytest.raises(MissingPropertyError, match="'table'"):
        validate_resource_properties({"resource": "jdbc0", "table": ""})


def test_resource_properties_reject_inline_connection_keys():
    props = {"resource": "jdbc0", "table": "table0", "jdbc_uri": "jdbc:mysql://h:1"}

    with pytest.raises(ConfigurationError) as exc_info:
        validate_resource_properties(props)

    assert exc_info.value.kind is ConfigErrorKind.CONFLICTING_PROPERTIES
    assert exc_info.value.key == "jdbc_uri"


def test_inline_properties_build_connection_info():
    info = validate_inline_properties(
        _inline_props(), db_name="db0", catalog_name="catalog0"
    )

    assert info == ConnectionInfo(
        uri="jdbc:mysql://127.0.0.1:3306",
        driver_url="driver_url0",
        driver_class="driver_class0",
        checksum="check_sum0",
        user="user0",
        password="password0",
    )


@pytest.mark.parametrize(
    "missing",
    ["jdbc_uri", "driver_url", "checksum", "driver_class", "user", "password"],
)
def test_inline_properties_require_every_connection_key(missing: str):
    props = _inline_props()
    props.pop(missing)

    with pytest.raises(MissingPropertyError) as exc_info:
        validate_properties(props, db_name="db0", catalog_name="catalog0")

    assert exc_info.value.key == missing
    assert missing in str(exc_info.value)


@pytest.mark.parametrize(
    ("db_name", "catalog_name", "key"),
    [(None, "catalog0", "database"), ("db0", "", "catalog")],
)
def test_inline_properties_require_remote_table_identity(db_name, catalog_name, key):
    with pytest.raises(MissingPropertyError) as exc_info:
        validate_inline_properties(
            _inline_props(), db_name=db_name, catalog_name=catalog_name
        )

    assert exc_info.value.key == key


def test_missing_property_is_a_value_error():
    with pytest.raises(ValueError):
        validate_properties({})
