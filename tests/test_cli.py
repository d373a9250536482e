import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from jdbcmeta.cli.cli import app
from jdbcmeta.cli.common.properties import parse_property_options
from jdbcmeta.core.drivers import build_driver_name

runner = CliRunner()

_INLINE = [
    "-P", "jdbc_uri=jdbc:mysql://127.0.0.1:3306",
    "-P", "driver_url=driver_url0",
    "-P", "checksum=check_sum0",
    "-P", "driver_class=driver_class0",
    "-P", "user=user0",
    "-P", "password=password0",
]


@pytest.fixture
def resources_file(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / "resources.json"
    path.write_text(
        json.dumps(
            {
                "resources": [
                    {
                        "name": "jdbc0",
                        "type": "jdbc",
                        "properties": {
                            "jdbc_uri": "jdbc:mysql://127.0.0.1:3306/db0?sessionVariables=my_session_var=val",
                            "driver_url": "driver_url",
                            "driver_class": "driver_class",
                            "user": "user0",
                            "password": "password0",
                        },
                    },
                    {"name": "spark0", "type": "spark"},
                ]
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("JDBCMETA_RESOURCES_FILE", str(path))
    monkeypatch.delenv("JDBCMETA_SESSION_VARIABLES", raising=False)
    return path


def test_parse_property_options():
    assert parse_property_options(["a=1", "b=x=y", "a=2"]) == {"a": "2", "b": "x=y"}
    with pytest.raises(ValueError, match="key=value"):
        parse_property_options(["broken"])
    with pytest.raises(ValueError, match="empty key"):
        parse_property_options(["=1"])


def test_describe_resource_table_json(resources_file: Path):
    result = runner.invoke(
        app,
        [
            "tables", "describe", "--json",
            "-P", "resource=jdbc0", "-P", "table=table0",
            "--session-variables", "session_variable=val,@user_defined_variable=my_val",
        ],
    )

    assert result.exit_code == 0, result.output
    record = json.loads(result.stdout)
    jdbc = record["jdbc_table"]
    assert jdbc["jdbc_url"] == (
        "jdbc:mysql://127.0.0.1:3306/db0?sessionVariables=session_variable=val,"
        "@user_defined_variable=my_val,my_session_var=val"
    )
    assert jdbc["jdbc_driver_name"] == "jdbc0"
    assert jdbc["jdbc_table"] == "table0"
    assert jdbc["jdbc_passwd"] == "******"


def test_describe_inline_table_json(resources_file: Path):
    result = runner.invoke(
        app,
        [
            "tables", "describe", "--json", "--show-password",
            "--name", "tbl", "--db", "db0", "--catalog", "catalog0",
            "-c", "id:int", *_INLINE,
        ],
    )

    assert result.exit_code == 0, result.output
    record = json.loads(result.stdout)
    assert record["num_columns"] == 1
    assert record["db_name"] == "db0"
    assert record["jdbc_table"]["jdbc_url"] == "jdbc:mysql://127.0.0.1:3306/db0"
    assert record["jdbc_table"]["jdbc_passwd"] == "password0"
    assert record["jdbc_table"]["jdbc_driver_name"] == build_driver_name(
        "driver_url0", "check_sum0", "driver_class0"
    )


def test_describe_session_variables_from_env(resources_file: Path, monkeypatch):
    monkeypatch.setenv("JDBCMETA_SESSION_VARIABLES", "a=1")

    result = runner.invoke(
        app,
        ["tables", "describe", "--json", "--db", "db0", "--catalog", "c0", *_INLINE],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["jdbc_table"]["jdbc_url"] == (
        "jdbc:mysql://127.0.0.1:3306/db0?sessionVariables=a=1"
    )


def test_describe_table_view(resources_file: Path):
    result = runner.invoke(
        app, ["tables", "describe", "-P", "resource=jdbc0", "-P", "table=table0"]
    )

    assert result.exit_code == 0, result.output
    assert "jdbc_driver_name" in result.output
    assert "password0" not in result.output


@pytest.mark.parametrize(
    ("args", "code"),
    [
        (["-P", "resource=missing", "-P", "table=t"], 2),
        (["-P", "resource=spark0", "-P", "table=t"], 2),
        (["-P", "resource=jdbc0"], 2),
        (["-P", "broken"], 2),
        (["-c", "broken", "-P", "resource=jdbc0", "-P", "table=t"], 2),
    ],
)
def test_describe_configuration_errors(resources_file: Path, args, code):
    result = runner.invoke(app, ["tables", "describe", *args])

    assert result.exit_code == code


def test_describe_unsupported_protocol(resources_file: Path):
    inline = [a.replace("jdbc:mysql", "jdbc:postgresql") for a in _INLINE]

    result = runner.invoke(
        app,
        [
            "tables", "describe", "--db", "db0", "--catalog", "c0",
            "--session-variables", "a=1", *inline,
        ],
    )

    assert result.exit_code == 3
    assert "POSTGRESQL" in result.output


def test_driver_name_command(resources_file: Path):
    result = runner.invoke(
        app,
        [
            "tables", "driver-name",
            "--driver-url", "http://x.com/postgresql-42.3.3.jar",
            "--driver-class", "org.postgresql.Driver",
            "--checksum", "bef0b2e1c6edcd8647c24bed31e1a4ac",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == (
        "jdbc_6cc00233e12786f678259e7671426551805574c11353d2b969258781e7f2ad92"
    )


def test_resources_list_and_show(resources_file: Path):
    listed = runner.invoke(app, ["resources", "list"])
    shown = runner.invoke(app, ["resources", "show", "jdbc0"])
    missing = runner.invoke(app, ["resources", "show", "nope"])

    assert listed.exit_code == 0, listed.output
    assert "jdbc0" in listed.output
    assert "spark0" in listed.output
    assert shown.exit_code == 0, shown.output
    assert "driver_url" in shown.output
    assert "password0" not in shown.output
    assert missing.exit_code == 2


def test_invalid_resources_file(tmp_path: Path, monkeypatch):
    path = tmp_path / "resources.json"
    path.write_text("[]", encoding="utf-8")
    monkeypatch.setenv("JDBCMETA_RESOURCES_FILE", str(path))

    result = runner.invoke(app, ["resources", "list"])

    assert result.exit_code == 2


def test_driver_name_ignores_broken_resources_file(tmp_path: Path, monkeypatch):
    path = tmp_path / "resources.json"
    path.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("JDBCMETA_RESOURCES_FILE", str(path))

    result = runner.invoke(
        app, ["tables", "driver-name", "--driver-url", "u", "--driver-class", "c"]
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == build_driver_name("u", "", "c")
