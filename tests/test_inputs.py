import pytest

from glueops.core.errors import InputValidationError
from glueops.core.glue import DatabaseSpec
from glueops.core.inputs import build_database_spec, parse_if_not_exists, parse_parameters


def test_parse_parameters_accepts_flat_object():
    assert parse_parameters('{"a":"b"}') == {"a": "b"}


@pytest.mark.parametrize("raw", [None, ""])
def test_parse_parameters_treats_missing_as_none(raw):
    assert parse_parameters(raw) is None


@pytest.mark.parametrize("raw", ["[1,2]", "not json", "null", '"text"', "{"])
def test_parse_parameters_rejects_non_objects(raw):
    with pytest.raises(InputValidationError, match="Failed to parse parameters JSON"):
        parse_parameters(raw)


def test_parse_parameters_rejects_non_string_values():
    with pytest.raises(InputValidationError, match="nested, num"):
        parse_parameters('{"ok": "x", "num": 1, "nested": {"a": "b"}}')


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, True), ("", True), ("true", True), ("no", True), ("FALSE", True), ("false", False)],
)
def test_parse_if_not_exists_only_literal_false_disables(value, expected):
    assert parse_if_not_exists(value) is expected


def test_build_database_spec_blank_optionals_become_none():
    spec = build_database_spec(
        name="sales",
        description="",
        location_uri="",
        parameters="",
        catalog_id="",
    )

    assert spec.name == "sales"
    assert spec.description is None
    assert spec.location_uri is None
    assert spec.parameters is None
    assert spec.catalog_id is None
    assert spec.to_database_input() == {"Name": "sales"}


def test_build_database_spec_renders_database_input():
    spec = build_database_spec(
        name="sales",
        description="Sales data",
        location_uri="s3://bucket/sales/",
        parameters='{"owner": "data"}',
        catalog_id="123456789012",
    )

    assert spec.catalog_id == "123456789012"
    assert spec.to_database_input() == {
        "Name": "sales",
        "Description": "Sales data",
        "LocationUri": "s3://bucket/sales/",
        "Parameters": {"owner": "data"},
    }


@pytest.mark.parametrize("name", [None, "", "   "])
def test_build_database_spec_requires_name(name):
    with pytest.raises(InputValidationError, match="database-name"):
        build_database_spec(name=name)


def test_database_spec_parameters_are_read_only_copy():
    source = {"owner": "data"}
    spec = DatabaseSpec(name="sales", parameters=source)

    source["owner"] = "changed"

    assert spec.parameters == {"owner": "data"}
    with pytest.raises(TypeError):
        spec.parameters["owner"] = "x"
    assert type(spec.to_database_input()["Parameters"]) is dict
