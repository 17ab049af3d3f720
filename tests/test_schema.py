import pytest

from genbuilder.codegen.core.errors import DuplicateField, InvalidIdentifier, SchemaError
from genbuilder.codegen.core.schema import (
    FieldDescriptor,
    TypeSpec,
    field_from_arg,
    type_spec_from_dict,
)


def test_fields_are_stored_as_tuple():
    spec = TypeSpec("Jason", [FieldDescriptor("count", "int")])
    assert spec.fields == (FieldDescriptor("count", "int"),)
    assert spec.field_names == ["count"]


def test_type_spec_is_frozen(jason_spec):
    with pytest.raises(AttributeError):
        jason_spec.type_name = "Other"


def test_validate_accepts_empty_field_list():
    TypeSpec("Empty").validate()


@pytest.mark.parametrize(
    "spec",
    [
        TypeSpec(""),
        TypeSpec("has space"),
        TypeSpec("Jason", (FieldDescriptor("", "int"),)),
        TypeSpec("Jason", (FieldDescriptor("1st", "int"),)),
        TypeSpec("Jason", (FieldDescriptor("count", ""),)),
        TypeSpec("Jason", (FieldDescriptor("count", "   "),)),
    ],
)
def test_validate_rejects_invalid_identifiers(spec):
    with pytest.raises(InvalidIdentifier):
        spec.validate()


def test_validate_reports_offending_field():
    spec = TypeSpec("Jason", (FieldDescriptor("count", ""),))
    with pytest.raises(InvalidIdentifier) as excinfo:
        spec.validate()
    assert excinfo.value.field == "count"


def test_validate_rejects_duplicate_names():
    spec = TypeSpec(
        "Jason", (FieldDescriptor("count", "int"), FieldDescriptor("count", "int64"))
    )
    with pytest.raises(DuplicateField) as excinfo:
        spec.validate()
    assert excinfo.value.name == "count"


def test_validate_rejects_colliding_public_names():
    spec = TypeSpec(
        "Jason", (FieldDescriptor("count", "int"), FieldDescriptor("Count", "int"))
    )
    with pytest.raises(DuplicateField) as excinfo:
        spec.validate()
    assert excinfo.value.other == "count"


def test_field_from_arg_splits_on_first_colon():
    assert field_from_arg("m:map[string]int") == FieldDescriptor("m", "map[string]int")
    assert field_from_arg(" t : time.Time ") == FieldDescriptor("t", "time.Time")


def test_field_from_arg_requires_colon():
    with pytest.raises(SchemaError):
        field_from_arg("count")


def test_from_dict_with_list_of_objects():
    spec = type_spec_from_dict(
        {
            "name": "Jason",
            "package": "builders",
            "description": "A sample.",
            "imports": {"uuid": "github.com/google/uuid"},
            "fields": [
                {"name": "id", "type": "uuid.UUID"},
                {"name": "count", "type": "int"},
            ],
        }
    )
    assert spec.type_name == "Jason"
    assert spec.package_name == "builders"
    assert spec.description == "A sample."
    assert spec.imports == {"uuid": "github.com/google/uuid"}
    assert spec.field_names == ["id", "count"]


def test_from_dict_with_mapping_keeps_order():
    spec = type_spec_from_dict(
        {"name": "Jason", "fields": {"zeta": "int", "alpha": "string", "mid": "bool"}}
    )
    assert spec.field_names == ["zeta", "alpha", "mid"]


def test_from_dict_with_pairs_and_strings():
    spec = type_spec_from_dict(
        {"name": "Jason", "fields": [["count", "int"], "label:string"]}
    )
    assert spec.fields == (
        FieldDescriptor("count", "int"),
        FieldDescriptor("label", "string"),
    )


def test_from_dict_without_fields_is_empty():
    assert type_spec_from_dict({"name": "Empty"}).fields == ()


@pytest.mark.parametrize(
    "data",
    [
        [],
        {},
        {"fields": []},
        {"name": "Jason", "fields": "count:int"},
        {"name": "Jason", "fields": [{"name": "count"}]},
        {"name": "Jason", "fields": [42]},
        {"name": "Jason", "imports": ["time"]},
        {"name": "Jason", "package": 5},
        {"name": "Jason", "description": ["a", "b"]},
    ],
)
def test_from_dict_rejects_malformed_documents(data):
    with pytest.raises(SchemaError):
        type_spec_from_dict(data)
