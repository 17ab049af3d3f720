"""
Go-specific naming rules.

Go decides visibility by the case of an identifier's first letter, and
the builder and immutable types each put fields and methods in one
namespace. These checks reject names that would not compile.
"""

from typing import Dict, List

from ...core.errors import DuplicateField, InvalidIdentifier
from ...core.naming import (
    builder_type_name,
    getter_name,
    receiver_name,
    setter_name,
    to_public,
)
from ...core.schema import FieldDescriptor, TypeSpec

BUILD_METHOD = "Build"
AS_BUILDER_METHOD = "AsBuilder"

# Go reserved words
GO_RESERVED_WORDS = {
    "break",
    "case",
    "chan",
    "const",
    "continue",
    "default",
    "defer",
    "else",
    "fallthrough",
    "for",
    "func",
    "go",
    "goto",
    "if",
    "import",
    "interface",
    "map",
    "package",
    "range",
    "return",
    "select",
    "struct",
    "switch",
    "type",
    "var",
}


def setter_param_name(field: FieldDescriptor, receiver: str) -> str:
    """Parameter name for a setter; renamed when it would shadow the receiver."""
    if field.name == receiver:
        return f"{field.name}Value"
    return field.name


def validate_go_identifier(name: str, field: str = None) -> None:
    """Reject Go keywords."""
    if name in GO_RESERVED_WORDS:
        raise InvalidIdentifier(name, "is a Go reserved word", field=field)


def validate_go_type_spec(type_spec: TypeSpec) -> None:
    """
    Check that both companion types can be declared without collisions.

    Raises:
        InvalidIdentifier: For keywords, exported field names, or a field
            whose accessor collides with a generated method
    """
    validate_go_identifier(type_spec.type_name)

    # The receiver is the first letter; "_" cannot be used as a value
    if not type_spec.type_name[0].isalpha():
        raise InvalidIdentifier(
            type_spec.type_name, "type names must start with a letter"
        )

    # Both raise when the first character has no single-character case mapping
    builder_type_name(type_spec.type_name)
    receiver_name(type_spec.type_name)

    # Member namespaces: name -> field that produced it
    builder_members: Dict[str, str] = {BUILD_METHOD: ""}
    immutable_members: Dict[str, str] = {AS_BUILDER_METHOD: ""}

    for f in type_spec.fields:
        validate_go_identifier(f.name, field=f.name)

        if not f.name[0].islower():
            raise InvalidIdentifier(
                f.name,
                "field names must start with a lower-case letter so the "
                "immutable member stays unexported",
                field=f.name,
            )

        public = to_public(f.name)
        if public == f.name:
            raise InvalidIdentifier(
                f.name,
                "first character has no upper-case form, so the getter "
                "would share the member's name",
                field=f.name,
            )

        for members, generated in (
            (builder_members, public),
            (builder_members, setter_name(f.name)),
            (immutable_members, f.name),
            (immutable_members, getter_name(f.name)),
        ):
            owner = members.get(generated)
            if owner is None:
                members[generated] = f.name
            elif owner == "":
                raise InvalidIdentifier(
                    f.name, f"collides with generated method {generated}", field=f.name
                )
            elif owner != f.name:
                raise DuplicateField(f.name, owner)


def validate_go_package_name(name: str) -> List[str]:
    """
    Validate Go package name according to Go naming rules.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    # Check basic identifier rules
    if not name.isidentifier():
        errors.append(f"'{name}' is not a valid Go identifier")

    # Go-specific rules
    if name[0].isupper():
        errors.append("Package names should be lowercase")

    if "_" in name:
        errors.append("Package names should not contain underscores")

    # Check against reserved words
    if name.lower() in GO_RESERVED_WORDS:
        errors.append(f"'{name}' is a Go reserved word")

    return errors
