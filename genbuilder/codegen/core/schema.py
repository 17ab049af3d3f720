"""
Core schema representation for code generation.

A TypeSpec is the caller-supplied description of a value type: its name
and the ordered (name, type) pairs of its members. Generators never
introspect live types; they only read a TypeSpec.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .errors import DuplicateField, InvalidIdentifier, SchemaError
from .naming import is_identifier, to_public


@dataclass(frozen=True)
class FieldDescriptor:
    """One member of the source value type."""

    name: str
    type_name: str

    def validate(self) -> None:
        """Check that the field can be emitted verbatim."""
        if not self.name:
            raise InvalidIdentifier("", "field name cannot be empty")
        if not is_identifier(self.name):
            raise InvalidIdentifier(self.name, "not a valid identifier", field=self.name)
        if not isinstance(self.type_name, str) or not self.type_name.strip():
            raise InvalidIdentifier(
                self.name, "field type cannot be empty", field=self.name
            )


@dataclass(frozen=True)
class TypeSpec:
    """The source value type as a whole."""

    type_name: str
    fields: Tuple[FieldDescriptor, ...] = ()
    description: Optional[str] = None
    package_name: Optional[str] = None
    # Package qualifier -> import path, for qualified field types
    imports: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Accept any iterable of descriptors but store an immutable tuple
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def validate(self) -> None:
        """
        Validate names before any text is emitted.

        Raises:
            InvalidIdentifier: If the type name or a field name is unusable
            DuplicateField: If two fields share a name or a public name
        """
        if not self.type_name:
            raise InvalidIdentifier("", "type name cannot be empty")
        if not is_identifier(self.type_name):
            raise InvalidIdentifier(self.type_name, "not a valid identifier")

        seen: Dict[str, str] = {}
        for f in self.fields:
            f.validate()
            public = to_public(f.name)
            if public in seen:
                raise DuplicateField(f.name, seen[public])
            seen[public] = f.name


def field_from_arg(value: str) -> FieldDescriptor:
    """
    Parse a ``name:type`` command line argument.

    The type is everything after the first colon, so ``m:map[string]int``
    works as expected.
    """
    name, sep, type_name = value.partition(":")
    if not sep:
        raise SchemaError(f"Field must be given as name:type, got {value!r}")
    return FieldDescriptor(name=name.strip(), type_name=type_name.strip())


def _parse_fields(raw: Any) -> List[FieldDescriptor]:
    if isinstance(raw, Mapping):
        return [FieldDescriptor(str(k), v) for k, v in raw.items()]

    if not isinstance(raw, list):
        raise SchemaError("'fields' must be a list or an object")

    fields = []
    for index, item in enumerate(raw):
        if isinstance(item, Mapping):
            if "name" not in item or "type" not in item:
                raise SchemaError(f"Field #{index} needs 'name' and 'type' keys")
            fields.append(FieldDescriptor(item["name"], item["type"]))
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            fields.append(FieldDescriptor(item[0], item[1]))
        elif isinstance(item, str):
            fields.append(field_from_arg(item))
        else:
            raise SchemaError(f"Unsupported field entry #{index}: {item!r}")
    return fields


def type_spec_from_dict(data: Any) -> TypeSpec:
    """
    Build a TypeSpec from a parsed schema document.

    Expected shape::

        {
            "name": "Jason",
            "package": "builders",
            "imports": {"uuid": "github.com/google/uuid"},
            "fields": [{"name": "t", "type": "time.Time"}, ...]
        }

    ``fields`` may also be an object mapping names to types (key order is
    kept), a list of ``[name, type]`` pairs, or a list of ``"name:type"``
    strings.
    """
    if not isinstance(data, Mapping):
        raise SchemaError("Schema document must be a JSON object")

    type_name = data.get("name") or data.get("type")
    if not type_name or not isinstance(type_name, str):
        raise SchemaError("Schema document needs a 'name'")

    imports = data.get("imports") or {}
    if not isinstance(imports, Mapping):
        raise SchemaError("'imports' must map package qualifiers to import paths")

    for key in ("package", "description"):
        if data.get(key) is not None and not isinstance(data[key], str):
            raise SchemaError(f"'{key}' must be a string")

    return TypeSpec(
        type_name=type_name,
        fields=tuple(_parse_fields(data.get("fields", []))),
        description=data.get("description"),
        package_name=data.get("package"),
        imports={str(k): str(v) for k, v in imports.items()},
    )
