"""Builder and immutable type generator for Go value types."""

from .codegen import (
    FieldDescriptor,
    TypeSpec,
    generate_all,
    generate_builder,
    generate_immutable,
)

__version__ = "0.1.0"

__all__ = [
    "FieldDescriptor",
    "TypeSpec",
    "generate_all",
    "generate_builder",
    "generate_immutable",
]
