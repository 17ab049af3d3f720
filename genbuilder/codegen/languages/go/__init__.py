"""
Go code generator module.

Generates a builder and an immutable value type for a TypeSpec.
"""

from .emitter import GoEmitter
from .generator import (
    BUILDER,
    IMMUTABLE,
    GoGenerator,
    GoBuilderGenerator,
    GoImmutableGenerator,
    generate_all,
    generate_builder,
    generate_immutable,
)
from .naming import GO_RESERVED_WORDS, validate_go_package_name, validate_go_type_spec
from .types import STD_IMPORT_PATHS, resolve_imports, type_qualifiers

__all__ = [
    "BUILDER",
    "IMMUTABLE",
    "GoEmitter",
    "GoGenerator",
    "GoBuilderGenerator",
    "GoImmutableGenerator",
    "generate_all",
    "generate_builder",
    "generate_immutable",
    "GO_RESERVED_WORDS",
    "validate_go_package_name",
    "validate_go_type_spec",
    "STD_IMPORT_PATHS",
    "resolve_imports",
    "type_qualifiers",
]
