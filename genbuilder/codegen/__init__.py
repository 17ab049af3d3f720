"""
genbuilder code generation module

Generates builder and immutable companion types from a TypeSpec.
"""

from .core.generator import CodeGenerator, GeneratedArtifact, GenerationResult
from .core.errors import (
    GeneratorError,
    InvalidIdentifier,
    DuplicateField,
    SchemaError,
    SinkFailure,
    FormatterFailure,
)
from .core.schema import FieldDescriptor, TypeSpec, type_spec_from_dict
from .core.config import GeneratorConfig, ConfigManager, load_config
from .languages.go import generate_all, generate_builder, generate_immutable
from .formatter import GoFormatter
from .sink import FileSink

__all__ = [
    "CodeGenerator",
    "GeneratedArtifact",
    "GenerationResult",
    "GeneratorError",
    "InvalidIdentifier",
    "DuplicateField",
    "SchemaError",
    "SinkFailure",
    "FormatterFailure",
    "FieldDescriptor",
    "TypeSpec",
    "type_spec_from_dict",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "generate_all",
    "generate_builder",
    "generate_immutable",
    "GoFormatter",
    "FileSink",
]
