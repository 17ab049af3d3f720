"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .errors import (
    GeneratorError,
    InvalidIdentifier,
    DuplicateField,
    SchemaError,
    SinkFailure,
    FormatterFailure,
)
from .generator import CodeGenerator, GeneratedArtifact, GenerationResult, generate_code
from .schema import (
    FieldDescriptor,
    TypeSpec,
    field_from_arg,
    type_spec_from_dict,
)
from .naming import (
    to_public,
    to_private,
    receiver_name,
    builder_type_name,
    constructor_name,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Errors
    "GeneratorError",
    "InvalidIdentifier",
    "DuplicateField",
    "SchemaError",
    "SinkFailure",
    "FormatterFailure",
    # Base generator interface
    "CodeGenerator",
    "GeneratedArtifact",
    "GenerationResult",
    "generate_code",
    # Schema system - core data structures
    "FieldDescriptor",
    "TypeSpec",
    "field_from_arg",
    "type_spec_from_dict",
    # Naming utilities
    "to_public",
    "to_private",
    "receiver_name",
    "builder_type_name",
    "constructor_name",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
