"""
Go code generator implementation.

Generates two companion files for a value type: a builder with public
fields, chained setters and Build, and an immutable type with unexported
fields, getters and AsBuilder.
"""

from dataclasses import asdict
from typing import Dict, List, Optional, Any
from pathlib import Path

from ...core.config import GeneratorConfig
from ...core.errors import InvalidIdentifier
from ...core.generator import (
    CodeGenerator,
    GeneratedArtifact,
    GenerationResult,
    generate_code,
)
from ...core.naming import (
    builder_type_name,
    constructor_name,
    getter_name,
    receiver_name,
    setter_name,
    to_private,
    to_public,
)
from ...core.schema import TypeSpec
from ....logging_config import get_logger
from .emitter import GoEmitter
from .naming import (
    AS_BUILDER_METHOD,
    BUILD_METHOD,
    GO_RESERVED_WORDS,
    validate_go_package_name,
    validate_go_type_spec,
)
from .types import resolve_imports

logger = get_logger(__name__)

BUILDER = "builder"
IMMUTABLE = "immutable"


class GoGenerator(CodeGenerator):
    """Shared behaviour of the Go builder and immutable pipelines."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize Go generator with configuration."""
        super().__init__(config)

        self.add_comments = self.config.get("add_comments", True)
        self.extra_imports = self.config.get("custom", {}).get("imports", {})
        self.emitter = GoEmitter(self.template_engine, add_comments=self.add_comments)

    def get_template_directory(self) -> Optional[Path]:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        return "go"

    @property
    def file_extension(self) -> str:
        return ".go"

    def validate(self, type_spec: TypeSpec) -> List[str]:
        """Validate type_spec for Go generation."""
        warnings = super().validate(type_spec)
        validate_go_type_spec(type_spec)

        _, import_warnings = resolve_imports(type_spec, self.extra_imports)
        warnings.extend(import_warnings)
        return warnings

    def generate(self, type_spec: TypeSpec, package_name: str) -> GeneratedArtifact:
        problems = validate_go_package_name(package_name)
        if (
            not package_name
            or not package_name.isidentifier()
            or package_name in GO_RESERVED_WORDS
        ):
            raise InvalidIdentifier(package_name or "", "; ".join(problems))
        return super().generate(type_spec, package_name)

    def emit_header(self, artifact: GeneratedArtifact, type_spec: TypeSpec) -> None:
        """Package clause followed by the imports the field types need."""
        imports, _ = resolve_imports(type_spec, self.extra_imports)
        self.emitter.emit_package(artifact)
        self.emitter.emit_imports(artifact, imports)


class GoBuilderGenerator(GoGenerator):
    """Builder pipeline: struct, constructor, setters, Build."""

    @property
    def artifact_kind(self) -> str:
        return BUILDER

    def file_name_for(self, type_spec: TypeSpec) -> str:
        return to_private(type_spec.type_name) + "builder" + self.file_extension

    def emit(self, artifact: GeneratedArtifact, type_spec: TypeSpec) -> None:
        target = type_spec.type_name
        struct_name = builder_type_name(target)
        receiver = receiver_name(struct_name)
        constructor = constructor_name(struct_name)

        self.emit_header(artifact, type_spec)

        self.emitter.emit_struct(
            artifact,
            struct_name,
            [(to_public(f.name), f.type_name) for f in type_spec.fields],
            comment=f"{struct_name} is a mutable builder for {target} values.",
        )

        self.emitter.emit_constructor(
            artifact,
            constructor,
            struct_name,
            comment=f"{constructor} returns a zero-valued {struct_name}.",
        )

        for f in type_spec.fields:
            method = setter_name(f.name)
            self.emitter.emit_setter(
                artifact,
                receiver,
                struct_name,
                method,
                to_public(f.name),
                f,
                comment=f"{method} sets {to_public(f.name)} and returns the builder.",
            )

        self.emitter.emit_conversion(
            artifact,
            receiver,
            struct_name,
            BUILD_METHOD,
            target,
            [(f.name, to_public(f.name)) for f in type_spec.fields],
            comment=(
                f"{BUILD_METHOD} returns a new {target} holding the builder's "
                f"current values."
            ),
        )


class GoImmutableGenerator(GoGenerator):
    """Immutable pipeline: struct, constructor, getters, AsBuilder."""

    @property
    def artifact_kind(self) -> str:
        return IMMUTABLE

    def file_name_for(self, type_spec: TypeSpec) -> str:
        return to_private(type_spec.type_name) + self.file_extension

    def emit(self, artifact: GeneratedArtifact, type_spec: TypeSpec) -> None:
        struct_name = type_spec.type_name
        builder = builder_type_name(struct_name)
        receiver = receiver_name(struct_name)
        constructor = constructor_name(struct_name)

        self.emit_header(artifact, type_spec)

        self.emitter.emit_struct(
            artifact,
            struct_name,
            [(f.name, f.type_name) for f in type_spec.fields],
            comment=type_spec.description
            or f"{struct_name} is an immutable value. Use {builder} to create one.",
        )

        self.emitter.emit_constructor(
            artifact,
            constructor,
            struct_name,
            comment=f"{constructor} returns a zero-valued {struct_name}.",
        )

        for f in type_spec.fields:
            method = getter_name(f.name)
            self.emitter.emit_getter(
                artifact,
                receiver,
                struct_name,
                method,
                f,
                comment=f"{method} returns the {f.name} field.",
            )

        self.emitter.emit_conversion(
            artifact,
            receiver,
            struct_name,
            AS_BUILDER_METHOD,
            builder,
            [(to_public(f.name), f.name) for f in type_spec.fields],
            comment=(
                f"{AS_BUILDER_METHOD} returns a {builder} populated with the "
                f"values of this {struct_name}."
            ),
        )


def generator_options(config: Optional[GeneratorConfig]) -> Dict[str, Any]:
    """Flatten a GeneratorConfig into the dict generators are built from."""
    return asdict(config) if config is not None else {}


def generate_builder(
    type_spec: TypeSpec, package_name: str, config: Optional[GeneratorConfig] = None
) -> str:
    """Return the complete builder source text for type_spec."""
    generator = GoBuilderGenerator(generator_options(config))
    return generator.generate(type_spec, package_name).text


def generate_immutable(
    type_spec: TypeSpec, package_name: str, config: Optional[GeneratorConfig] = None
) -> str:
    """Return the complete immutable source text for type_spec."""
    generator = GoImmutableGenerator(generator_options(config))
    return generator.generate(type_spec, package_name).text


def generate_all(
    type_spec: TypeSpec,
    config: Optional[GeneratorConfig] = None,
    kinds: Optional[List[str]] = None,
) -> GenerationResult:
    """
    Run the builder and immutable pipelines for type_spec.

    The package name comes from the config, then the type spec, then the
    last segment of the configured output directory.

    Args:
        type_spec: Type to generate
        config: Generator configuration
        kinds: Subset of ("builder", "immutable") to run; default both
    """
    config = config or GeneratorConfig()
    options = generator_options(config)
    package_name = config.package_name or type_spec.package_name
    if not package_name:
        package_name = config.resolve_package_name()

    pipelines = {
        BUILDER: GoBuilderGenerator,
        IMMUTABLE: GoImmutableGenerator,
    }
    selected = kinds or [BUILDER, IMMUTABLE]
    generators = [pipelines[kind](options) for kind in selected]

    logger.info(
        "Generating %s for %s in package %s",
        ", ".join(selected),
        type_spec.type_name,
        package_name,
    )

    result = generate_code(generators, type_spec, package_name)
    if result.success:
        for problem in validate_go_package_name(package_name):
            result.warnings.append(f"Package name: {problem}")
    return result
