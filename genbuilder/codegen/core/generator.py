"""
Base generator interface for all code generation targets.

Defines the contract that every pipeline implements, the artifact
buffer pipelines write into, and the result container handed to callers.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Sequence
from pathlib import Path

from .errors import GeneratorError
from .schema import TypeSpec
from .templates import TemplateEngine, create_template_engine
from ...logging_config import get_logger

logger = get_logger(__name__)


class GeneratedArtifact:
    """
    Accumulating text buffer for one generated file.

    Units are appended in order and separated by a blank line. Once
    finalized, the artifact rejects further writes.
    """

    def __init__(self, file_name: str, package_name: str, kind: str):
        self.file_name = file_name
        self.package_name = package_name
        self.kind = kind
        self._units: List[str] = []
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def units(self) -> List[str]:
        return list(self._units)

    def append(self, unit: str) -> None:
        """Append one syntactic unit."""
        if self._finalized:
            raise GeneratorError(f"Artifact {self.file_name} is already finalized")
        self._units.append(unit if unit.endswith("\n") else unit + "\n")

    def finalize(self) -> str:
        """Close the artifact and return its text."""
        self._finalized = True
        return self.text

    @property
    def text(self) -> str:
        return "\n".join(self._units)

    def __repr__(self) -> str:
        state = "final" if self._finalized else "open"
        return f"GeneratedArtifact({self.file_name!r}, {self.kind}, {len(self._units)} units, {state})"


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize generator with optional configuration."""
        self.config = config or {}
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        self._template_engine = create_template_engine(template_dir)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    @property
    @abstractmethod
    def artifact_kind(self) -> str:
        """Return the kind of artifact produced (e.g., 'builder')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def file_name_for(self, type_spec: TypeSpec) -> str:
        """Return the file name of the artifact generated for type_spec."""
        pass

    @abstractmethod
    def emit(self, artifact: GeneratedArtifact, type_spec: TypeSpec) -> None:
        """Append every declaration for type_spec to artifact, in order."""
        pass

    def validate(self, type_spec: TypeSpec) -> List[str]:
        """
        Validate type_spec before any text is emitted.

        Raises on errors; returns a list of warnings.
        """
        type_spec.validate()
        warnings = []
        if not type_spec.fields:
            warnings.append(
                f"Type '{type_spec.type_name}' has no fields - will generate empty struct"
            )
        return warnings

    def generate(self, type_spec: TypeSpec, package_name: str) -> GeneratedArtifact:
        """
        Run the pipeline for one type.

        Args:
            type_spec: Type to generate code for
            package_name: Package declared at the top of the artifact

        Returns:
            The finalized artifact
        """
        self.validate(type_spec)

        artifact = GeneratedArtifact(
            self.file_name_for(type_spec), package_name, self.artifact_kind
        )
        self.emit(artifact, type_spec)
        artifact.finalize()

        logger.debug(
            "Generated %s artifact %s (%d units)",
            self.artifact_kind,
            artifact.file_name,
            len(artifact.units),
        )
        return artifact


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        artifacts: Optional[List[GeneratedArtifact]] = None,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            artifacts: Finalized artifacts, one per pipeline
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.artifacts = artifacts or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    def get(self, kind: str) -> Optional[GeneratedArtifact]:
        """Return the artifact of the given kind, if generated."""
        for artifact in self.artifacts:
            if artifact.kind == kind:
                return artifact
        return None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls()
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generators: Sequence[CodeGenerator], type_spec: TypeSpec, package_name: str
) -> GenerationResult:
    """
    Run several pipelines over one type with error handling.

    Validation errors are returned as a failed result; nothing is
    generated for any pipeline when one of them rejects the input.
    """
    try:
        warnings: List[str] = []
        for generator in generators:
            for warning in generator.validate(type_spec):
                if warning not in warnings:
                    warnings.append(warning)

        artifacts = [g.generate(type_spec, package_name) for g in generators]

    except GeneratorError as e:
        logger.error("Generation failed for %s: %s", type_spec.type_name, e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "type_name": type_spec.type_name,
        "package_name": package_name,
        "field_count": len(type_spec.fields),
        "fields": type_spec.field_names,
        "files": [a.file_name for a in artifacts],
    }
    if generators:
        metadata["language"] = generators[0].language_name

    return GenerationResult(artifacts, warnings, metadata)
