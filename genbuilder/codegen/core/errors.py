"""
Exception hierarchy for code generation.

Validation errors (InvalidIdentifier, DuplicateField, SchemaError) are raised
before any text is emitted. SinkFailure comes from writing artifacts and is
fatal. FormatterFailure is recorded as a warning and never aborts a run.
"""

from typing import Optional


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class InvalidIdentifier(GeneratorError):
    """A type or field name cannot be used in generated code."""

    def __init__(self, name: str, reason: str, field: Optional[str] = None):
        self.name = name
        self.reason = reason
        self.field = field
        location = f" (field {field!r})" if field is not None and field != name else ""
        super().__init__(f"Invalid identifier {name!r}{location}: {reason}")


class DuplicateField(GeneratorError):
    """Two fields of one type collide in the generated code."""

    def __init__(self, name: str, other: Optional[str] = None):
        self.name = name
        self.other = other
        if other is None or other == name:
            message = f"Duplicate field {name!r}"
        else:
            message = f"Field {name!r} collides with field {other!r}"
        super().__init__(message)


class SchemaError(GeneratorError):
    """A schema document could not be loaded or has the wrong shape."""

    pass


class SinkFailure(GeneratorError):
    """Generated text could not be persisted."""

    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")


class FormatterFailure(GeneratorError):
    """The external formatter could not be run or reported an error."""

    pass
