"""
Go emission primitives.

Each method renders one syntactic unit from a template and appends it
to an artifact. Columns are aligned the way gofmt aligns them, so the
output is already formatted when no formatter is available.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from ...core.generator import GeneratedArtifact
from ...core.schema import FieldDescriptor
from ...core.templates import TemplateEngine
from .naming import setter_param_name


def _aligned(pairs: Sequence[Tuple[str, str]]) -> List[Dict[str, str]]:
    """Pad the first column of (name, value) pairs to a common width."""
    width = max((len(name) for name, _ in pairs), default=0)
    return [{"name": name.ljust(width), "type": value} for name, value in pairs]


class GoEmitter:
    """Appends Go declarations to an artifact."""

    def __init__(self, engine: TemplateEngine, add_comments: bool = True):
        self.engine = engine
        self.add_comments = add_comments

    def _append(
        self, artifact: GeneratedArtifact, template: str, context: Dict[str, Any]
    ) -> None:
        context.setdefault("comment", None)
        if not self.add_comments:
            context["comment"] = None
        artifact.append(self.engine.render_template(template, context))

    def emit_package(self, artifact: GeneratedArtifact) -> None:
        self._append(
            artifact,
            "package.go.j2",
            {
                "package_name": artifact.package_name,
                "generated_header": self.add_comments,
            },
        )

    def emit_imports(self, artifact: GeneratedArtifact, imports: List[str]) -> None:
        """Append an import declaration; nothing is emitted for no imports."""
        if imports:
            self._append(artifact, "imports.go.j2", {"imports": imports})

    def emit_struct(
        self,
        artifact: GeneratedArtifact,
        struct_name: str,
        members: Sequence[Tuple[str, str]],
        comment: Optional[str] = None,
    ) -> None:
        """
        Append a struct type declaration.

        Args:
            artifact: Artifact to append to
            struct_name: Name of the declared type
            members: (member name, type) pairs in declaration order
            comment: Doc comment text without comment markers
        """
        self._append(
            artifact,
            "struct.go.j2",
            {
                "struct_name": struct_name,
                "members": _aligned(members),
                "comment": comment,
            },
        )

    def emit_constructor(
        self,
        artifact: GeneratedArtifact,
        constructor: str,
        struct_name: str,
        comment: Optional[str] = None,
    ) -> None:
        self._append(
            artifact,
            "constructor.go.j2",
            {"constructor": constructor, "struct_name": struct_name, "comment": comment},
        )

    def emit_setter(
        self,
        artifact: GeneratedArtifact,
        receiver: str,
        struct_name: str,
        method: str,
        member: str,
        field: FieldDescriptor,
        comment: Optional[str] = None,
    ) -> None:
        """Append a chained setter assigning field to the public member."""
        self._append(
            artifact,
            "setter.go.j2",
            {
                "receiver": receiver,
                "struct_name": struct_name,
                "method": method,
                "field": member,
                "param": setter_param_name(field, receiver),
                "type_name": field.type_name,
                "comment": comment,
            },
        )

    def emit_getter(
        self,
        artifact: GeneratedArtifact,
        receiver: str,
        struct_name: str,
        method: str,
        field: FieldDescriptor,
        comment: Optional[str] = None,
    ) -> None:
        """Append a zero-argument getter returning the unexported member."""
        self._append(
            artifact,
            "getter.go.j2",
            {
                "receiver": receiver,
                "struct_name": struct_name,
                "method": method,
                "field": field.name,
                "type_name": field.type_name,
                "comment": comment,
            },
        )

    def emit_conversion(
        self,
        artifact: GeneratedArtifact,
        receiver: str,
        struct_name: str,
        method: str,
        target: str,
        copies: Sequence[Tuple[str, str]],
        comment: Optional[str] = None,
    ) -> None:
        """
        Append a method returning a new target populated from the receiver.

        Args:
            copies: (target member, source member) pairs in field order
        """
        assignments = [
            {"key": row["name"], "value": row["type"]}
            for row in _aligned(
                [(f"{dest}:", f"{receiver}.{src}") for dest, src in copies]
            )
        ]
        self._append(
            artifact,
            "convert.go.j2",
            {
                "receiver": receiver,
                "struct_name": struct_name,
                "method": method,
                "target": target,
                "assignments": assignments,
                "comment": comment,
            },
        )
