"""
Naming utilities for safe code generation.

Derives public/private identifier casing from a base name, plus the
companion names (builder type, constructor, receiver) that every
generator shares. Only the first character of a name is ever changed.
"""

from .errors import InvalidIdentifier

BUILDER_SUFFIX = "Builder"
CONSTRUCTOR_PREFIX = "New"
SETTER_PREFIX = "Set"


def _require_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise InvalidIdentifier(str(name or ""), "name cannot be empty")


def _case_first(name: str, upper: bool) -> str:
    first = name[0].upper() if upper else name[0].lower()
    # Characters like "ß" expand to more than one character when cased
    if len(first) != 1:
        raise InvalidIdentifier(
            name, f"first character {name[0]!r} cannot be case-transformed"
        )
    return first + name[1:]


def to_public(name: str) -> str:
    """
    Return name with its first character upper-cased.

    >>> to_public("integer32")
    'Integer32'

    Raises:
        InvalidIdentifier: If name is empty
    """
    _require_name(name)
    return _case_first(name, upper=True)


def to_private(name: str) -> str:
    """
    Return name with its first character lower-cased.

    Raises:
        InvalidIdentifier: If name is empty
    """
    _require_name(name)
    return _case_first(name, upper=False)


def is_identifier(name: str) -> bool:
    """Check that name is a non-empty identifier (letters, digits, underscore)."""
    return isinstance(name, str) and name.isidentifier()


def receiver_name(type_name: str) -> str:
    """Receiver variable used by all methods of type_name."""
    return to_private(type_name)[0]


def builder_type_name(type_name: str) -> str:
    """
    Name of the builder companion for type_name.

    >>> builder_type_name("jason")
    'JasonBuilder'
    """
    return to_public(type_name) + BUILDER_SUFFIX


def constructor_name(type_name: str) -> str:
    """Name of the zero-argument constructor for type_name."""
    return CONSTRUCTOR_PREFIX + to_public(type_name)


def setter_name(field_name: str) -> str:
    """Name of the builder setter for field_name."""
    return SETTER_PREFIX + to_public(field_name)


def getter_name(field_name: str) -> str:
    """Name of the immutable getter for field_name (no Get prefix)."""
    return to_public(field_name)
