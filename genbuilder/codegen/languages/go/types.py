"""
Import resolution for Go field types.

Field types are emitted verbatim, so the only thing the generator needs
to know about them is which package qualifiers they use.
"""

import re
from typing import Dict, List, Mapping, Optional, Set, Tuple

from ...core.schema import TypeSpec

# Qualifier -> import path for the standard library packages most often
# found in struct fields
STD_IMPORT_PATHS: Dict[str, str] = {
    "big": "math/big",
    "bufio": "bufio",
    "bytes": "bytes",
    "context": "context",
    "driver": "database/sql/driver",
    "fs": "io/fs",
    "http": "net/http",
    "io": "io",
    "json": "encoding/json",
    "log": "log",
    "netip": "net/netip",
    "net": "net",
    "os": "os",
    "regexp": "regexp",
    "slog": "log/slog",
    "sql": "database/sql",
    "strings": "strings",
    "sync": "sync",
    "template": "text/template",
    "time": "time",
    "url": "net/url",
    "xml": "encoding/xml",
}

# Qualified identifier such as time.Time
_QUALIFIED = re.compile(r"(?<![\w.])([A-Za-z_]\w*)\.[A-Za-z_]\w*")


def type_qualifiers(type_name: str) -> List[str]:
    """
    Return the package qualifiers used by a Go type expression, in order.

    >>> type_qualifiers("map[string]*json.RawMessage")
    ['json']
    """
    seen = []
    for match in _QUALIFIED.finditer(type_name):
        qualifier = match.group(1)
        if qualifier not in seen:
            seen.append(qualifier)
    return seen


def resolve_imports(
    type_spec: TypeSpec, extra: Optional[Mapping[str, str]] = None
) -> Tuple[List[str], List[str]]:
    """
    Collect the import paths needed by the fields of type_spec.

    Args:
        type_spec: Type whose field types are scanned
        extra: Additional qualifier -> path mappings (e.g. from config)

    Returns:
        (sorted import paths, warnings for unknown qualifiers)
    """
    table = dict(STD_IMPORT_PATHS)
    if extra:
        table.update(extra)
    table.update(type_spec.imports)

    paths: Set[str] = set()
    warnings = []
    for f in type_spec.fields:
        for qualifier in type_qualifiers(f.type_name):
            path = table.get(qualifier)
            if path is None:
                warning = (
                    f"Unknown package '{qualifier}' in {type_spec.type_name}.{f.name} "
                    f"({f.type_name}); add it to 'imports'"
                )
                if warning not in warnings:
                    warnings.append(warning)
            else:
                paths.add(path)

    return sorted(paths), warnings
