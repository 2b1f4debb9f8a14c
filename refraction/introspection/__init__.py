"""Type-introspection facility used by reflectors and member handles."""

from .inspector import (
    TypeInspector,
    default_inspector,
    visibility_of,
    mangle,
    demangle,
)

__all__ = [
    "TypeInspector",
    "default_inspector",
    "visibility_of",
    "mangle",
    "demangle",
]
