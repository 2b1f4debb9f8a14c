"""
Refraction - instance-bound reflection for Python objects.

Exposes the methods and properties of a live object as handles that can be
invoked, read and written without passing the instance again, while hiding
the private members of its ancestor classes.

Main Components:
- InstanceReflector: Lists and looks up the visible members of an instance
- MethodHandle: One method bound to one instance
- PropertyHandle: One property bound to one instance
- TypeInspector: Enumerates and accesses members across a class lineage

Usage:
    from refraction import InstanceReflector, MethodHandle

    reflector = InstanceReflector(account)
    for method in reflector.get_methods():
        print(method.name, method.visibility)

    MethodHandle(account, "__recalculate").invoke(2024)
"""

from .exceptions import (
    RefractionError,
    InvalidArgumentError,
    MemberNotFoundError,
    MemberNotVisibleError,
)

from .schemas import (
    MemberDescriptor,
    MemberSummary,
    ReflectionReport,
)

from .config import RefractionSettings, load_settings, get_settings
from .introspection import TypeInspector, default_inspector
from .members import RefractionMember, MethodHandle, PropertyHandle
from .reflector import InstanceReflector

__all__ = [
    # Reflection
    "InstanceReflector",
    "RefractionMember",
    "MethodHandle",
    "PropertyHandle",
    "TypeInspector",
    "default_inspector",

    # Schemas
    "MemberDescriptor",
    "MemberSummary",
    "ReflectionReport",

    # Configuration
    "RefractionSettings",
    "load_settings",
    "get_settings",

    # Errors
    "RefractionError",
    "InvalidArgumentError",
    "MemberNotFoundError",
    "MemberNotVisibleError",
]

__version__ = "0.1.0"
