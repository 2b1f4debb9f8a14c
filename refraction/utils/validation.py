"""
Argument validation shared by the reflector and the member handles.
"""

import inspect
from typing import Any

from refraction.exceptions import InvalidArgumentError


# Values that are data rather than object instances
NON_OBJECT_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    list,
    tuple,
    dict,
    set,
    frozenset,
)


def is_object_instance(value: Any) -> bool:
    """
    Check whether a value is an object instance that can be refracted.

    Scalars, built-in containers, classes and modules are not. Instances of
    classes derived from them (namedtuples, dict subclasses, IntEnum members)
    are.
    """
    if type(value) in NON_OBJECT_TYPES:
        return False
    if inspect.isclass(value) or inspect.ismodule(value):
        return False
    return True


def ensure_instance(value: Any, caller: str, position: str = "one") -> Any:
    """
    Return value unchanged if it is an object instance.

    Raises:
        InvalidArgumentError: If value is not an object instance
    """
    if not is_object_instance(value):
        raise InvalidArgumentError(
            f"{caller}() expects parameter {position}, instance, to be an object, "
            f"got {type(value).__name__}"
        )
    return value


def ensure_name(name: Any, caller: str, position: str = "one") -> str:
    """
    Return name unchanged if it is a string.

    Raises:
        InvalidArgumentError: If name is not a string
    """
    if not isinstance(name, str):
        raise InvalidArgumentError(
            f"{caller}() expects parameter {position}, name, to be a string, "
            f"got {type(name).__name__}"
        )
    return name
