"""
Member handles - one method or property bound to one object instance.

Unlike a plain reflection object, a handle does not need the instance passed
to every call: it is resolved, visibility-checked and bound once, on
construction.

A handle can be built directly or through InstanceReflector; either way the
same rule applies. A private member is only reachable from an instance whose
runtime type declares it. Private members of ancestors are not visible.
"""

import inspect
import logging
from typing import Any, Dict, Optional, Sequence

from refraction.exceptions import (
    InvalidArgumentError,
    MemberNotFoundError,
    MemberNotVisibleError,
)
from refraction.introspection import TypeInspector
from refraction.refractor import Refractor
from refraction.schemas import MemberDescriptor, MemberKind, MemberSummary, Visibility
from refraction.utils import ensure_name

logger = logging.getLogger(__name__)


class RefractionMember(Refractor):
    """Base class for MethodHandle and PropertyHandle."""

    kind: MemberKind
    # Member as named in error messages
    label: str

    def __init__(self, instance: Any, name: str, inspector: Optional[TypeInspector] = None):
        """
        Resolve and bind a member.

        Args:
            instance: The member's instance
            name: The member's name (private names as written in the class
                  body, e.g. '__secret')
            inspector: Optional TypeInspector (default: shared inspector)

        Raises:
            InvalidArgumentError: If instance is not an object or name is not a string
            MemberNotFoundError: If no class in the instance's lineage declares name
            MemberNotVisibleError: If name is private to an ancestor class
        """
        super().__init__(instance, inspector)
        ensure_name(name, type(self).__name__, position="two")

        runtime_type = self.runtime_type
        member = self._inspector.resolve_member(runtime_type, name, self.kind, instance)

        if member is None:
            raise MemberNotFoundError(
                f"{self.label.format(name=name)} must be defined in class {runtime_type.__qualname__}"
            )

        if member.visibility == "private" and member.declaring_type is not runtime_type:
            raise MemberNotVisibleError(
                f"{self.label.format(name=name)} is defined in {member.declaring_type.__qualname__} "
                f"but not visible to {runtime_type.__qualname__}"
            )

        self._member = member
        logger.debug(f"Bound {self.kind} {member.attribute} to {runtime_type.__qualname__} instance")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def descriptor(self) -> MemberDescriptor:
        return self._member

    @property
    def name(self) -> str:
        return self._member.name

    @property
    def attribute(self) -> str:
        """Storage key the member is reached through."""
        return self._member.attribute

    @property
    def declaring_type(self) -> type:
        return self._member.declaring_type

    @property
    def visibility(self) -> Visibility:
        return self._member.visibility

    @property
    def is_private(self) -> bool:
        return self._member.visibility == "private"

    @property
    def is_protected(self) -> bool:
        return self._member.visibility == "protected"

    @property
    def is_public(self) -> bool:
        return self._member.visibility == "public"

    def _declared_value(self) -> Any:
        return vars(self._member.declaring_type).get(self._member.attribute)

    def summary(self) -> MemberSummary:
        return MemberSummary(
            name=self.name,
            kind=self.kind,
            visibility=self.visibility,
            declared_in=self.declaring_type.__qualname__,
        )

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._instance is other._instance and self._member == other._member

    def __hash__(self):
        return hash((id(self._instance), self._member))

    def __repr__(self):
        return f"<{type(self).__name__} {self.declaring_type.__qualname__}.{self.name}>"


class MethodHandle(RefractionMember):
    """
    A method of a specific instance.

    Example:
        handle = MethodHandle(account, "__recalculate")
        handle.invoke(2024)
    """

    kind = "method"
    label = "Method {name}()"

    def invoke(self, *args: Any, **kwargs: Any) -> Any:
        """Call the method with a variable argument list."""
        return self._inspector.invoke_member(self._instance, self._member, args, kwargs)

    def invoke_args(self, args: Sequence[Any], kwargs: Optional[Dict[str, Any]] = None) -> Any:
        """
        Call the method with an argument list.

        Args:
            args: Positional arguments
            kwargs: Optional keyword arguments

        Raises:
            InvalidArgumentError: If args is not a list or tuple
        """
        if not isinstance(args, (list, tuple)):
            raise InvalidArgumentError(
                f"MethodHandle.invoke_args() expects parameter one, args, to be a list, "
                f"got {type(args).__name__}"
            )
        return self._inspector.invoke_member(self._instance, self._member, args, kwargs)

    def as_closure(self):
        """Return the method as a callable already bound to the instance."""
        return self._inspector.bind_member(self._instance, self._member)

    def signature(self) -> inspect.Signature:
        return inspect.signature(self.as_closure())

    @property
    def is_static(self) -> bool:
        return isinstance(self._declared_value(), staticmethod)

    @property
    def is_classmethod(self) -> bool:
        return isinstance(self._declared_value(), classmethod)

    @property
    def doc(self) -> Optional[str]:
        return inspect.getdoc(self.as_closure())

    def summary(self) -> MemberSummary:
        try:
            signature = str(self.signature())
        except (TypeError, ValueError):
            # Some callables (C extensions) expose no signature
            signature = None
        return super().summary().model_copy(update={"signature": signature})


class PropertyHandle(RefractionMember):
    """
    A property of a specific instance.

    Covers instance attributes, class attributes, annotated fields, slots and
    `property` objects.
    """

    kind = "property"
    label = "Property '{name}'"

    def get(self) -> Any:
        """Return the property's current value."""
        return self._inspector.get_member(self._instance, self._member)

    def set(self, value: Any) -> None:
        """Set the property's value on the instance."""
        self._inspector.set_member(self._instance, self._member, value)

    @property
    def doc(self) -> Optional[str]:
        declared = self._declared_value()
        if isinstance(declared, property):
            return inspect.getdoc(declared)
        return None
