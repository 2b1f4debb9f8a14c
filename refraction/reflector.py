"""
Instance reflector - the visible members of one object instance.

The reflector works on *possible* and *actual* members:

- Possible members: every private, protected and public member declared
  anywhere in the instance's lineage, as reported by the TypeInspector.
- Actual members: the possible members minus the private members of every
  ancestor. That is, the runtime type's own members plus the protected and
  public members it inherits.

Only actual members are returned, wrapped in MethodHandle/PropertyHandle
objects bound to the instance.
"""

import logging
from typing import Any, Dict, List, Optional

from refraction.config import RefractionSettings, get_settings
from refraction.exceptions import MemberNotFoundError
from refraction.introspection import TypeInspector
from refraction.members import MethodHandle, PropertyHandle, RefractionMember
from refraction.refractor import Refractor
from refraction.schemas import MemberDescriptor, MemberKind, ReflectionReport
from refraction.utils import ensure_name

logger = logging.getLogger(__name__)


class InstanceReflector(Refractor):
    """
    Reflection of a specific object instance.

    Mostly visibility safe: private members of ancestor classes are never
    named or returned, while the runtime type's own private members are.

    Example:
        reflector = InstanceReflector(Child())
        reflector.has_method("base_public_method")   # True
        reflector.get_property("__child_private_property").get()
    """

    HANDLE_TYPES = {
        "method": MethodHandle,
        "property": PropertyHandle,
    }

    def __init__(
        self,
        instance: Any,
        settings: Optional[RefractionSettings] = None,
        inspector: Optional[TypeInspector] = None
    ):
        """
        Initialize the reflector.

        Args:
            instance: The instance to refract
            settings: Lookup settings (default: settings loaded from the environment)
            inspector: Optional TypeInspector (default: shared inspector)

        Raises:
            InvalidArgumentError: If instance is not an object
        """
        super().__init__(instance, inspector)
        self.settings = settings if settings is not None else get_settings()
        self._cache: Dict[str, List[RefractionMember]] = {}

    @property
    def name(self) -> str:
        """Qualified name of the runtime type."""
        return self.runtime_type.__qualname__

    def lineage(self) -> List[str]:
        return [klass.__qualname__ for klass in self._inspector.lineage(self.runtime_type)]

    # ------------------------------------------------------------------
    # Methods
    # ------------------------------------------------------------------

    def get_methods(self) -> List[MethodHandle]:
        """
        Return the methods of the instance.

        The runtime type's private, protected and public methods, plus the
        protected and public methods of every ancestor.
        """
        return self._refractions("method")

    def get_method(self, name: str) -> MethodHandle:
        """
        Return the method called `name` (case-sensitive).

        Raises:
            InvalidArgumentError: If name is not a string
            MemberNotFoundError: If no visible method has that name
        """
        ensure_name(name, "InstanceReflector.get_method")

        for method in self.get_methods():
            if method.name == name:
                return method

        raise MemberNotFoundError(
            f"InstanceReflector.get_method() expects method {name}() to exist "
            f"on {self.name}"
        )

    def has_method(self, name: str) -> bool:
        """
        Return True if a visible method called `name` exists.

        Case-insensitive unless settings.method_names_case_sensitive is set.

        Raises:
            InvalidArgumentError: If name is not a string
        """
        ensure_name(name, "InstanceReflector.has_method")
        return self._contains(
            self.get_methods(), name, self.settings.method_names_case_sensitive
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def get_properties(self) -> List[PropertyHandle]:
        """
        Return the properties of the instance.

        The runtime type's private, protected and public properties, plus the
        protected and public properties of every ancestor.
        """
        return self._refractions("property")

    def get_property(self, name: str) -> PropertyHandle:
        """
        Return the property called `name` (case-sensitive).

        Raises:
            InvalidArgumentError: If name is not a string
            MemberNotFoundError: If no visible property has that name
        """
        ensure_name(name, "InstanceReflector.get_property")

        for prop in self.get_properties():
            if prop.name == name:
                return prop

        raise MemberNotFoundError(
            f"InstanceReflector.get_property() expects property '{name}' to exist "
            f"on {self.name}"
        )

    def has_property(self, name: str) -> bool:
        """
        Return True if a visible property called `name` exists.

        Case-sensitive unless settings.property_names_case_sensitive is unset.

        Raises:
            InvalidArgumentError: If name is not a string
        """
        ensure_name(name, "InstanceReflector.has_property")
        return self._contains(
            self.get_properties(), name, self.settings.property_names_case_sensitive
        )

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def describe(self) -> ReflectionReport:
        """Summarise the visible members of the instance."""
        return ReflectionReport(
            type_name=self.name,
            module=self.runtime_type.__module__,
            lineage=self.lineage(),
            methods=[method.summary() for method in self.get_methods()],
            properties=[prop.summary() for prop in self.get_properties()],
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _contains(handles: List[RefractionMember], name: str, case_sensitive: bool) -> bool:
        if case_sensitive:
            return any(handle.name == name for handle in handles)

        name = name.lower()
        return any(handle.name.lower() == name for handle in handles)

    def _actual_members(self, kind: MemberKind) -> List[MemberDescriptor]:
        """
        Prune the possible members down to the actual members.

        Walks from the runtime type up through every parent, removing each
        parent's private members. Matching is on (name, declaring type), so a
        private member that shadows an ancestor's private member of the same
        name survives.
        """
        runtime_type = self.runtime_type
        members = self._inspector.members(runtime_type, kind, self._instance)

        parent = self._inspector.parent_of(runtime_type, within=runtime_type)
        while parent is not None:
            privates = {
                member.key
                for member in self._inspector.declared_members(parent, kind, self._instance)
                if member.visibility == "private"
            }
            remaining = [member for member in members if member.key not in privates]

            if len(remaining) < len(members):
                logger.debug(
                    f"Pruned {len(members) - len(remaining)} private {kind} members "
                    f"of {parent.__qualname__} from {runtime_type.__qualname__}"
                )

            members = remaining
            parent = self._inspector.parent_of(parent, within=runtime_type)

        return members

    def _refractions(self, kind: MemberKind) -> List[RefractionMember]:
        if self.settings.cache_members and kind in self._cache:
            return list(self._cache[kind])

        handle_type = self.HANDLE_TYPES[kind]
        handles = [
            handle_type(self._instance, member.name, self._inspector)
            for member in self._actual_members(kind)
        ]

        if self.settings.cache_members:
            self._cache[kind] = handles

        return list(handles)
