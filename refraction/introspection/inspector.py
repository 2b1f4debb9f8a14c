"""
Type inspector - the type-introspection facility behind refraction.

Reads member declarations straight from class dictionaries and the instance
__dict__, and classifies visibility from Python's naming conventions:

- Private:   __name, stored name-mangled as _Class__name
- Protected: _name
- Public:    name, and dunders such as __init__

The implicit root class `object` is never part of a lineage, so an empty
class declares no members at all.
"""

import inspect
import logging
from functools import partialmethod, singledispatchmethod
from typing import Any, Dict, List, Optional, Sequence

from refraction.schemas import MemberDescriptor, MemberKind, Visibility

logger = logging.getLogger(__name__)

# Interpreter bookkeeping that lives in class dictionaries but is never a member
IGNORED_NAMES = frozenset({
    "__annotate__",
    "__annotate_func__",
    "__annotations__",
    "__annotations_cache__",
    "__classcell__",
    "__classdictcell__",
    "__dict__",
    "__doc__",
    "__firstlineno__",
    "__module__",
    "__qualname__",
    "__static_attributes__",
    "__weakref__",
})


def is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def is_private_name(name: str) -> bool:
    """True for names Python would mangle inside a class body."""
    return name.startswith("__") and not name.endswith("__")


def visibility_of(name: str) -> Visibility:
    """Visibility of a source-level member name."""
    if is_private_name(name):
        return "private"
    if name.startswith("_") and not is_dunder(name):
        return "protected"
    return "public"


def mangle(cls: type, name: str) -> str:
    """
    Storage key of `name` when declared in `cls`.

    Only private names are rewritten; a class whose name is all underscores
    does not mangle.
    """
    if not is_private_name(name):
        return name
    stripped = cls.__name__.lstrip("_")
    if not stripped:
        return name
    return f"_{stripped}{name}"


def demangle(cls: type, key: str) -> Optional[str]:
    """
    Recover the private name behind a storage key mangled for `cls`.

    Returns:
        The private name (e.g. '__secret'), or None if key is not mangled for cls
    """
    stripped = cls.__name__.lstrip("_")
    if not stripped:
        return None
    prefix = f"_{stripped}"
    if key.startswith(prefix) and is_private_name(key[len(prefix):]):
        return key[len(prefix):]
    return None


# Method wrappers recognised by type; partialmethod and singledispatchmethod are not callable
METHOD_WRAPPER_TYPES = (staticmethod, classmethod, partialmethod, singledispatchmethod)


def _is_method_value(value: Any) -> bool:
    """
    Functions, builtin method descriptors and callable wrappers such as
    functools.lru_cache are methods; a nested class is not.
    """
    if isinstance(value, METHOD_WRAPPER_TYPES):
        return True
    if inspect.isclass(value):
        return False
    return callable(value)


def _is_property_value(value: Any) -> bool:
    # property objects, slot descriptors, nested classes and plain data
    return not _is_method_value(value)


def _annotation_names(cls: type) -> List[str]:
    try:
        annotations = inspect.get_annotations(cls)
    except NameError as e:
        # Unresolvable forward references; the annotated names stay undeclared
        logger.debug(f"Skipping annotations of {cls.__qualname__}: {e}")
        return []
    return [key for key in annotations if isinstance(key, str)]


def _instance_keys(instance: Any) -> List[str]:
    try:
        namespace = vars(instance)
    except TypeError:
        # No __dict__ (e.g. a __slots__-only class)
        return []
    return [key for key in namespace if isinstance(key, str) and not is_dunder(key)]


class TypeInspector:
    """
    Enumerate, resolve and access the members of a class and its ancestors.

    Stateless; one shared instance (`default_inspector`) serves every
    reflector and handle unless another one is injected.
    """

    def lineage(self, cls: type) -> List[type]:
        """The class and its ancestors in method resolution order, without `object`."""
        return [klass for klass in cls.__mro__ if klass is not object]

    def parent_of(self, cls: type, within: Optional[type] = None) -> Optional[type]:
        """
        Next class after `cls` in the MRO of `within` (default: `cls` itself).

        Returns:
            The parent class, or None once the root has been reached
        """
        chain = self.lineage(within if within is not None else cls)
        if cls not in chain:
            return None
        index = chain.index(cls)
        if index + 1 < len(chain):
            return chain[index + 1]
        return None

    def owner_of(self, runtime_type: type, key: str) -> type:
        """
        Class an instance-dictionary entry belongs to.

        The class whose mangling prefix the key carries, else the nearest class
        declaring the key, else the runtime type itself.
        """
        chain = self.lineage(runtime_type)
        for klass in chain:
            if demangle(klass, key) is not None:
                return klass
        for klass in chain:
            if key in vars(klass) or key in _annotation_names(klass):
                return klass
        return runtime_type

    def describe(self, cls: type, key: str, kind: MemberKind) -> MemberDescriptor:
        """Build the descriptor of the member stored under `key` in `cls`."""
        name = demangle(cls, key) or key
        return MemberDescriptor(
            name=name,
            attribute=key,
            kind=kind,
            visibility=visibility_of(name),
            declaring_type=cls,
        )

    def declared_members(
        self,
        cls: type,
        kind: MemberKind,
        instance: Any = None
    ) -> List[MemberDescriptor]:
        """
        Members declared directly by `cls`.

        Args:
            cls: Declaring class
            kind: "method" or "property"
            instance: Optional instance whose __dict__ entries are attributed
                      to the classes of its lineage

        Returns:
            Descriptors in declaration order
        """
        found: Dict[str, MemberDescriptor] = {}
        namespace = vars(cls)

        for key, value in namespace.items():
            if key in IGNORED_NAMES:
                continue
            if kind == "method" and _is_method_value(value):
                found[key] = self.describe(cls, key, kind)
            elif kind == "property" and not is_dunder(key) and _is_property_value(value):
                found[key] = self.describe(cls, key, kind)

        if kind == "property":
            for key in _annotation_names(cls):
                if key in found or key in namespace or is_dunder(key):
                    continue
                found[key] = self.describe(cls, key, kind)

            if instance is not None:
                runtime_type = type(instance)
                for key in _instance_keys(instance):
                    if key in found:
                        continue
                    if self.owner_of(runtime_type, key) is cls:
                        found[key] = self.describe(cls, key, kind)

        return list(found.values())

    def members(
        self,
        cls: type,
        kind: MemberKind,
        instance: Any = None,
        visibility: Optional[Visibility] = None
    ) -> List[MemberDescriptor]:
        """
        Every member declared anywhere in the lineage of `cls`.

        A member overridden by a more derived class is listed once, for the
        overriding class. Private members of every ancestor are included.

        Args:
            cls: Class whose lineage is enumerated
            kind: "method" or "property"
            instance: Optional instance contributing its __dict__ entries
            visibility: Only return members of this visibility

        Returns:
            Descriptors, most derived class first
        """
        seen = set()
        possible = []

        for klass in self.lineage(cls):
            for member in self.declared_members(klass, kind, instance):
                if member.attribute in seen:
                    continue
                seen.add(member.attribute)
                possible.append(member)

        if visibility is not None:
            possible = [member for member in possible if member.visibility == visibility]

        logger.debug(f"Found {len(possible)} {kind} members on {cls.__qualname__}")

        return possible

    def resolve_member(
        self,
        cls: type,
        name: str,
        kind: MemberKind,
        instance: Any = None
    ) -> Optional[MemberDescriptor]:
        """
        First declaration of `name` along the lineage of `cls`.

        A private name is looked up under each class's own mangled key, then
        as written, for keys Python never mangled (set with setattr() or from
        outside a class body). A mangled spelling (e.g. '_Base__secret')
        resolves to the private member stored under it.

        Returns:
            MemberDescriptor, or None if no class in the lineage declares name
        """
        for klass in self.lineage(cls):
            declared = {
                member.attribute: member
                for member in self.declared_members(klass, kind, instance)
            }
            for attribute in (mangle(klass, name), name):
                if attribute in declared:
                    return declared[attribute]
        return None

    # ------------------------------------------------------------------
    # Access
    #
    # Members are reached through their storage attribute, which is what
    # lets a handle use a private member without touching its declaration.
    # ------------------------------------------------------------------

    def bind_member(self, instance: Any, member: MemberDescriptor) -> Any:
        """The member looked up on the instance (a bound method for methods)."""
        return getattr(instance, member.attribute)

    def invoke_member(
        self,
        instance: Any,
        member: MemberDescriptor,
        args: Sequence[Any] = (),
        kwargs: Optional[Dict[str, Any]] = None
    ) -> Any:
        return self.bind_member(instance, member)(*args, **(kwargs or {}))

    def get_member(self, instance: Any, member: MemberDescriptor) -> Any:
        return getattr(instance, member.attribute)

    def set_member(self, instance: Any, member: MemberDescriptor, value: Any) -> None:
        setattr(instance, member.attribute, value)


default_inspector = TypeInspector()
