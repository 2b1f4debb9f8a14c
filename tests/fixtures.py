"""
Classes refracted by the test suite.

Base and Child each declare a private, a protected and a public method and
property, plus a method and property that Child overrides.
"""

import collections
import enum
import functools

BASE_METHOD_PRIVATE = "__base_private_method"
BASE_METHOD_PROTECTED = "_base_protected_method"
BASE_METHOD_PUBLIC = "base_public_method"

CHILD_METHOD_PRIVATE = "__child_private_method"
CHILD_METHOD_PROTECTED = "_child_protected_method"
CHILD_METHOD_PUBLIC = "child_public_method"

METHOD_EXTENDED = "extended_method"

BASE_PROPERTY_PRIVATE = "__base_private_property"
BASE_PROPERTY_PROTECTED = "_base_protected_property"
BASE_PROPERTY_PUBLIC = "base_public_property"

CHILD_PROPERTY_PRIVATE = "__child_private_property"
CHILD_PROPERTY_PROTECTED = "_child_protected_property"
CHILD_PROPERTY_PUBLIC = "child_public_property"

PROPERTY_EXTENDED = "extended_property"


class Base:
    __base_private_property: str
    _base_protected_property: str
    base_public_property: str
    extended_property: str

    def __init__(self):
        self.__base_private_property = "basePrivateProperty"
        self._base_protected_property = "baseProtectedProperty"
        self.base_public_property = "basePublicProperty"
        self.extended_property = "baseExtendedProperty"

    def __base_private_method(self, value):
        return value

    def _base_protected_method(self, value):
        return value

    def base_public_method(self, value):
        return value

    def extended_method(self, value):
        return value


class Child(Base):
    __child_private_property: str
    _child_protected_property: str
    child_public_property: str

    def __init__(self):
        super().__init__()
        self.__child_private_property = "childPrivateProperty"
        self._child_protected_property = "childProtectedProperty"
        self.child_public_property = "childPublicProperty"
        self.extended_property = "childExtendedProperty"

    def __child_private_method(self, value):
        return value

    def _child_protected_method(self, value):
        return value

    def child_public_method(self, value):
        return value

    def extended_method(self, value):
        return value


class GrandChild(Child):
    pass


class Shadow(Base):
    """Declares its own private method and property under the same names as Base's."""
    __base_private_property: str

    def __init__(self):
        super().__init__()
        self.__base_private_property = "shadowPrivateProperty"

    def __base_private_method(self, value):
        return ("shadow", value)


class Empty:
    pass


class Tools:
    ratio = 2

    def __init__(self):
        self._count = 0

    @staticmethod
    def double(value):
        return value * 2

    @classmethod
    def create(cls):
        return cls()

    @property
    def count(self):
        """Number of increments so far."""
        return self._count

    def increment(self, step=1):
        """Add step to the counter."""
        self._count += step
        return self._count

    def fail(self):
        raise ValueError("boom")


class Slotted:
    __slots__ = ("x", "__hidden")

    def __init__(self):
        self.x = 1
        self.__hidden = 2


class Cached:
    """Methods stored in the class as wrapper objects rather than plain functions."""

    class Options:
        pass

    def __init__(self):
        self.calls = 0

    @functools.lru_cache(maxsize=None)
    def compute(self, value):
        self.calls += 1
        return value * 10

    @functools.singledispatchmethod
    def render(self, value):
        return f"object:{value}"

    @render.register
    def _render_int(self, value: int):
        return f"int:{value}"

    def _scaled(self, value, factor):
        return value * factor

    triple = functools.partialmethod(_scaled, factor=3)


Point = collections.namedtuple("Point", "x y")


class Registry(dict):
    def register(self, key, value):
        self[key] = value
        return self


class Priority(enum.IntEnum):
    LOW = 1
    HIGH = 2

    def label(self):
        return self.name.lower()
