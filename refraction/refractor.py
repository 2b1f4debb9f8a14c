"""
Refractor - shared base of everything bound to one object instance.

A refractor is like a reflection object, except that it belongs to a specific
instance instead of a class definition.
"""

from typing import Any, Optional

from refraction.introspection import TypeInspector, default_inspector
from refraction.utils import ensure_instance


class Refractor:
    """Holds the refracted instance and the inspector used to look at it."""

    def __init__(self, instance: Any, inspector: Optional[TypeInspector] = None):
        ensure_instance(instance, type(self).__name__)
        self._instance = instance
        self._inspector = inspector or default_inspector

    @property
    def instance(self) -> Any:
        """The refracted instance."""
        return self._instance

    @property
    def runtime_type(self) -> type:
        return type(self._instance)

    @property
    def inspector(self) -> TypeInspector:
        return self._inspector
