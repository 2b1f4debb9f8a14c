"""
Utility functions for refraction.
"""

from .validation import (
    is_object_instance,
    ensure_instance,
    ensure_name
)

__all__ = [
    'is_object_instance',
    'ensure_instance',
    'ensure_name'
]
