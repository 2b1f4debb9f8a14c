"""
Exceptions raised by the refraction package.

Every failure is terminal for the operation that raised it. Errors raised by
the member being invoked (or by Python's own attribute machinery) are never
wrapped in one of these.
"""


class RefractionError(Exception):
    """Base class for all refraction errors."""


class InvalidArgumentError(RefractionError, TypeError):
    """Raised when an argument has the wrong shape (non-object instance, non-string name)."""


class MemberNotFoundError(RefractionError, LookupError):
    """Raised when a member name is not declared anywhere in the instance's lineage."""


class MemberNotVisibleError(RefractionError, LookupError):
    """Raised when a member exists but is private to an ancestor class."""
