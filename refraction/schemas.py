"""
Pydantic schemas for the refraction package.

Architecture:
- MemberDescriptor: One declared member as reported by the TypeInspector
- MemberSummary: String-only view of a member, safe to serialise
- ReflectionReport: Everything an InstanceReflector can see on one instance
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Visibility = Literal["private", "protected", "public"]
MemberKind = Literal["method", "property"]


# ============================================================================
# INTROSPECTION SCHEMAS
# ============================================================================

class MemberDescriptor(BaseModel):
    """
    A member declared by one class in an instance's lineage.

    Two descriptors are the same member when they share a name and a
    declaring type; `attribute` is where Python actually stores it.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Source-level member name, e.g. '__secret'")
    attribute: str = Field(description="Storage key used for access, e.g. '_Base__secret'")
    kind: MemberKind = Field(description="Whether this is a method or a property")
    visibility: Visibility = Field(description="Visibility derived from the member name")
    declaring_type: type = Field(description="Class that declares the member")

    @property
    def key(self):
        """The (name, declaring type) pair used when pruning inherited private members."""
        return (self.name, self.declaring_type)

    def __repr__(self):
        return (
            f"MemberDescriptor({self.declaring_type.__qualname__}.{self.name}, "
            f"{self.kind}, {self.visibility})"
        )


# ============================================================================
# REPORT SCHEMAS
# ============================================================================

class MemberSummary(BaseModel):
    """Serialisable summary of one visible member."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "extended_method",
                "kind": "method",
                "visibility": "public",
                "declared_in": "Child",
                "signature": "(value)"
            }
        }
    )

    name: str = Field(description="Member name")
    kind: MemberKind = Field(description="method or property")
    visibility: Visibility = Field(description="private, protected or public")
    declared_in: str = Field(description="Qualified name of the declaring class")
    signature: Optional[str] = Field(None, description="Call signature (methods only)")


class ReflectionReport(BaseModel):
    """
    Visible members of one instance.

    Produced by InstanceReflector.describe() and printed by `refraction inspect --json`.
    """
    type_name: str = Field(description="Qualified name of the runtime type")
    module: str = Field(description="Module that defines the runtime type")
    lineage: List[str] = Field(default_factory=list, description="Runtime type and its ancestors, most derived first")
    methods: List[MemberSummary] = Field(default_factory=list, description="Visible methods")
    properties: List[MemberSummary] = Field(default_factory=list, description="Visible properties")

    @property
    def total_members(self) -> int:
        return len(self.methods) + len(self.properties)
