"""Intermediate Representation (IR) for fragment matcher generation.

This module defines the dataclasses that carry classified schema types
between the classifier, the shape builder and the emitter.
"""

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(str, Enum):
    """Classification of a schema type for fragment matching."""

    UNION = "UNION"
    INTERFACE = "INTERFACE"
    OTHER = "OTHER"

    @classmethod
    def from_introspection(cls, kind: str) -> "TypeKind":
        """Map an introspection `__TypeKind` value to a TypeKind."""
        if kind == "UNION":
            return cls.UNION
        if kind == "INTERFACE":
            return cls.INTERFACE
        return cls.OTHER


class OutputEncoding(str, Enum):
    """Textual encoding of the generated artifact."""

    DATA = "data"
    SCRIPT = "script"
    TYPED_SOURCE = "typedSource"


@dataclass(frozen=True)
class SchemaTypeDescriptor:
    """Represents one schema type as seen through introspection."""
    kind: TypeKind
    name: str
    possible_types: tuple[str, ...] = ()
    # Raw introspection kind, e.g. "OBJECT" for TypeKind.OTHER
    introspection_kind: str = field(default="", compare=False)

    def __post_init__(self):
        if not self.introspection_kind:
            object.__setattr__(self, "introspection_kind", self.kind.value)

    @property
    def is_abstract(self) -> bool:
        """Return True for unions and interfaces."""
        return self.kind in (TypeKind.UNION, TypeKind.INTERFACE)
