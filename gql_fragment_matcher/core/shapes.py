"""Build the data shape consumed by Apollo Client.

Apollo Client 2 reads an introspection-like structure through its
IntrospectionFragmentMatcher, while Apollo Client 3 expects a compact
`possibleTypes` map. Each shape knows its own TypeScript type name and
generic interface declaration so the emitter never branches on version.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Union

from .config import SUPPORTED_CONSUMER_VERSIONS
from .errors import InvalidConfigCombination
from .ir import SchemaTypeDescriptor


@dataclass(frozen=True)
class VersionTwoShape:
    """Introspection-like shape filtered to abstract types (Apollo Client 2)."""
    types: list[SchemaTypeDescriptor] = field(default_factory=list)

    typename = "IntrospectionResultData"
    interface_body = (
        "__schema: {\n"
        "  types: {\n"
        "    kind: string;\n"
        "    name: string;\n"
        "    possibleTypes: {\n"
        "      name: string;\n"
        "    }[];\n"
        "  }[];\n"
        "};"
    )

    def to_data(self) -> dict[str, Any]:
        return {
            "__schema": {
                "types": [
                    {
                        "kind": t.introspection_kind,
                        "name": t.name,
                        "possibleTypes": [{"name": name} for name in t.possible_types],
                    }
                    for t in self.types
                ]
            }
        }


@dataclass(frozen=True)
class VersionThreeShape:
    """Compact abstract-type to concrete-types map (Apollo Client 3)."""
    possible_types: dict[str, list[str]] = field(default_factory=dict)

    typename = "PossibleTypesResultData"
    interface_body = (
        "possibleTypes: {\n"
        "  [key: string]: string[];\n"
        "};"
    )

    def to_data(self) -> dict[str, Any]:
        return {
            "possibleTypes": {
                name: list(concrete) for name, concrete in self.possible_types.items()
            }
        }


Shape = Union[VersionTwoShape, VersionThreeShape]


def abstract_types(descriptors: Iterable[SchemaTypeDescriptor]) -> list[SchemaTypeDescriptor]:
    """Return unions and interfaces, keeping introspection order."""
    return [d for d in descriptors if d.is_abstract]


def abstract_type_map(descriptors: Iterable[SchemaTypeDescriptor]) -> dict[str, list[str]]:
    """Map every abstract type name to its concrete type names.

    Abstract types without implementations map to an empty list.
    """
    return {d.name: list(d.possible_types) for d in abstract_types(descriptors)}


def build_shape(
    descriptors: Iterable[SchemaTypeDescriptor],
    consumer_major_version: int = 3,
) -> Shape:
    """Build the shape for the given Apollo Client major version.

    Raises:
        InvalidConfigCombination: If the version is neither 2 nor 3
    """
    if consumer_major_version == 2:
        return VersionTwoShape(types=abstract_types(descriptors))
    if consumer_major_version == 3:
        return VersionThreeShape(possible_types=abstract_type_map(descriptors))
    supported = ", ".join(str(v) for v in SUPPORTED_CONSUMER_VERSIONS)
    raise InvalidConfigCombination(
        f"Unsupported apolloClientVersion {consumer_major_version!r}, expected one of {supported}"
    )
