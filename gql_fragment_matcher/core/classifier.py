"""Classify schema types as abstract (union/interface) or not.

Classification runs the introspection document against the schema with
graphql-core, so the result reflects exactly what clients would see.
"""

from typing import Any, Callable

from graphql import GraphQLSchema, graphql

from .errors import SchemaIntrospectionError
from .federation import remove_federation
from .ir import SchemaTypeDescriptor, TypeKind

POSSIBLE_TYPES_QUERY = """
{
  __schema {
    types {
      kind
      name
      possibleTypes {
        name
      }
    }
  }
}
"""

SchemaTransform = Callable[[GraphQLSchema], GraphQLSchema]


class TypeClassifier:
    """Produces SchemaTypeDescriptors for every type in a schema.

    Example:
        classifier = TypeClassifier(federation_aware=True)
        descriptors = await classifier.classify(schema)
    """

    def __init__(
        self,
        federation_aware: bool = False,
        federation_transform: SchemaTransform = remove_federation,
    ):
        """Initialize the classifier.

        Args:
            federation_aware: Strip federation types before introspection
            federation_transform: Schema transform used when federation_aware is set
        """
        self.federation_aware = federation_aware
        self.federation_transform = federation_transform

    async def classify(self, schema: GraphQLSchema) -> list[SchemaTypeDescriptor]:
        """Introspect the schema and classify all of its types.

        Raises:
            SchemaIntrospectionError: If introspection returns no data
        """
        if self.federation_aware:
            schema = self.federation_transform(schema)

        result = await graphql(schema, POSSIBLE_TYPES_QUERY)

        if not result.data:
            errors = result.errors or []
            details = "; ".join(e.message for e in errors)
            message = "Couldn't introspect the schema"
            if details:
                message = f"{message}: {details}"
            raise SchemaIntrospectionError(message, errors)

        return classify_introspection(result.data)


def classify_introspection(data: dict[str, Any]) -> list[SchemaTypeDescriptor]:
    """Classify types from an introspection result's `data` payload.

    Args:
        data: Mapping holding `__schema.types`, as returned by introspection

    Raises:
        SchemaIntrospectionError: If the payload has no `__schema.types`
    """
    try:
        types = data["__schema"]["types"]
    except (KeyError, TypeError) as e:
        raise SchemaIntrospectionError("Introspection result has no __schema.types") from e

    descriptors = []
    for entry in types:
        kind = TypeKind.from_introspection(entry["kind"])
        possible = entry.get("possibleTypes") or []
        descriptors.append(
            SchemaTypeDescriptor(
                kind=kind,
                name=entry["name"],
                possible_types=tuple(p["name"] for p in possible) if kind != TypeKind.OTHER else (),
                introspection_kind=entry["kind"],
            )
        )
    return descriptors
