"""Strip Apollo Federation additions from a subgraph schema.

Federation subgraphs carry synthetic types (`_Service`, `_Entity`, `_Any`,
...), root fields (`_service`, `_entities`) and directive definitions that
are never part of the client-facing API. Left in, the `_Entity` union would
be reported as an abstract type.
"""

from graphql import (
    DirectiveDefinitionNode,
    FieldDefinitionNode,
    GraphQLSchema,
    InputValueDefinitionNode,
    ListTypeNode,
    NonNullTypeNode,
    OperationTypeDefinitionNode,
    REMOVE,
    TypeDefinitionNode,
    TypeNode,
    Visitor,
    build_ast_schema,
    parse,
    print_schema,
    visit,
)

FEDERATION_TYPES = frozenset(
    {
        "_Service",
        "_Entity",
        "_Any",
        "_FieldSet",
        "FieldSet",
        "link__Import",
        "link__Purpose",
    }
)

FEDERATION_DIRECTIVES = frozenset(
    {
        "key",
        "extends",
        "external",
        "requires",
        "provides",
        "shareable",
        "inaccessible",
        "override",
        "tag",
        "link",
        "composeDirective",
        "interfaceObject",
        "authenticated",
        "requiresScopes",
        "policy",
    }
)

# Namespaced names produced by `@link(import: ...)` renames
FEDERATION_PREFIXES = ("federation__", "link__")


def is_federation_type(name: str) -> bool:
    """Check if a type name belongs to the federation spec."""
    return name in FEDERATION_TYPES or name.startswith(FEDERATION_PREFIXES)


def is_federation_directive(name: str) -> bool:
    """Check if a directive name belongs to the federation spec."""
    return name in FEDERATION_DIRECTIVES or name.startswith(FEDERATION_PREFIXES)


def _named_type(type_node: TypeNode) -> str:
    """Unwrap list and non-null wrappers down to the named type."""
    while isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
        type_node = type_node.type
    return type_node.name.value


class _FederationStripper(Visitor):
    """AST visitor removing federation definitions and their references."""

    def _remove_if_federation_type(self, node, *_args):
        if node.name and is_federation_type(node.name.value):
            return REMOVE
        return None

    enter_object_type_definition = _remove_if_federation_type
    enter_union_type_definition = _remove_if_federation_type
    enter_scalar_type_definition = _remove_if_federation_type
    enter_enum_type_definition = _remove_if_federation_type
    enter_input_object_type_definition = _remove_if_federation_type
    enter_interface_type_definition = _remove_if_federation_type

    def enter_directive_definition(self, node: DirectiveDefinitionNode, *_args):
        if is_federation_directive(node.name.value):
            return REMOVE
        return None

    def enter_field_definition(self, node: FieldDefinitionNode, *_args):
        if is_federation_type(_named_type(node.type)):
            return REMOVE
        return None

    def enter_input_value_definition(self, node: InputValueDefinitionNode, *_args):
        if is_federation_type(_named_type(node.type)):
            return REMOVE
        return None

    def leave_object_type_definition(self, node, *_args):
        # A root type holding only `_service`/`_entities` is left empty
        if not node.fields:
            return REMOVE
        return None


class _RootOperationStripper(Visitor):
    """AST visitor dropping root operation types whose type was removed."""

    def __init__(self, type_names: set[str]):
        super().__init__()
        self.type_names = type_names

    def enter_operation_type_definition(self, node: OperationTypeDefinitionNode, *_args):
        if node.type.name.value not in self.type_names:
            return REMOVE
        return None

    def leave_schema_definition(self, node, *_args):
        if not node.operation_types:
            return REMOVE
        return None


def remove_federation(schema: GraphQLSchema) -> GraphQLSchema:
    """Return a copy of the schema without federation types, fields and directives."""
    document = parse(print_schema(schema))
    stripped = visit(document, _FederationStripper())
    type_names = {
        definition.name.value
        for definition in stripped.definitions
        if isinstance(definition, TypeDefinitionNode)
    }
    stripped = visit(stripped, _RootOperationStripper(type_names))
    return build_ast_schema(stripped, assume_valid_sdl=True)
