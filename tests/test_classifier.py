"""Tests for the type classifier."""

import asyncio

import pytest
from graphql import GraphQLSchema, build_schema

from gql_fragment_matcher.core.classifier import TypeClassifier, classify_introspection
from gql_fragment_matcher.core.errors import SchemaIntrospectionError
from gql_fragment_matcher.core.ir import SchemaTypeDescriptor, TypeKind


@pytest.fixture
def search_schema():
    """A schema with a union, an interface and an unused interface."""
    return build_schema(
        """
        interface Node { id: ID! }
        interface Empty { id: ID }
        type Book implements Node { id: ID! title: String }
        type Movie implements Node { id: ID! director: String }
        union SearchResult = Book | Movie
        type Query {
          search(term: String!): [SearchResult!]!
          node(id: ID!): Node
        }
        """
    )


def classify(schema, **kwargs):
    return asyncio.run(TypeClassifier(**kwargs).classify(schema))


class TestTypeClassifier:
    """Tests for TypeClassifier.classify."""

    def test_classifies_unions_and_interfaces(self, search_schema):
        descriptors = {d.name: d for d in classify(search_schema)}

        assert descriptors["SearchResult"].kind == TypeKind.UNION
        assert descriptors["Node"].kind == TypeKind.INTERFACE
        assert descriptors["Empty"].kind == TypeKind.INTERFACE
        assert descriptors["Book"].kind == TypeKind.OTHER
        assert descriptors["Query"].kind == TypeKind.OTHER

    def test_union_members_keep_declaration_order(self, search_schema):
        descriptors = {d.name: d for d in classify(search_schema)}
        assert descriptors["SearchResult"].possible_types == ("Book", "Movie")

    def test_interface_implementations(self, search_schema):
        descriptors = {d.name: d for d in classify(search_schema)}
        assert sorted(descriptors["Node"].possible_types) == ["Book", "Movie"]

    def test_interface_without_implementations(self, search_schema):
        descriptors = {d.name: d for d in classify(search_schema)}
        assert descriptors["Empty"].possible_types == ()

    def test_concrete_types_have_no_possible_types(self, search_schema):
        for descriptor in classify(search_schema):
            if not descriptor.is_abstract:
                assert descriptor.possible_types == ()

    def test_keeps_introspection_kind(self, search_schema):
        descriptors = {d.name: d for d in classify(search_schema)}
        assert descriptors["Book"].introspection_kind == "OBJECT"
        assert descriptors["String"].introspection_kind == "SCALAR"
        assert descriptors["SearchResult"].introspection_kind == "UNION"

    def test_includes_introspection_types(self, search_schema):
        names = {d.name for d in classify(search_schema)}
        assert "__Schema" in names
        assert "__Type" in names

    def test_invalid_schema_raises(self):
        # No query root: schema validation fails before execution
        with pytest.raises(SchemaIntrospectionError) as exc_info:
            classify(GraphQLSchema())
        assert "Query root type must be provided" in str(exc_info.value)
        assert exc_info.value.errors

    def test_federation_transform_is_applied(self, search_schema):
        calls = []

        def transform(schema):
            calls.append(schema)
            return schema

        classify(search_schema, federation_aware=True, federation_transform=transform)
        assert calls == [search_schema]

    def test_federation_transform_skipped_by_default(self, search_schema):
        def transform(schema):
            raise AssertionError("transform should not run")

        classify(search_schema, federation_transform=transform)


class TestClassifyIntrospection:
    """Tests for classify_introspection."""

    def test_classifies_raw_payload(self):
        data = {
            "__schema": {
                "types": [
                    {"kind": "OBJECT", "name": "Cat", "possibleTypes": None},
                    {"kind": "UNION", "name": "Pet", "possibleTypes": [{"name": "Cat"}]},
                ]
            }
        }

        assert classify_introspection(data) == [
            SchemaTypeDescriptor(kind=TypeKind.OTHER, name="Cat"),
            SchemaTypeDescriptor(kind=TypeKind.UNION, name="Pet", possible_types=("Cat",)),
        ]

    def test_missing_schema_raises(self):
        with pytest.raises(SchemaIntrospectionError):
            classify_introspection({"types": []})

    def test_none_payload_raises(self):
        with pytest.raises(SchemaIntrospectionError):
            classify_introspection(None)
