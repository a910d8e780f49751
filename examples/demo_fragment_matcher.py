#!/usr/bin/env python3
"""Demonstration of fragment matcher generation.

This script shows how to:
1. Build a GraphQL schema with unions and interfaces
2. Validate the output target
3. Generate the artifact for each supported output file type
"""

import asyncio

from graphql import build_schema

from gql_fragment_matcher.core import GenerationConfig, plugin, validate

SCHEMA = """
interface Node { id: ID! }
type Book implements Node { id: ID! title: String }
type Movie implements Node { id: ID! director: String }
union SearchResult = Book | Movie
type Query {
  search(term: String!): [SearchResult!]!
  node(id: ID!): Node
}
"""


async def main():
    print("=== Fragment Matcher Demo ===\n")

    print("1. Building schema...")
    schema = build_schema(SCHEMA)

    targets = [
        (GenerationConfig(), "possible-types.json"),
        (GenerationConfig(module_style="commonjs"), "possible-types.js"),
        (GenerationConfig(consumer_major_version=2), "fragment-matcher.ts"),
        (GenerationConfig(explicit_typing=True), "possible-types.ts"),
    ]

    for step, (config, output_file) in enumerate(targets, start=2):
        print(f"\n{step}. Generating {output_file}...")
        validate(config, output_file)
        content = await plugin(schema, [], config, output_file)
        print("-" * 60)
        print(content)


if __name__ == "__main__":
    asyncio.run(main())
