"""Load a GraphQLSchema from SDL files or an introspection result.

Accepts a single SDL file, a directory of SDL files, or a JSON file
holding an introspection result.
"""

import json
import os

from graphql import GraphQLError, GraphQLSchema, build_client_schema, build_schema

from .errors import SchemaLoadError

SDL_EXTENSIONS = (".graphql", ".graphqls", ".gql")


class SchemaLoader:
    """Builds a schema from files on disk."""

    def __init__(self, schema_path: str, assume_valid_sdl: bool = False):
        """Initialize a loader with a path to a schema file or directory.

        Args:
            schema_path: SDL file, directory of SDL files, or introspection JSON
            assume_valid_sdl: Skip SDL validation, e.g. for federation subgraphs
                              that use directives without defining them
        """
        self.schema_path = schema_path
        self.assume_valid_sdl = assume_valid_sdl

    def load(self) -> GraphQLSchema:
        """Read the schema sources and build the schema.

        Raises:
            SchemaLoadError: If no sources are found or they can't be parsed
        """
        if os.path.isfile(self.schema_path) and self.schema_path.lower().endswith(".json"):
            return self._load_introspection(self.schema_path)

        schema_files = self._collect_schema_files()
        if not schema_files:
            raise SchemaLoadError(f"No GraphQL schema files found in {self.schema_path}")

        sources = []
        for file_path in schema_files:
            try:
                with open(file_path, encoding="utf-8") as f:
                    sources.append(f.read())
            except (OSError, UnicodeDecodeError) as e:
                raise SchemaLoadError(f"Error reading {file_path}: {e}") from e

        try:
            return build_schema("\n".join(sources), assume_valid_sdl=self.assume_valid_sdl)
        except (GraphQLError, TypeError) as e:
            raise SchemaLoadError(f"Error building schema from {self.schema_path}: {e}") from e

    def _collect_schema_files(self) -> list[str]:
        """Collect all SDL files from path."""
        files = []
        if os.path.isfile(self.schema_path):
            if self.schema_path.lower().endswith(SDL_EXTENSIONS):
                files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.lower().endswith(SDL_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)

    @staticmethod
    def _load_introspection(file_path: str) -> GraphQLSchema:
        """Build a client schema from an introspection JSON file."""
        try:
            with open(file_path, encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaLoadError(f"Error reading {file_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"Invalid JSON in {file_path}: {e}") from e

        # Accept both a raw execution result and its bare `data` payload
        if isinstance(payload, dict) and "data" in payload:
            payload = payload["data"]
        if not isinstance(payload, dict) or "__schema" not in payload:
            raise SchemaLoadError(f"{file_path} does not contain an introspection result")

        try:
            return build_client_schema(payload)
        except (GraphQLError, TypeError, KeyError, ValueError) as e:
            raise SchemaLoadError(f"Error building schema from {file_path}: {e}") from e
