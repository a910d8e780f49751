"""Generation hooks for customizing fragment matcher output.

Provides protocols for pre- and post-generation hooks that can modify
the classified types before the shape is built or transform the
artifact text after emission.

Example usage:
    from gql_fragment_matcher.core.hooks import PreGenerateHook, PostGenerateHook

    # Pre-generation hook to drop internal abstract types
    class DropInternalTypes(PreGenerateHook):
        def pre_generate(self, descriptors):
            return [d for d in descriptors if not d.name.startswith("Internal")]

    # Post-generation hook to add headers
    class AddLicenseHeader(PostGenerateHook):
        def post_generate(self, filename, content):
            return "// Copyright 2024 My Company\\n\\n" + content
"""

from dataclasses import replace
from typing import Protocol, runtime_checkable

from .ir import SchemaTypeDescriptor


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive the classified types before the shape
    is built and return the list to build from.
    """

    def pre_generate(
        self, descriptors: list[SchemaTypeDescriptor]
    ) -> list[SchemaTypeDescriptor]:
        """Called after classification.

        Args:
            descriptors: Every type of the schema, in introspection order

        Returns:
            The (possibly filtered) descriptors to build the shape from
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive the artifact text and can transform
    it before it is handed back to the caller.
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called after the artifact is emitted.

        Args:
            filename: The output file name (e.g., "fragment-matcher.ts")
            content: The generated artifact

        Returns:
            The (possibly transformed) artifact
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header comment to generated modules.

    JSON artifacts are left untouched since JSON has no comment syntax.

    Example:
        hook = AddHeaderHook("// Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, filename: str, content: str) -> str:
        """Add a header to the beginning of the artifact."""
        if filename.lower().endswith(".json"):
            return content
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class FilterTypesHook:
    """Built-in hook to filter types by name prefix/suffix.

    Filters apply to abstract types and to the concrete types listed
    under them.

    Example:
        # Remove all types starting with underscore
        hook = FilterTypesHook(exclude_prefix="_")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        """Check if a type should be included."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_generate(
        self, descriptors: list[SchemaTypeDescriptor]
    ) -> list[SchemaTypeDescriptor]:
        """Filter abstract types and their possible types."""
        result = []
        for descriptor in descriptors:
            if not self._should_include(descriptor.name):
                continue
            if descriptor.is_abstract:
                descriptor = replace(
                    descriptor,
                    possible_types=tuple(
                        name for name in descriptor.possible_types if self._should_include(name)
                    ),
                )
            result.append(descriptor)
        return result


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        """Add a pre-generation hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(
        self, descriptors: list[SchemaTypeDescriptor]
    ) -> list[SchemaTypeDescriptor]:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            descriptors = hook.pre_generate(descriptors)
        return descriptors

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
