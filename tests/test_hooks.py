"""Tests for generation hooks."""

import pytest

from gql_fragment_matcher.core.hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from gql_fragment_matcher.core.ir import SchemaTypeDescriptor, TypeKind


@pytest.fixture
def sample_descriptors():
    """Classified types for testing."""
    return [
        SchemaTypeDescriptor(kind=TypeKind.OTHER, name="User"),
        SchemaTypeDescriptor(kind=TypeKind.OTHER, name="_Meta"),
        SchemaTypeDescriptor(kind=TypeKind.OTHER, name="Product"),
        SchemaTypeDescriptor(
            kind=TypeKind.UNION, name="SearchResult", possible_types=("User", "_Meta", "Product")
        ),
        SchemaTypeDescriptor(kind=TypeKind.INTERFACE, name="_Internal", possible_types=("_Meta",)),
    ]


class TestAddHeaderHook:
    """Tests for AddHeaderHook."""

    def test_adds_header(self):
        hook = AddHeaderHook("// Auto-generated")
        result = hook.post_generate("matcher.ts", "export default result;")
        assert result.startswith("// Auto-generated\n\n")

    def test_preserves_content(self):
        hook = AddHeaderHook("// Header")
        content = "export default {};"
        result = hook.post_generate("matcher.js", content)
        assert content in result

    def test_handles_header_with_newline(self):
        hook = AddHeaderHook("// Header\n")
        result = hook.post_generate("matcher.js", "code")
        # Should not double-up newlines
        assert result == "// Header\n\ncode"

    def test_skips_json(self):
        hook = AddHeaderHook("// Header")
        assert hook.post_generate("possible-types.JSON", "{}") == "{}"


class TestFilterTypesHook:
    """Tests for FilterTypesHook."""

    def test_exclude_prefix(self, sample_descriptors):
        hook = FilterTypesHook(exclude_prefix="_")
        result = hook.pre_generate(sample_descriptors)

        names = [d.name for d in result]
        assert "User" in names
        assert "SearchResult" in names
        assert "_Meta" not in names
        assert "_Internal" not in names

    def test_filters_possible_types(self, sample_descriptors):
        hook = FilterTypesHook(exclude_prefix="_")
        result = {d.name: d for d in hook.pre_generate(sample_descriptors)}
        assert result["SearchResult"].possible_types == ("User", "Product")

    def test_include_prefix(self, sample_descriptors):
        hook = FilterTypesHook(include_prefix="_")
        result = hook.pre_generate(sample_descriptors)

        assert [d.name for d in result] == ["_Meta", "_Internal"]

    def test_exclude_suffix(self, sample_descriptors):
        hook = FilterTypesHook(exclude_suffix="Result")
        names = [d.name for d in hook.pre_generate(sample_descriptors)]
        assert "SearchResult" not in names

    def test_does_not_mutate_input(self, sample_descriptors):
        FilterTypesHook(exclude_prefix="_").pre_generate(sample_descriptors)
        assert sample_descriptors[3].possible_types == ("User", "_Meta", "Product")


class TestHookRunner:
    """Tests for HookRunner."""

    def test_run_pre_hooks(self, sample_descriptors):
        runner = HookRunner()
        runner.add_pre_hook(FilterTypesHook(exclude_prefix="_"))

        result = runner.run_pre_hooks(sample_descriptors)
        assert "_Meta" not in [d.name for d in result]

    def test_run_post_hooks(self):
        runner = HookRunner()
        runner.add_post_hook(AddHeaderHook("// Header"))

        result = runner.run_post_hooks("matcher.ts", "code")
        assert result.startswith("// Header")

    def test_multiple_pre_hooks(self, sample_descriptors):
        runner = HookRunner()
        runner.add_pre_hook(FilterTypesHook(exclude_prefix="_"))

        class AbstractOnlyHook:
            def pre_generate(self, descriptors):
                return [d for d in descriptors if d.is_abstract]

        runner.add_pre_hook(AbstractOnlyHook())

        result = runner.run_pre_hooks(sample_descriptors)
        assert [d.name for d in result] == ["SearchResult"]

    def test_multiple_post_hooks(self):
        runner = HookRunner()
        runner.add_post_hook(AddHeaderHook("// Line 1"))
        runner.add_post_hook(AddHeaderHook("// Line 0"))

        result = runner.run_post_hooks("matcher.js", "code")
        assert result == "// Line 0\n\n// Line 1\n\ncode"


class TestProtocolCompliance:
    """Tests for protocol compliance."""

    def test_add_header_is_post_hook(self):
        assert isinstance(AddHeaderHook("header"), PostGenerateHook)

    def test_filter_types_is_pre_hook(self):
        assert isinstance(FilterTypesHook(), PreGenerateHook)

    def test_custom_pre_hook(self):
        class CustomPreHook:
            def pre_generate(self, descriptors):
                return descriptors

        assert isinstance(CustomPreHook(), PreGenerateHook)
