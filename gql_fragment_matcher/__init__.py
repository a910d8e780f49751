"""Generate Apollo Client fragment matchers from GraphQL schemas."""

from .core import (
    FragmentMatcherError,
    GenerationConfig,
    InvalidConfigCombination,
    SchemaIntrospectionError,
    UnsupportedOutputExtension,
    plugin,
    validate,
)

__all__ = [
    "FragmentMatcherError",
    "GenerationConfig",
    "InvalidConfigCombination",
    "SchemaIntrospectionError",
    "UnsupportedOutputExtension",
    "plugin",
    "validate",
]
