"""Core modules for fragment matcher generation."""

from .classifier import TypeClassifier, classify_introspection
from .config import GenerationConfig, ModuleStyle, load_config
from .emitter import ArtifactEmitter
from .errors import (
    FragmentMatcherError,
    InvalidConfigCombination,
    SchemaIntrospectionError,
    SchemaLoadError,
    UnsupportedOutputExtension,
)
from .federation import remove_federation
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .ir import OutputEncoding, SchemaTypeDescriptor, TypeKind
from .loader import SchemaLoader
from .plugin import encoding_for_output, plugin, validate
from .shapes import (
    VersionThreeShape,
    VersionTwoShape,
    abstract_type_map,
    build_shape,
)

__all__ = [
    # Errors
    "FragmentMatcherError",
    "InvalidConfigCombination",
    "SchemaIntrospectionError",
    "SchemaLoadError",
    "UnsupportedOutputExtension",
    # Config
    "GenerationConfig",
    "ModuleStyle",
    "load_config",
    # IR types
    "OutputEncoding",
    "SchemaTypeDescriptor",
    "TypeKind",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    # Loader
    "SchemaLoader",
    # Pipeline
    "TypeClassifier",
    "classify_introspection",
    "remove_federation",
    "VersionTwoShape",
    "VersionThreeShape",
    "abstract_type_map",
    "build_shape",
    "ArtifactEmitter",
    "encoding_for_output",
    "plugin",
    "validate",
]
