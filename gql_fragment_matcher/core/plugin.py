"""Fragment matcher pipeline: validation, then classify, shape and emit.

The artifact format follows the output file name:

    .json        JSON data
    .js, .jsx    JavaScript module with a default export
    .ts, .tsx    TypeScript module with a type declaration and default export

Example:
    validate(config, "fragment-matcher.ts")
    content = await plugin(schema, [], config, "fragment-matcher.ts")
"""

import os
from typing import Any, Mapping, Optional

from graphql import GraphQLSchema

from .classifier import TypeClassifier
from .config import SUPPORTED_CONSUMER_VERSIONS, GenerationConfig, ModuleStyle, load_config
from .emitter import ArtifactEmitter
from .errors import InvalidConfigCombination, UnsupportedOutputExtension
from .hooks import HookRunner
from .ir import OutputEncoding
from .shapes import build_shape

EXTENSIONS = {
    OutputEncoding.TYPED_SOURCE: (".ts", ".tsx"),
    OutputEncoding.SCRIPT: (".js", ".jsx"),
    OutputEncoding.DATA: (".json",),
}

ALL_EXTENSIONS = tuple(ext for exts in EXTENSIONS.values() for ext in exts)


def output_extension(output_file: str) -> str:
    """Return the lower-cased suffix of the output file, e.g. '.ts'."""
    return os.path.splitext(output_file)[1].lower()


def encoding_for_output(output_file: str) -> OutputEncoding:
    """Infer the artifact encoding from the output file suffix.

    Raises:
        UnsupportedOutputExtension: If the suffix is not recognized
    """
    ext = output_extension(output_file)
    for encoding, extensions in EXTENSIONS.items():
        if ext in extensions:
            return encoding
    allowed = ", ".join(e.lstrip(".") for e in ALL_EXTENSIONS)
    raise UnsupportedOutputExtension(
        f"Fragment matcher requires extension to be one of {allowed}, got {ext or 'none'!r}",
        ext,
    )


def validate(
    config: GenerationConfig | Mapping[str, Any] | None,
    output_file: str,
) -> GenerationConfig:
    """Pre-flight checks run before any generation work.

    Returns:
        The validated config

    Raises:
        UnsupportedOutputExtension: If the output suffix is not recognized
        InvalidConfigCombination: If the options conflict or are unsupported
    """
    config = load_config(config)
    encoding = encoding_for_output(output_file)

    if config.module_style == ModuleStyle.COMMONJS and encoding == OutputEncoding.TYPED_SOURCE:
        raise InvalidConfigCombination(
            "Fragment matcher doesn't support commonjs modules combined with TypeScript"
        )

    if config.consumer_major_version not in SUPPORTED_CONSUMER_VERSIONS:
        raise InvalidConfigCombination(
            f"Fragment matcher doesn't support apolloClientVersion "
            f"{config.consumer_major_version!r}, expected 2 or 3"
        )

    return config


async def plugin(
    schema: GraphQLSchema,
    documents: Any,
    config: GenerationConfig | Mapping[str, Any] | None,
    output_file: str,
    hooks: Optional[HookRunner] = None,
    template_dir: Optional[str] = None,
) -> str:
    """Generate the fragment matcher artifact for a schema.

    Args:
        schema: The schema to classify
        documents: Operation documents; not used by this generator
        config: GenerationConfig or a codegen-style mapping
        output_file: Target file name, used to pick the encoding
        hooks: Optional pre/post generation hooks
        template_dir: Optional directory with template overrides

    Returns:
        The full artifact text

    Raises:
        FragmentMatcherError: If validation or introspection fails
    """
    config = validate(config, output_file)
    encoding = encoding_for_output(output_file)

    classifier = TypeClassifier(federation_aware=config.federation_aware)
    descriptors = await classifier.classify(schema)

    if hooks:
        descriptors = hooks.run_pre_hooks(descriptors)

    shape = build_shape(descriptors, config.consumer_major_version)
    content = ArtifactEmitter(template_dir=template_dir).emit(shape, encoding, config)

    if hooks:
        content = hooks.run_post_hooks(os.path.basename(output_file), content)
    return content
