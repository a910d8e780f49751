"""Serialize a fragment matcher shape into the artifact text.

JSON artifacts are plain `json.dumps` output. Script and typed-source
artifacts are rendered from Jinja2 templates.

Supports custom templates via the template_dir parameter:
    emitter = ArtifactEmitter(template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import json
from pathlib import Path
from typing import Any, Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from .config import GenerationConfig, ModuleStyle
from .errors import InvalidConfigCombination, UnsupportedOutputExtension
from .ir import OutputEncoding
from .shapes import Shape

EXPORT_STATEMENTS = {
    ModuleStyle.ESMODULE: "export default",
    ModuleStyle.COMMONJS: "module.exports =",
}


def serialize(value: Any) -> str:
    """Pretty-print a shape value as JSON with 2-space indentation."""
    return json.dumps(value, indent=2, ensure_ascii=False)


class ArtifactEmitter:
    """Renders shapes as JSON, JavaScript or TypeScript source.

    Available templates to override:
        - script.js.j2: JavaScript module with a default export
        - typed_source.ts.j2: TypeScript module with a type declaration
    """

    TEMPLATES = {
        OutputEncoding.SCRIPT: "script.js.j2",
        OutputEncoding.TYPED_SOURCE: "typed_source.ts.j2",
    }

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize the emitter.

        Args:
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
        """
        self.template_dir = template_dir

        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_fragment_matcher", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def emit(
        self,
        shape: Shape,
        encoding: OutputEncoding | str,
        config: GenerationConfig | None = None,
    ) -> str:
        """Produce the artifact text for a shape.

        Args:
            shape: Shape returned by build_shape
            encoding: Output encoding (see OutputEncoding)
            config: Generation options; defaults are used when omitted

        Raises:
            UnsupportedOutputExtension: If the encoding is unknown
            InvalidConfigCombination: If commonjs is requested for typed source
        """
        config = config or GenerationConfig()
        try:
            encoding = OutputEncoding(encoding)
        except ValueError:
            raise UnsupportedOutputExtension(
                f"Output encoding {encoding!r} is not supported", str(encoding)
            ) from None

        content = serialize(shape.to_data())

        if encoding == OutputEncoding.DATA:
            return content

        if encoding == OutputEncoding.SCRIPT:
            return self._render(
                encoding,
                export_statement=EXPORT_STATEMENTS[config.module_style],
                content=content,
            )

        if config.module_style == ModuleStyle.COMMONJS:
            raise InvalidConfigCombination(
                "commonjs modules can't be combined with TypeScript output"
            )
        return self._render(
            encoding,
            explicit_typing=config.explicit_typing,
            typename=shape.typename,
            interface_body=shape.interface_body,
            content=content,
        )

    def _render(self, encoding: OutputEncoding, **context: Any) -> str:
        template = self.env.get_template(self.TEMPLATES[encoding])
        return template.render(context)
