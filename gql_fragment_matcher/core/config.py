"""Generation settings for the fragment matcher.

Accepts both Python field names and the camelCase keys used in
codegen configuration files:

    GenerationConfig(consumer_major_version=2)
    GenerationConfig.model_validate({"apolloClientVersion": 2, "module": "commonjs"})
"""

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidConfigCombination


class ModuleStyle(str, Enum):
    """Export statement style for script artifacts."""

    COMMONJS = "commonjs"
    ESMODULE = "esmodule"


SUPPORTED_CONSUMER_VERSIONS = (2, 3)


class GenerationConfig(BaseModel):
    """Options supplied once per generation call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    consumer_major_version: int = Field(default=3, alias="apolloClientVersion")
    module_style: ModuleStyle = Field(default=ModuleStyle.ESMODULE, alias="module")
    explicit_typing: bool = Field(default=False, alias="useExplicitTyping")
    federation_aware: bool = Field(default=False, alias="federation")

    @field_validator("module_style", mode="before")
    @classmethod
    def _legacy_module_name(cls, value: Any) -> Any:
        # "es2015" is the older spelling used by codegen configs
        if value == "es2015":
            return ModuleStyle.ESMODULE
        return value


def load_config(config: GenerationConfig | Mapping[str, Any] | None) -> GenerationConfig:
    """Coerce a config mapping (or None) into a GenerationConfig.

    Raises:
        InvalidConfigCombination: If the mapping holds invalid values
    """
    if config is None:
        return GenerationConfig()
    if isinstance(config, GenerationConfig):
        return config
    try:
        return GenerationConfig.model_validate(dict(config))
    except ValidationError as e:
        raise InvalidConfigCombination(f"Invalid fragment matcher config: {e}") from e
