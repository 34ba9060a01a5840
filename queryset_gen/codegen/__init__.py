"""
queryset-gen code generation module.

Generates typed GORM query-set methods from model struct descriptions.
"""

from typing import Any, Dict

from .core.generator import GeneratorError, GenerationResult, generate_code
from .core.schema import (
    Schema,
    Field,
    FieldKind,
    ModelDescription,
    SchemaError,
    convert_model_description,
)
from .core.config import (
    GeneratorConfig,
    ConfigError,
    ConfigManager,
    load_config,
    load_config_file,
)
from .languages.go import GoQuerySetGenerator, create_go_generator
from .languages.go.generator import ConfigSource


def generate_from_models(
    model_data: Dict[str, Any], config: ConfigSource = None
) -> GenerationResult:
    """
    Generate query-set code from a scanner model description.

    The description's "package" is used as package name unless the
    configuration sets one explicitly.

    Args:
        model_data: Parsed JSON model description
        config: Generator configuration, dict of overrides or config path

    Returns:
        GenerationResult with generated code

    Raises:
        SchemaError: If the model description is malformed
        ConfigError: If the configuration is invalid
    """
    description = convert_model_description(model_data)

    if description.package_name and (config is None or isinstance(config, dict)):
        config = {"package_name": description.package_name, **(config or {})}

    generator = create_go_generator(config)
    return generate_code(generator, description.schemas)


__all__ = [
    "GeneratorError",
    "GenerationResult",
    "GoQuerySetGenerator",
    "Schema",
    "Field",
    "FieldKind",
    "ModelDescription",
    "SchemaError",
    "GeneratorConfig",
    "ConfigError",
    "ConfigManager",
    "convert_model_description",
    "create_go_generator",
    "generate_code",
    "generate_from_models",
    "load_config",
    "load_config_file",
]
