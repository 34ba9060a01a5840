"""
Core code generation components.

Schema, configuration, naming and template building blocks of the generator.
"""

from .generator import GeneratorError, GenerationResult, generate_code, tidy_source
from .schema import (
    Schema,
    Field,
    FieldKind,
    ModelDescription,
    SchemaError,
    classify_type,
    convert_model_description,
)
from .naming import NameSanitizer, to_db_name, field_name_to_arg_name
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Running a generator
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    "tidy_source",
    # Schema system - core data structures
    "Schema",
    "Field",
    "FieldKind",
    "ModelDescription",
    "SchemaError",
    "classify_type",
    "convert_model_description",
    # Naming utilities
    "NameSanitizer",
    "to_db_name",
    "field_name_to_arg_name",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
