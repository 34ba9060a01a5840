"""
queryset-gen: typed GORM query-set generator.

Reads a model description (structs and their fields) and generates chainable
query-set methods for Go programs using GORM.
"""

__version__ = "0.1.0"

from .codegen import (
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    create_go_generator,
    generate_from_models,
    load_config,
)
from .codegen.methods import MethodDescriptor, MethodConstructionError

__all__ = [
    "__version__",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "MethodDescriptor",
    "MethodConstructionError",
    "create_go_generator",
    "generate_from_models",
    "load_config",
]
