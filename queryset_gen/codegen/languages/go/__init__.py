"""
Go query-set generator module.

Generates GORM query-set types and methods for Go model structs.
"""

from ...core.config import load_config
from .generator import GoQuerySetGenerator, create_go_generator
from .config import GoConfig, READ_ONLY_CONFIG
from .naming import create_go_sanitizer

__all__ = [
    "GoQuerySetGenerator",
    "GoConfig",
    "create_go_sanitizer",
    # Factory functions
    "create_go_generator",
    "create_read_only_generator",
]


def create_read_only_generator(**kwargs) -> GoQuerySetGenerator:
    """
    Create a generator for query sets that never write.

    Features:
    - Filters, ordering and preloading as usual
    - Limit, Offset, All and One
    - No Create method (and no fmt import)
    """
    return GoQuerySetGenerator(load_config(custom_config={**READ_ONLY_CONFIG, **kwargs}))
