"""
Language-specific code generators.

This module contains generators for different target languages.
"""

from .go import GoQuerySetGenerator, create_go_generator, create_read_only_generator

__all__ = [
    "GoQuerySetGenerator",
    "create_go_generator",
    "create_read_only_generator",
]
