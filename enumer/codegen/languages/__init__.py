"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .go import GoGenerator, create_go_generator
from .python import PythonGenerator, create_python_generator

__all__ = [
    "GoGenerator",
    "create_go_generator",
    "PythonGenerator",
    "create_python_generator",
]
