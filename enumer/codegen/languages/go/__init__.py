"""
Go code generator module.

Generates string-backed Go enumerations with a companion struct from
resolved enumeration definitions.
"""

from .generator import GoGenerator, create_go_generator, go_quote
from .naming import create_go_sanitizer, validate_go_package_name

__all__ = [
    "GoGenerator",
    "create_go_generator",
    "create_go_sanitizer",
    "validate_go_package_name",
    "go_quote",
]
