"""
Python code generator module.

Generates ``str``-based Python enumerations backed by the enumer runtime
companion.
"""

from .generator import PythonGenerator, create_python_generator, py_quote
from .naming import create_python_sanitizer, sanitize_member_name

__all__ = [
    "PythonGenerator",
    "create_python_generator",
    "create_python_sanitizer",
    "sanitize_member_name",
    "py_quote",
]
