"""
enumer - enumerations with case-insensitive parsing and codecs.

Generated modules only need :mod:`enumer.runtime`; code generation lives in
:mod:`enumer.codegen` and the command-line tool in :mod:`enumer.cli`.
"""

from .runtime import Companion, EnumError, UnrecognizedValueError

__version__ = "0.1.0"

__all__ = ["Companion", "EnumError", "UnrecognizedValueError", "__version__"]
