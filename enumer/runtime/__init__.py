"""
Runtime support for generated enumerations.

Provides the companion matcher and the codec adapters that generated
enumeration modules delegate to.
"""

from . import codecs
from .errors import EnumError, NotAStringError, NullValueError, UnrecognizedValueError
from .matcher import Companion, CompanionEntry, build_companion, fold_case

__all__ = [
    "Companion",
    "CompanionEntry",
    "build_companion",
    "fold_case",
    "codecs",
    "EnumError",
    "UnrecognizedValueError",
    "NullValueError",
    "NotAStringError",
]
