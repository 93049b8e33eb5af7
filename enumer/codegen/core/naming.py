"""
Naming utilities for enumeration resolution and code generation.

Provides the case converter registry used to derive missing names and
serialized forms, symbol stripping, and identifier sanitization for
keyword conflicts in the target languages.
"""

import re
from typing import Callable, Dict, List, Optional, Set
from enum import Enum

from ...logging_config import get_logger

logger = get_logger(__name__)

Converter = Callable[[str], str]

IDENTITY = "identity"


class CaseStrategyError(ValueError):
    """Exception raised when a case conversion strategy is unknown."""

    def __init__(self, strategy: str, available: Optional[List[str]] = None):
        self.strategy = strategy
        message = f"Unknown case conversion strategy: {strategy}"
        if available:
            message += f". Available: {', '.join(available)}"
        super().__init__(message)


class NamingCase(Enum):
    """Text casing styles understood by the converter registry."""

    PHRASE = "phrase"  # in progress
    PASCAL = "pascal"  # InProgress
    CAMEL = "camel"  # inProgress
    SNAKE = "snake"  # in_Progress (case kept)
    SNAKE_UPPER = "snake-upper"  # IN_PROGRESS
    SNAKE_LOWER = "snake-lower"  # in_progress
    KEBAB = "kebab"  # in-Progress (case kept)
    KEBAB_UPPER = "kebab-upper"  # IN-PROGRESS
    KEBAB_LOWER = "kebab-lower"  # in-progress


# Word splitting


def _split_words(text: str, source: NamingCase) -> List[str]:
    """Split text into words according to its source casing."""
    if source == NamingCase.PHRASE:
        return text.split()

    if source in (NamingCase.SNAKE, NamingCase.SNAKE_UPPER, NamingCase.SNAKE_LOWER):
        return [part for part in text.split("_") if part]

    if source in (NamingCase.KEBAB, NamingCase.KEBAB_UPPER, NamingCase.KEBAB_LOWER):
        return [part for part in text.split("-") if part]

    # pascal / camel: break before upper-case runs and digits
    spaced = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1 \2", text)
    spaced = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", spaced)
    return spaced.split()


def _title(word: str) -> str:
    """Capitalize a word, keeping the inner casing of mixed-case words."""
    if word.islower() or word.isupper():
        return word.capitalize()
    return word[:1].upper() + word[1:]


def _lower_first(word: str) -> str:
    if word.islower() or word.isupper():
        return word.lower()
    return word[:1].lower() + word[1:]


def _join_words(words: List[str], target: NamingCase) -> str:
    """Join words according to the target casing."""
    if target == NamingCase.PHRASE:
        return " ".join(words)
    if target == NamingCase.PASCAL:
        return "".join(_title(w) for w in words)
    if target == NamingCase.CAMEL:
        if not words:
            return ""
        return _lower_first(words[0]) + "".join(_title(w) for w in words[1:])
    if target == NamingCase.SNAKE:
        return "_".join(words)
    if target == NamingCase.SNAKE_UPPER:
        return "_".join(words).upper()
    if target == NamingCase.SNAKE_LOWER:
        return "_".join(words).lower()
    if target == NamingCase.KEBAB:
        return "-".join(words)
    if target == NamingCase.KEBAB_UPPER:
        return "-".join(words).upper()
    if target == NamingCase.KEBAB_LOWER:
        return "-".join(words).lower()
    return "".join(words)


def convert_case(text: str, source: NamingCase, target: NamingCase) -> str:
    """Convert text from one casing to another."""
    return _join_words(_split_words(text, source), target)


# Converter registry


class CaseConverterRegistry:
    """Maps strategy identifiers such as ``kebab-to-pascal`` to converters."""

    def __init__(self):
        """Initialize registry with every case combination plus identity."""
        self._converters: Dict[str, Converter] = {IDENTITY: lambda text: text}
        self._register_combinations()

    def _register_combinations(self):
        cases = list(NamingCase)
        for source in cases:
            for target in cases:
                if source == target:
                    continue
                name = f"{source.value}-to-{target.value}"
                self._converters[name] = self._make_converter(source, target)

    @staticmethod
    def _make_converter(source: NamingCase, target: NamingCase) -> Converter:
        def converter(text: str) -> str:
            return convert_case(text, source, target)

        converter.__name__ = f"{source.value}_to_{target.value}".replace("-", "_")
        return converter

    def get(self, name: str) -> Converter:
        """
        Look up a converter.

        Raises:
            CaseStrategyError: If the strategy is unknown
        """
        try:
            return self._converters[name.lower()]
        except KeyError:
            logger.debug("Unknown case strategy requested: %s", name)
            raise CaseStrategyError(name) from None

    def is_supported(self, name: str) -> bool:
        return name.lower() in self._converters

    def strategies(self) -> List[str]:
        """Return every registered strategy name, identity first."""
        return [IDENTITY] + sorted(k for k in self._converters if k != IDENTITY)


_default_registry: Optional[CaseConverterRegistry] = None


def get_case_registry() -> CaseConverterRegistry:
    """Get the global converter registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = CaseConverterRegistry()
    return _default_registry


def get_converter(name: str) -> Converter:
    """Look up a converter in the global registry."""
    return get_case_registry().get(name)


def converter_combinations() -> List[str]:
    """List all strategy names known to the global registry."""
    return get_case_registry().strategies()


# Text helpers


def strip_symbols(text: str) -> str:
    """Remove every character that is not a letter, digit or underscore."""
    return re.sub(r"[^\w]", "", text)


def kebab_to_pascal(text: str) -> str:
    return convert_case(text, NamingCase.KEBAB, NamingCase.PASCAL)


def lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def pluralize(word: str) -> str:
    """
    Simple pluralization of English words.

    Args:
        word: Singular word

    Returns:
        Plural form (simple heuristic)
    """
    if not word:
        return word
    lowered = word.lower()
    if lowered.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    if lowered.endswith("y") and len(word) > 1 and lowered[-2] not in "aeiou":
        return word[:-1] + "ies"
    return word + "s"


# Identifier sanitization


class NameSanitizer:
    """Makes resolved names safe as identifiers in a target language."""

    def __init__(self, reserved_words: Set[str] = None, builtin_types: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of names that would clash with generated members
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self._used_names: Set[str] = set()

    def sanitize_name(self, name: str, suffix_on_conflict: str = "_") -> str:
        """
        Sanitize a name for safe use in the target language.

        Args:
            name: Resolved name
            suffix_on_conflict: Suffix to add for conflicts

        Returns:
            Sanitized name safe for use
        """
        cleaned = self._clean_basic(name)
        final_name = self._resolve_conflicts(cleaned, suffix_on_conflict)
        self._used_names.add(final_name)
        return final_name

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        cleaned = strip_symbols(name)

        # Ensure doesn't start with number
        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        if not cleaned:
            cleaned = "Value"

        return cleaned

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Resolve naming conflicts with reserved words and existing names."""
        original_name = name

        if name in self.reserved_words or name in self.builtin_types:
            name = f"{name}{suffix}"

        counter = 1
        while name in self._used_names:
            name = f"{original_name}{suffix}{counter}"
            counter += 1

        return name

    def reset_used_names(self):
        """Reset the tracking of used names."""
        self._used_names.clear()
