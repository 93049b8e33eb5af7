"""
Core data model for enumeration generation.

Raw specification documents are converted into these structures before
resolution; the resolver turns them into a normalized ``EnumDefinition``
that generators can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ...logging_config import get_logger
from ...runtime.matcher import fold_case
from .naming import lower_first

logger = get_logger(__name__)

DOCUMENT_KEYS = {
    "type",
    "package",
    "output-path",
    "desc",
    "header",
    "header-from",
    "serialize",
    "skip-format",
    "debug",
    "overwrite",
    "values",
}

VALUE_KEYS = {"name", "serialized", "parse-from"}

# YAML 1.1 spellings, as the document loader leaves them
TRUE_WORDS = {"true", "yes", "on", "y"}
FALSE_WORDS = {"false", "no", "off", "n", ""}


class SpecFormatError(ValueError):
    """Exception raised when a specification document is malformed."""

    pass


@dataclass
class EnumValueSpec:
    """One value as written by the author; either half may be missing."""

    name: Optional[str] = None
    serialized: Optional[str] = None
    parse_from: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, index: int) -> "EnumValueSpec":
        if data is None:
            return cls()
        if isinstance(data, str):
            # Shorthand: a bare string is a serialized form.
            return cls(serialized=data)
        if not isinstance(data, dict):
            raise SpecFormatError(f"values[{index}] must be a mapping")

        unknown = set(data) - VALUE_KEYS
        if unknown:
            logger.warning("Ignoring unknown keys in values[%d]: %s", index, sorted(unknown))

        parse_from = data.get("parse-from") or []
        if isinstance(parse_from, str):
            parse_from = [parse_from]
        if not isinstance(parse_from, list):
            raise SpecFormatError(f"values[{index}].parse-from must be a list")

        return cls(
            name=_optional_text(data.get("name")),
            serialized=_optional_text(data.get("serialized")),
            parse_from=[str(alias) for alias in parse_from],
        )


@dataclass
class SerializeSettings:
    """Names of the case conversion strategies used during resolution."""

    type: Optional[str] = None  # name -> serialized
    value: Optional[str] = None  # serialized -> name


@dataclass
class EnumSpecDocument:
    """A loaded ``*.enum.yaml`` document, before resolution."""

    type: Optional[str] = None
    package: Optional[str] = None
    output_path: Optional[str] = None
    desc: Optional[str] = None
    header: Optional[str] = None
    header_from: Optional[str] = None
    header_lines: Optional[List[str]] = None
    serialize: SerializeSettings = field(default_factory=SerializeSettings)
    skip_format: bool = False
    debug: bool = False
    overwrite: bool = False
    values: List[EnumValueSpec] = field(default_factory=list)
    input_path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], input_path: Optional[str] = None) -> "EnumSpecDocument":
        """
        Build a document from parsed YAML/JSON content.

        Args:
            data: Mapping with the hyphenated document keys
            input_path: Where the document was loaded from, if anywhere

        Raises:
            SpecFormatError: If the document structure is invalid
        """
        if not isinstance(data, dict):
            raise SpecFormatError("Enumeration document must be a mapping")

        unknown = set(data) - DOCUMENT_KEYS
        if unknown:
            logger.warning("Ignoring unknown document keys: %s", sorted(unknown))

        serialize = data.get("serialize") or {}
        if not isinstance(serialize, dict):
            raise SpecFormatError("serialize must be a mapping")

        raw_values = data.get("values") or []
        if not isinstance(raw_values, list):
            raise SpecFormatError("values must be a list")

        return cls(
            type=_optional_text(data.get("type")),
            package=_optional_text(data.get("package")),
            output_path=_optional_text(data.get("output-path")),
            desc=_optional_text(data.get("desc")),
            header=_optional_text(data.get("header")),
            header_from=_optional_text(data.get("header-from")),
            serialize=SerializeSettings(
                type=_optional_text(serialize.get("type")),
                value=_optional_text(serialize.get("value")),
            ),
            skip_format=_flag(data, "skip-format"),
            debug=_flag(data, "debug"),
            overwrite=_flag(data, "overwrite"),
            values=[EnumValueSpec.from_dict(v, i) for i, v in enumerate(raw_values)],
            input_path=input_path,
        )


@dataclass(frozen=True)
class ResolvedEnumValue:
    """A value with both halves filled in; immutable once resolved."""

    name: str
    serialized: str
    parse_from: Tuple[str, ...] = ()

    @property
    def aliases(self) -> Tuple[str, ...]:
        """Every accepted spelling in original casing, canonical form first."""
        ordered: List[str] = []
        for alias in (self.serialized, self.name, *self.parse_from):
            if alias not in ordered:
                ordered.append(alias)
        return tuple(ordered)

    @property
    def match_keys(self) -> frozenset:
        """Lower-cased aliases used for case-insensitive matching."""
        return frozenset(fold_case(alias) for alias in self.aliases)


@dataclass
class EnumDefinition:
    """A fully resolved enumeration, ready for source generation."""

    package_name: str
    type_name: str
    companion_name: str
    values: Tuple[ResolvedEnumValue, ...]
    header: str = ""
    description: Optional[str] = None
    output_path: Optional[str] = None
    input_path: Optional[str] = None
    skip_format: bool = False
    debug: bool = False
    overwrite: bool = False

    @property
    def companion_struct_name(self) -> str:
        """Lower-camel accessor name of the companion (Go struct type)."""
        return lower_first(self.companion_name)

    def get_value(self, name: str) -> Optional[ResolvedEnumValue]:
        """Get a value by its resolved name."""
        for value in self.values:
            if value.name == name:
                return value
        return None


def _optional_text(value: Any) -> Optional[str]:
    """Treat missing and blank values alike."""
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def _flag(data: Dict[str, Any], key: str) -> bool:
    """Read a boolean switch given either as a bool or as YAML text."""
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return bool(value)

    text = str(value).strip().lower()
    if text in TRUE_WORDS:
        return True
    if text in FALSE_WORDS:
        return False
    raise SpecFormatError(f"{key} must be a boolean, got {value!r}")
