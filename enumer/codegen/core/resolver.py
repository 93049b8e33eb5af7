"""
Enumeration resolution.

Fills in the missing half of every value (identifier name or serialized
form) with the configured case converters, derives enumeration-level names
from the output path, and rejects specifications whose values could not be
told apart at parse time. Resolution performs no I/O and either returns a
complete ``EnumDefinition`` or raises.
"""

from pathlib import PurePath
from typing import Dict, List, Optional, Sequence, Tuple

from ...logging_config import get_logger
from ...runtime.matcher import fold_case
from .config import CaseConversionConfig
from .generator import GeneratorError
from .header import build_header, header_lines
from .naming import kebab_to_pascal, pluralize, strip_symbols
from .schema import EnumDefinition, EnumSpecDocument, EnumValueSpec, ResolvedEnumValue

logger = get_logger(__name__)


class ResolutionError(GeneratorError):
    """Base exception for invalid enumeration specifications."""

    pass


class InvalidValueSpecError(ResolutionError):
    """A value has neither a usable name nor a serialized form."""

    def __init__(self, index: int, reason: str = "name or serialized value is required"):
        self.index = index
        super().__init__(f"invalid values[{index}]: {reason}")


class DuplicateEnumNameError(ResolutionError):
    """Two values resolved to the same identifier name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"duplicate enum name: {name}")


class AmbiguousEnumValueError(ResolutionError):
    """Two values accept the same text when case is ignored."""

    def __init__(self, a: str, b: str):
        self.a = a
        self.b = b
        super().__init__(f"ambiguous enum values: {a!r} and {b!r} differ only by case")


class MissingOutputPathError(ResolutionError):
    """Enumeration names cannot be derived without an output path."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"cannot derive {field_name} without an output path")


def resolve_value(spec: EnumValueSpec, cfg: CaseConversionConfig, index: int) -> ResolvedEnumValue:
    """
    Resolve a single value.

    Args:
        spec: The value as written in the document
        cfg: Case converters used for the missing half
        index: Position of the value, reported in errors

    Returns:
        The resolved value

    Raises:
        InvalidValueSpecError: If neither name nor serialized is present, or
            the name is empty once symbols are stripped
    """
    name, serialized = spec.name, spec.serialized

    if not name and not serialized:
        raise InvalidValueSpecError(index)

    if not name:
        name = strip_symbols(cfg.value_converter(serialized))
    elif not serialized:
        serialized = cfg.type_converter(name)
        name = strip_symbols(name)
    else:
        name = strip_symbols(name)

    if not name:
        raise InvalidValueSpecError(index, "name is empty after removing symbols")
    if not serialized:
        raise InvalidValueSpecError(index, "serialized value is empty")

    return ResolvedEnumValue(
        name=name,
        serialized=serialized,
        parse_from=tuple(spec.parse_from),
    )


def resolve_values(
    specs: Sequence[EnumValueSpec], cfg: CaseConversionConfig
) -> Tuple[ResolvedEnumValue, ...]:
    """Resolve every value in order and validate the set as a whole."""
    values = tuple(resolve_value(spec, cfg, i) for i, spec in enumerate(specs))
    validate_unique(values)
    return values


def validate_unique(values: Sequence[ResolvedEnumValue]):
    """
    Check that no two values can be confused.

    Names must differ exactly; no alias of one value may equal an alias of
    another value once case is ignored.

    Raises:
        DuplicateEnumNameError: On an exact name collision
        AmbiguousEnumValueError: On a case-insensitive alias collision
    """
    names = set()
    for value in values:
        if value.name in names:
            raise DuplicateEnumNameError(value.name)
        names.add(value.name)

    owners: Dict[str, Tuple[int, str]] = {}
    for index, value in enumerate(values):
        for alias in value.aliases:
            key = fold_case(alias)
            owner = owners.get(key)
            if owner is None:
                owners[key] = (index, alias)
            elif owner[0] != index:
                raise AmbiguousEnumValueError(owner[1], alias)


def derive_package_name(output_path: str) -> str:
    """Directory basename of the output path, usable as a package name."""
    directory = PurePath(output_path).parent.name
    return directory.replace("-", "_").replace(" ", "_")


def derive_type_name(output_path: str) -> str:
    """File basename without up to two extensions, in PascalCase."""
    stem = PurePath(output_path).name
    for _ in range(2):
        stem = PurePath(stem).stem if PurePath(stem).suffix else stem
    return kebab_to_pascal(stem.replace("_", "-").replace(" ", "-"))


def derive_companion_name(type_name: str) -> str:
    return pluralize(type_name)


def resolve_definition(
    document: EnumSpecDocument,
    cfg: Optional[CaseConversionConfig] = None,
    output_path: Optional[str] = None,
) -> EnumDefinition:
    """
    Resolve a whole enumeration document.

    Args:
        document: Loaded specification document
        cfg: Case converters; built from the document's ``serialize``
            settings when omitted
        output_path: Output location used to derive missing names; defaults
            to the document's ``output-path``

    Returns:
        The resolved definition

    Raises:
        ResolutionError: If any value is invalid or values collide
        ConfigError: If a named case strategy does not exist
    """
    if cfg is None:
        cfg = CaseConversionConfig.from_names(document.serialize.type, document.serialize.value)

    output_path = output_path or document.output_path

    package_name = document.package
    if not package_name:
        if not output_path:
            raise MissingOutputPathError("package name")
        package_name = derive_package_name(output_path)

    type_name = document.type
    if not type_name:
        if not output_path:
            raise MissingOutputPathError("type name")
        type_name = derive_type_name(output_path)

    companion_name = derive_companion_name(type_name)

    values = resolve_values(document.values, cfg)
    if not values:
        logger.warning("Enumeration %s declares no values", type_name)

    lines: List[str] = header_lines(document.header, document.header_lines)

    definition = EnumDefinition(
        package_name=package_name,
        type_name=type_name,
        companion_name=companion_name,
        values=values,
        header=build_header(lines),
        description=document.desc,
        output_path=output_path,
        input_path=document.input_path,
        skip_format=document.skip_format,
        debug=document.debug,
        overwrite=document.overwrite,
    )

    logger.debug(
        "Resolved %s (%s, companion %s) with %d values",
        type_name,
        package_name,
        companion_name,
        len(values),
    )
    return definition


__all__ = [
    "ResolutionError",
    "InvalidValueSpecError",
    "DuplicateEnumNameError",
    "AmbiguousEnumValueError",
    "MissingOutputPathError",
    "resolve_value",
    "resolve_values",
    "resolve_definition",
    "validate_unique",
    "derive_package_name",
    "derive_type_name",
    "derive_companion_name",
]
