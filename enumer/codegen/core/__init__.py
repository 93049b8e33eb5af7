"""
Core code generation components.

Provides the enumeration data model, the resolver, and base classes and
utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    EnumDefinition,
    EnumSpecDocument,
    EnumValueSpec,
    ResolvedEnumValue,
    SerializeSettings,
    SpecFormatError,
)
from .resolver import (
    ResolutionError,
    InvalidValueSpecError,
    DuplicateEnumNameError,
    AmbiguousEnumValueError,
    MissingOutputPathError,
    resolve_value,
    resolve_definition,
)
from .naming import (
    NameSanitizer,
    NamingCase,
    CaseConverterRegistry,
    CaseStrategyError,
    converter_combinations,
    get_converter,
)
from .config import (
    CaseConversionConfig,
    GeneratorConfig,
    ConfigManager,
    ConfigError,
    UnknownCaseStrategyError,
    load_config,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Data model
    "EnumDefinition",
    "EnumSpecDocument",
    "EnumValueSpec",
    "ResolvedEnumValue",
    "SerializeSettings",
    "SpecFormatError",
    # Resolution
    "ResolutionError",
    "InvalidValueSpecError",
    "DuplicateEnumNameError",
    "AmbiguousEnumValueError",
    "MissingOutputPathError",
    "resolve_value",
    "resolve_definition",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    "CaseConverterRegistry",
    "CaseStrategyError",
    "converter_combinations",
    "get_converter",
    # Configuration system
    "CaseConversionConfig",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "UnknownCaseStrategyError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
