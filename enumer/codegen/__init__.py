"""
enumer code generation module

Resolves enumeration documents and generates source code for them in
various languages.
"""

from typing import Any, Dict, Optional, Union

from ..logging_config import get_logger
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .core.schema import EnumDefinition, EnumSpecDocument, EnumValueSpec, ResolvedEnumValue
from .core.resolver import ResolutionError, resolve_definition, resolve_value
from .core.config import (
    CaseConversionConfig,
    ConfigError,
    GeneratorConfig,
    document_overrides,
    load_config,
)

logger = get_logger(__name__)


def build_generator_config(
    document: EnumSpecDocument,
    language: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> GeneratorConfig:
    """
    Merge language defaults, document settings and explicit overrides.

    A ready ``GeneratorConfig`` is used as is.
    """
    if isinstance(config, GeneratorConfig):
        return config

    overrides = document_overrides(document)
    overrides.update(config or {})
    return load_config(get_registry().resolve_language(language), overrides)


def generate_from_document(
    document: EnumSpecDocument,
    language: str = "go",
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> GenerationResult:
    """
    Resolve an enumeration document and generate code for it.

    Args:
        document: Loaded enumeration document
        language: Target language name or alias
        config: Generator configuration or overrides

    Returns:
        GenerationResult with generated code; failures (invalid documents,
        unknown strategies or languages) are reported as error results
    """
    try:
        final_config = build_generator_config(document, language, config)
        generator = get_generator(language, final_config)

        output_path = document.output_path or final_config.output_file
        if not output_path and document.input_path:
            output_path = generator.default_output_path(document.input_path)

        definition = resolve_definition(
            document, final_config.case_conversion(), output_path=output_path
        )
    except (ResolutionError, ConfigError, RegistryError) as e:
        logger.debug("Enumeration could not be resolved: %s", e)
        return GenerationResult.error(str(e), exception=e)

    return generate_code(generator, definition)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "EnumDefinition",
    "EnumSpecDocument",
    "EnumValueSpec",
    "ResolvedEnumValue",
    "ResolutionError",
    "CaseConversionConfig",
    "ConfigError",
    "GeneratorConfig",
    "build_generator_config",
    "generate_code",
    "generate_from_document",
    "resolve_definition",
    "resolve_value",
    "get_generator",
    "get_language_info",
    "is_language_supported",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
]
