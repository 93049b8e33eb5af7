"""
Configuration management for enumeration generation.

Handles case conversion settings and generator settings, merging
per-language defaults, optional configuration files, document settings
and command-line overrides.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ...logging_config import get_logger
from .naming import IDENTITY, CaseStrategyError, Converter, get_case_registry

logger = get_logger(__name__)

DEFAULT_TYPE_CONVERTER = "phrase-to-pascal"
DEFAULT_VALUE_CONVERTER = IDENTITY


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class UnknownCaseStrategyError(ConfigError):
    """A configured case conversion strategy does not exist."""

    def __init__(self, strategy: str):
        self.strategy = strategy
        super().__init__(f"Unknown case conversion strategy: {strategy}")


@dataclass(frozen=True)
class CaseConversionConfig:
    """Converters used to fill in missing halves of enumeration values."""

    type_converter: Converter
    value_converter: Converter
    type_strategy: str = DEFAULT_TYPE_CONVERTER
    value_strategy: str = DEFAULT_VALUE_CONVERTER

    @classmethod
    def from_names(
        cls, type_strategy: Optional[str] = None, value_strategy: Optional[str] = None
    ) -> "CaseConversionConfig":
        """
        Build a configuration from strategy names.

        Args:
            type_strategy: Derives serialized forms from names
            value_strategy: Derives names from serialized forms

        Raises:
            UnknownCaseStrategyError: If either strategy is not registered
        """
        type_strategy = type_strategy or DEFAULT_TYPE_CONVERTER
        value_strategy = value_strategy or DEFAULT_VALUE_CONVERTER
        registry = get_case_registry()

        try:
            type_converter = registry.get(type_strategy)
            value_converter = registry.get(value_strategy)
        except CaseStrategyError as e:
            raise UnknownCaseStrategyError(e.strategy) from e

        return cls(
            type_converter=type_converter,
            value_converter=value_converter,
            type_strategy=type_strategy,
            value_strategy=value_strategy,
        )

    @classmethod
    def default(cls) -> "CaseConversionConfig":
        return cls.from_names()


@dataclass
class GeneratorConfig:
    """Settings shared by every language generator."""

    # Where and what to emit
    output_file: Optional[str] = None
    package_name: Optional[str] = None
    add_comments: bool = True

    # Document-level switches
    skip_format: bool = False
    overwrite: bool = False
    debug: bool = False

    # Case conversion strategies
    type_converter: str = DEFAULT_TYPE_CONVERTER
    value_converter: str = DEFAULT_VALUE_CONVERTER

    # Language-specific settings, e.g. the Go error prefix
    custom: Dict[str, Any] = field(default_factory=dict)

    def case_conversion(self) -> CaseConversionConfig:
        """Build the case conversion configuration for these settings."""
        return CaseConversionConfig.from_names(self.type_converter, self.value_converter)

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "custom"}
        data.update(self.custom)
        return data


LANGUAGE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "go": {"custom": {"error_prefix": "invalid"}},
    "python": {"custom": {"runtime_module": "enumer.runtime"}},
}

CONFIG_FILE_SUFFIXES = (".json", ".yaml", ".yml")


class ConfigManager:
    """
    Builds ``GeneratorConfig`` objects from layered settings.

    Layers, lowest first: per-language defaults, an optional JSON/YAML
    configuration file, then explicit overrides. ``None`` never overrides.
    """

    def __init__(self, defaults: Optional[Dict[str, Dict[str, Any]]] = None):
        self._defaults = {
            language: _copy_config(settings)
            for language, settings in (defaults or LANGUAGE_DEFAULTS).items()
        }

    def get_config(
        self,
        language: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Resolve the settings for a language.

        Args:
            language: Primary language name; unknown names get bare defaults
            custom_config: Overrides, flat or with a ``custom`` mapping
            config_file: JSON or YAML file with the same keys

        Raises:
            ConfigError: If the configuration file is missing or invalid
        """
        settings = _copy_config(self._defaults.get((language or "").lower(), {}))

        for layer in (self._read_file(config_file) if config_file else None, custom_config):
            if layer:
                _merge(settings, layer)

        return self._to_config(settings)

    def _read_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(config_path)
        suffix = path.suffix.lower()

        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {path}")
        if suffix not in CONFIG_FILE_SUFFIXES:
            raise ConfigError(f"Configuration file must be JSON or YAML: {path}")

        try:
            text = path.read_text(encoding="utf-8")
            data = json.loads(text) if suffix == ".json" else yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"Invalid configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain a mapping: {path}")

        logger.debug("Loaded generator configuration from %s", path)
        return data

    @staticmethod
    def _to_config(settings: Dict[str, Any]) -> GeneratorConfig:
        """Split known fields from language-specific ones."""
        known = {f.name for f in fields(GeneratorConfig)}
        custom = dict(settings.get("custom", {}))
        custom.update({k: v for k, v in settings.items() if k not in known})

        kwargs = {k: v for k, v in settings.items() if k in known and k != "custom"}
        return GeneratorConfig(custom=custom, **kwargs)

    def list_languages(self) -> List[str]:
        return list(self._defaults)

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """Return human-readable problems with a configuration."""
        registry = get_case_registry()
        problems = [
            f"Invalid {name}: {getattr(config, name)}"
            for name in ("type_converter", "value_converter")
            if not registry.is_supported(getattr(config, name))
        ]

        if config.package_name and not config.package_name.isidentifier():
            problems.append(f"Invalid package name: {config.package_name}")

        return problems


def _copy_config(config: Dict[str, Any]) -> Dict[str, Any]:
    copied = dict(config)
    copied["custom"] = dict(config.get("custom", {}))
    return copied


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]):
    """Merge overrides into base, combining the custom dicts."""
    for key, value in overrides.items():
        if key == "custom" and isinstance(value, dict):
            base.setdefault("custom", {}).update(value)
        elif value is not None:
            base[key] = value


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """Shortcut for ``get_config_manager().get_config(...)``."""
    return get_config_manager().get_config(language, custom_config, config_file)


def document_overrides(document) -> Dict[str, Any]:
    """Extract generator settings carried by an enumeration document."""
    overrides: Dict[str, Any] = {}

    if document.package:
        overrides["package_name"] = document.package
    if document.output_path:
        overrides["output_file"] = document.output_path
    if document.serialize.type:
        overrides["type_converter"] = document.serialize.type
    if document.serialize.value:
        overrides["value_converter"] = document.serialize.value
    if document.skip_format:
        overrides["skip_format"] = True
    if document.debug:
        overrides["debug"] = True
    if document.overwrite:
        overrides["overwrite"] = True

    return overrides
