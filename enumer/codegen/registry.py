"""
Registry of the available language generators.

Languages are registered under a primary name plus optional aliases
(``golang`` for ``go``); lookups are case-insensitive.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from ..logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator

logger = get_logger(__name__)

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Unknown language or conflicting registration."""

    pass


@dataclass
class LanguageEntry:
    """A registered generator and the names it answers to."""

    name: str
    generator_class: Type[CodeGenerator]
    aliases: List[str] = field(default_factory=list)


class GeneratorRegistry:
    """Maps language names and aliases to generator classes."""

    def __init__(self):
        self._languages: Dict[str, LanguageEntry] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator.

        An existing registration is kept unless ``replace`` is set.

        Raises:
            RegistryError: If the class is not a CodeGenerator or an alias
                is already taken by another language
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError(f"{generator_class!r} is not a CodeGenerator subclass")

        key = language.lower()
        if key in self._languages and not replace:
            logger.debug("Generator for %s already registered", key)
            return

        alias_keys = [a.lower() for a in aliases or [] if a.lower() != key]
        for alias in alias_keys:
            if replace:
                continue
            owner = self._aliases.get(alias)
            if alias in self._languages or (owner is not None and owner != key):
                raise RegistryError(f"Alias '{alias}' is already registered")

        self._languages[key] = LanguageEntry(key, generator_class, sorted(alias_keys))
        for alias in alias_keys:
            self._aliases[alias] = key

    def unregister(self, language: str):
        """Remove a language and its aliases."""
        entry = self._languages.pop(language.lower(), None)
        if entry is None:
            return
        for alias in entry.aliases:
            self._aliases.pop(alias, None)

    def resolve_language(self, language: str) -> str:
        """
        Map a name or alias to the primary language name.

        Raises:
            RegistryError: If the language is unknown
        """
        key = language.lower()
        if key in self._languages:
            return key
        if key in self._aliases:
            return self._aliases[key]
        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        return self._languages[self.resolve_language(language)].generator_class

    def create_generator(self, language: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Instantiate the generator for a language.

        Args:
            language: Language name or alias
            config: Ready configuration, overrides dict, or configuration file

        Raises:
            RegistryError: If the language is unknown or the configuration
                cannot be loaded
        """
        primary = self.resolve_language(language)
        generator_class = self._languages[primary].generator_class

        if isinstance(config, GeneratorConfig):
            return generator_class(config)

        try:
            if isinstance(config, (str, Path)):
                final_config = load_config(primary, config_file=config)
            elif isinstance(config, dict) or config is None:
                final_config = load_config(primary, custom_config=config)
            else:
                raise RegistryError(f"Invalid config type: {type(config).__name__}")
        except RegistryError:
            raise
        except Exception as e:
            raise RegistryError(f"Failed to configure {primary} generator: {e}") from e

        return generator_class(final_config)

    def list_languages(self) -> List[str]:
        return sorted(self._languages)

    def get_aliases_for_language(self, language: str) -> List[str]:
        entry = self._languages.get(language.lower())
        return list(entry.aliases) if entry else []

    def is_supported(self, language: str) -> bool:
        key = language.lower()
        return key in self._languages or key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """Describe a registered language for listings."""
        entry = self._languages[self.resolve_language(language)]
        generator = entry.generator_class(load_config(entry.name))

        return {
            "name": generator.language_name,
            "class": entry.generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": list(entry.aliases),
            "module": entry.generator_class.__module__,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Return the process-wide registry with the built-in generators."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_builtin_generators(_global_registry)
    return _global_registry


def _register_builtin_generators(registry: GeneratorRegistry):
    from .languages.go import GoGenerator
    from .languages.python import PythonGenerator

    registry.register("go", GoGenerator, aliases=["golang"])
    registry.register("python", PythonGenerator, aliases=["py"])


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Create a configured generator from the global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Describe every registered language, keyed by primary name."""
    return {language: get_language_info(language) for language in list_supported_languages()}
