"""
Go code generator implementation.

Generates a string-backed Go type with JSON, YAML, XML and SQL
marshalling plus a companion struct that parses and matches values.
"""

import json
from typing import Any, Dict, List, Optional
from pathlib import Path

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.header import box
from ...core.schema import EnumDefinition
from ...core.templates import TemplateEngine
from .naming import create_go_sanitizer, validate_go_package_name

logger = get_logger(__name__)

BANNERS = {
    "banner_type": "Type",
    "banner_stringer": "Stringer implementation",
    "banner_json": "JSON marshal/unmarshal implementation",
    "banner_yaml": "YAML marshal/unmarshal implementation",
    "banner_xml": "XML marshal/unmarshal implementation",
    "banner_sql": "SQL marshal/unmarshal implementation",
    "banner_companion": "Companion struct",
}


def go_quote(value: str) -> str:
    """Quote a string as a Go interpreted string literal."""
    return json.dumps(value, ensure_ascii=False)


class GoGenerator(CodeGenerator):
    """Code generator for Go string enumerations."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Go generator with configuration."""
        super().__init__(config)

        self.sanitizer = create_go_sanitizer()
        self.add_comments = self.config.add_comments
        self.error_prefix = self.config.custom.get("error_prefix", "invalid")

    def get_template_directory(self) -> Optional[Path]:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"

    def register_filters(self, engine: TemplateEngine):
        engine.add_filter("go_quote", go_quote)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def generate(self, definition: EnumDefinition) -> str:
        """Generate the complete Go file for an enumeration."""
        self.sanitizer.reset_used_names()

        package_name = self.config.package_name or definition.package_name

        context: Dict[str, Any] = {
            "header": definition.header,
            "description": definition.description if self.add_comments else None,
            "package_name": package_name,
            "type_name": definition.type_name,
            "companion_name": definition.companion_name,
            "companion_struct_name": definition.companion_struct_name,
            "error_message": f"{self.error_prefix} {definition.type_name}",
            "values": self._build_value_data(definition),
        }

        for key, title in BANNERS.items():
            context[key] = box(title) if self.add_comments else ""

        logger.debug("Rendering Go enum %s in package %s", definition.type_name, package_name)
        return self.render_template("enum.go.j2", context)

    def _build_value_data(self, definition: EnumDefinition) -> List[Dict[str, Any]]:
        """Build template data for every value, with safe Go field names."""
        values = []
        for value in definition.values:
            values.append(
                {
                    "ident": self.sanitizer.sanitize_name(value.name),
                    "name": value.name,
                    "serialized": value.serialized,
                    "aliases": list(value.aliases),
                }
            )
        return values

    def validate_definition(self, definition: EnumDefinition) -> List[str]:
        """Validate a definition for Go generation."""
        warnings = super().validate_definition(definition)

        package_name = self.config.package_name or definition.package_name
        for error in validate_go_package_name(package_name):
            warnings.append(f"Go package {package_name!r}: {error}")

        if not definition.type_name.isidentifier():
            warnings.append(f"Invalid Go type name: {definition.type_name}")

        sanitizer = create_go_sanitizer()
        for value in definition.values:
            ident = sanitizer.sanitize_name(value.name)
            if ident != value.name:
                warnings.append(
                    f"Value {value.name} renamed to {ident} to avoid Go naming conflicts"
                )

        return warnings


def create_go_generator(config: Optional[Dict[str, Any]] = None) -> GoGenerator:
    """Create a Go generator with default configuration."""
    return GoGenerator(load_config("go", config))
