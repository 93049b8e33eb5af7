"""
Python code generator implementation.

Generates a ``str``-based ``Enum`` whose parse and codec methods delegate
to a module-level companion from ``enumer.runtime``.
"""

import re
from typing import Any, Dict, List, Optional
from pathlib import Path

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.naming import convert_case, NamingCase
from ...core.schema import EnumDefinition
from ...core.templates import TemplateEngine
from .naming import create_python_sanitizer, sanitize_member_name

logger = get_logger(__name__)


def py_quote(value: str) -> str:
    """Quote a string as a Python literal."""
    return repr(value)


class PythonGenerator(CodeGenerator):
    """Code generator for Python enumerations."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Python generator with configuration."""
        super().__init__(config)

        self.sanitizer = create_python_sanitizer()
        self.add_comments = self.config.add_comments
        self.runtime_module = self.config.custom.get("runtime_module", "enumer.runtime")

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def register_filters(self, engine: TemplateEngine):
        engine.add_filter("py_quote", py_quote)

    def default_output_path(self, input_path: str) -> str:
        """``task-status.enum.yaml`` becomes an importable ``task_status.py``."""
        path = Path(input_path)
        stem = path.name.split(".")[0]
        module = stem.replace("-", "_").replace(" ", "_")
        return str(path.with_name(module + self.file_extension))

    def format_code(self, code: str) -> str:
        """Keep two blank lines between top-level statements."""
        code = re.sub(r"[ \t]+$", "", code, flags=re.MULTILINE)
        code = re.sub(r"\n{4,}", "\n\n\n", code)
        return code.strip("\n") + "\n"

    def generate(self, definition: EnumDefinition) -> str:
        """Generate the complete Python module for an enumeration."""
        self.sanitizer.reset_used_names()

        module_doc = definition.description or f"{definition.type_name} enumeration."

        context: Dict[str, Any] = {
            "header": definition.header if self.add_comments else "",
            "module_doc": module_doc.replace('"""', "'''"),
            "description": (
                definition.description.replace('"""', "'''")
                if self.add_comments and definition.description
                else None
            ),
            "type_name": definition.type_name,
            "companion_name": definition.companion_name,
            "runtime_module": self.runtime_module,
            "xml_tag": convert_case(definition.type_name, NamingCase.PASCAL, NamingCase.KEBAB_LOWER),
            "values": self._build_value_data(definition),
        }

        logger.debug("Rendering Python enum %s", definition.type_name)
        return self.render_template("enum.py.j2", context)

    def _build_value_data(self, definition: EnumDefinition) -> List[Dict[str, Any]]:
        """Build template data for every value, with safe member names."""
        return [
            {
                "ident": sanitize_member_name(value.name, self.sanitizer),
                "name": value.name,
                "serialized": value.serialized,
                "aliases": list(value.aliases),
            }
            for value in definition.values
        ]

    def validate_definition(self, definition: EnumDefinition) -> List[str]:
        """Validate a definition for Python generation."""
        warnings = super().validate_definition(definition)

        if not definition.type_name.isidentifier():
            warnings.append(f"Invalid Python class name: {definition.type_name}")

        if definition.output_path:
            module = Path(definition.output_path).stem
            if not module.isidentifier():
                warnings.append(f"Output module {module!r} is not importable")

        sanitizer = create_python_sanitizer()
        for value in definition.values:
            ident = sanitize_member_name(value.name, sanitizer)
            if ident != value.name:
                warnings.append(
                    f"Value {value.name} renamed to {ident} to avoid Python naming conflicts"
                )

        return warnings


def create_python_generator(config: Optional[Dict[str, Any]] = None) -> PythonGenerator:
    """Create a Python generator with default configuration."""
    return PythonGenerator(load_config("python", config))
