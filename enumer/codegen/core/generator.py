"""
Base class for enumeration source generators.

A generator turns a resolved ``EnumDefinition`` into the source text of
one target language. ``generate_code`` wraps a generator run and reports
failures as a ``GenerationResult`` instead of raising.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig
from .templates import TemplateEngine, create_template_engine

if TYPE_CHECKING:
    from .schema import EnumDefinition

logger = get_logger(__name__)

_BLANK_RUNS = re.compile(r"\n{3,}")
_TRAILING_SPACE = re.compile(r"[ \t]+$", re.MULTILINE)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Common behaviour of the language generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.template_engine: TemplateEngine = create_template_engine(
            self.get_template_directory()
        )
        self.register_filters(self.template_engine)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Name of the target language (``go``, ``python``)."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extension of generated files, including the dot."""

    def get_template_directory(self) -> Optional[Path]:
        """Directory holding this generator's templates, if any."""
        return None

    def register_filters(self, engine: TemplateEngine):
        """Hook for subclasses to add language-specific template filters."""

    def default_output_path(self, input_path: str) -> str:
        """
        Output location used when the document names none.

        ``status.enum.yaml`` becomes ``status.enum<ext>``.
        """
        path = Path(input_path)
        if path.suffix.lower() in (".yaml", ".yml"):
            path = path.with_suffix("")
        return f"{path}{self.file_extension}"

    @abstractmethod
    def generate(self, definition: "EnumDefinition") -> str:
        """Render the source for a resolved enumeration."""

    def validate_definition(self, definition: "EnumDefinition") -> List[str]:
        """
        Collect warnings about a definition.

        Language generators extend this with their naming checks.
        """
        warnings = []
        if not definition.values:
            warnings.append(f"Enumeration '{definition.type_name}' has no values")
        return warnings

    def format_code(self, code: str) -> str:
        """Drop trailing whitespace and collapse runs of blank lines."""
        code = _TRAILING_SPACE.sub("", code)
        code = _BLANK_RUNS.sub("\n\n", code)
        return code.strip("\n") + "\n"

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)


@dataclass
class GenerationResult:
    """Outcome of one generator run."""

    code: str
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    success: bool = True
    error_message: Optional[str] = None
    exception: Optional[Exception] = None
    definition: Optional["EnumDefinition"] = None

    @classmethod
    def error(cls, message: str, exception: Optional[Exception] = None) -> "GenerationResult":
        """Create a failed result with no code."""
        return cls(code="", success=False, error_message=message, exception=exception)


def generate_code(generator: CodeGenerator, definition: "EnumDefinition") -> GenerationResult:
    """
    Run a generator over a definition.

    Returns:
        GenerationResult with code, warnings and metadata; any failure is
        returned as an error result
    """
    try:
        warnings = generator.validate_definition(definition)
        code = generator.generate(definition)

        if definition.skip_format or generator.config.skip_format:
            logger.debug("Skipping formatting of generated %s code", generator.language_name)
        else:
            code = generator.format_code(code)
    except Exception as e:
        logger.debug("Code generation failed", exc_info=True)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "type_name": definition.type_name,
        "companion_name": definition.companion_name,
        "package_name": definition.package_name,
        "value_count": len(definition.values),
        "output_path": definition.output_path,
    }
    return GenerationResult(code, warnings, metadata, definition=definition)
