"""
Jinja2 rendering for generated sources.

Each language generator owns a template directory; the engine adds the
filters shared by every target (comment blocks) and lets generators
register their own string quoting.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
)

from ...logging_config import get_logger

logger = get_logger(__name__)


class TemplateError(Exception):
    """A template is missing or failed to render."""

    pass


def comment_block(value: Optional[str], marker: str = "//") -> str:
    """Prefix every line with a comment marker; blank lines keep a bare marker."""
    if not value:
        return ""
    return "\n".join(
        f"{marker} {line}" if line.strip() else marker for line in str(value).split("\n")
    )


class TemplateEngine:
    """Renders one generator's templates."""

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = template_dir

        if template_dir is not None and template_dir.is_dir():
            loader = FileSystemLoader(str(template_dir))
        else:
            loader = DictLoader({})

        # Generated sources are not HTML; undefined variables are bugs.
        self._env = Environment(
            loader=loader,
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._env.filters["comment"] = comment_block

    def add_filter(self, name: str, func: Callable[..., Any]):
        """Register a language-specific filter such as string quoting."""
        self._env.filters[name] = func

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template file.

        Raises:
            TemplateError: If the template is missing or rendering fails
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e

        try:
            return template.render(**context)
        except Exception as e:
            logger.debug("Rendering %s failed", template_name, exc_info=True)
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally bound to a template directory."""
    return TemplateEngine(template_dir)
