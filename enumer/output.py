"""
Writing generated files and editor integration.

Generated sources are only replaced when overwriting is allowed. The
editor integration installs a JSON schema for ``*.enum.yaml`` documents
into a project's ``.vscode`` directory.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from .codegen.core.naming import converter_combinations
from .logging_config import get_logger

logger = get_logger(__name__)

FILE_PERMISSIONS = 0o644

SCHEMA_TITLE = "enumer enumeration document"
SCHEMA_VERSION = "1.0.0"
SCHEMA_FILE_NAME = "enum.schema.json"
SETTINGS_FILE_NAME = "settings.json"
ALTERNATE_SETTINGS_FILE_NAME = "enumer-schema-settings.json"
DOCUMENT_GLOB = "*.enum.yaml"


class OutputError(Exception):
    """Exception raised when generated files cannot be written."""

    pass


def write_output(path: Union[str, Path], code: str, overwrite: bool = False) -> bool:
    """
    Write generated code to disk.

    Args:
        path: Destination file
        code: Generated source
        overwrite: Replace the file if it already exists

    Returns:
        True if the file was written, False if an existing file was kept

    Raises:
        OutputError: If directories or the file cannot be written
    """
    path = Path(path)

    if path.exists() and not overwrite:
        logger.info("Skipping %s: file exists and overwrite is disabled", path)
        return False

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(code, encoding="utf-8")
        path.chmod(FILE_PERMISSIONS)
    except OSError as e:
        raise OutputError(f"Failed to write {path}: {e}") from e

    logger.info("Wrote %s (%d bytes)", path, len(code.encode("utf-8")))
    return True


def generate_json_schema() -> Dict[str, Any]:
    """Build the JSON schema describing ``*.enum.yaml`` documents."""
    strategies = converter_combinations()
    string = {"type": "string"}
    boolean = {"type": "boolean"}

    return {
        "$schema": "http://json-schema.org/draft-07/schema",
        "title": SCHEMA_TITLE,
        "type": "object",
        "version": SCHEMA_VERSION,
        "properties": {
            "type": dict(string),
            "package": dict(string),
            "output-path": dict(string),
            "desc": dict(string),
            "header": dict(string),
            "header-from": dict(string),
            "serialize": {
                "type": "object",
                "properties": {
                    "type": {"type": "string", "enum": list(strategies)},
                    "value": {"type": "string", "enum": list(strategies)},
                },
            },
            "skip-format": dict(boolean),
            "debug": dict(boolean),
            "overwrite": dict(boolean),
            "values": {
                "type": "array",
                "items": {
                    "type": ["object", "string"],
                    "properties": {
                        "name": dict(string),
                        "serialized": dict(string),
                        "parse-from": {"type": "array", "items": dict(string)},
                    },
                },
            },
        },
    }


def editor_settings() -> Dict[str, Any]:
    """Settings mapping enumeration documents to the installed schema."""
    return {"yaml.schemas": {f"./.vscode/{SCHEMA_FILE_NAME}": DOCUMENT_GLOB}}


def install_editor_schema(project_dir: Union[str, Path]) -> Dict[str, Path]:
    """
    Install the document schema into a project's ``.vscode`` directory.

    An existing ``settings.json`` is never modified; the settings are then
    written to ``enumer-schema-settings.json`` for the user to merge.

    Args:
        project_dir: Project root

    Returns:
        Mapping with the ``schema`` and ``settings`` paths that were written

    Raises:
        OutputError: If the files cannot be written
    """
    settings_dir = Path(project_dir) / ".vscode"
    settings_path = settings_dir / SETTINGS_FILE_NAME

    if settings_path.exists():
        settings_path = settings_dir / ALTERNATE_SETTINGS_FILE_NAME
        logger.warning(
            "%s already exists; add the contents of %s to it",
            SETTINGS_FILE_NAME,
            settings_path,
        )

    schema_path = settings_dir / SCHEMA_FILE_NAME

    try:
        settings_dir.mkdir(parents=True, exist_ok=True)
        settings_path.write_text(json.dumps(editor_settings(), indent=4) + "\n", encoding="utf-8")
        schema_path.write_text(json.dumps(generate_json_schema(), indent=4) + "\n", encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to install editor schema in {settings_dir}: {e}") from e

    logger.info("Installed editor schema in %s", settings_dir)
    return {"schema": schema_path, "settings": settings_path}
