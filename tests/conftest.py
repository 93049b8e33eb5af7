"""Shared pytest fixtures for enumer tests."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
import yaml

from enumer.codegen.core.config import CaseConversionConfig
from enumer.codegen.core.schema import EnumSpecDocument
from enumer.runtime import Companion

# ============================================================================
# Runtime Fixtures
# ============================================================================


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


@pytest.fixture
def color_companion() -> Companion:
    """Companion over Color with a few alternate spellings."""
    return Companion(
        "Color",
        [
            (Color.RED, "red", ("Red", "crimson")),
            (Color.GREEN, "green", ("verde",)),
            (Color.BLUE, "blue", ()),
        ],
    )


# ============================================================================
# Resolution Fixtures
# ============================================================================


@pytest.fixture
def default_cfg() -> CaseConversionConfig:
    """Default case converters (phrase-to-pascal / identity)."""
    return CaseConversionConfig.default()


@pytest.fixture
def task_status_data() -> Dict[str, Any]:
    """A small enumeration document as it appears in YAML."""
    return {
        "desc": "Lifecycle of a task.",
        "serialize": {"type": "pascal-to-kebab-lower"},
        "values": [
            {"name": "InProgress"},
            {"serialized": "done", "parse-from": ["complete", "finished"]},
            {"name": "Blocked", "serialized": "blocked"},
        ],
    }


@pytest.fixture
def task_status_document(task_status_data: Dict[str, Any]) -> EnumSpecDocument:
    """The task status document, as if loaded from status/task-status.enum.yaml."""
    return EnumSpecDocument.from_dict(
        task_status_data, input_path="/project/status/task-status.enum.yaml"
    )


# ============================================================================
# File System Fixtures
# ============================================================================


@pytest.fixture
def write_spec(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an enumeration document below tmp_path."""

    def _write(
        data: Dict[str, Any],
        name: str = "task-status.enum.yaml",
        directory: str = "status",
    ) -> Path:
        target_dir = tmp_path / directory
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def plain_console(monkeypatch):
    """Make rich consoles treat captured output as a plain pipe."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.setenv("TERM", "dumb")


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_enumer_logging(monkeypatch):
    """Undo configure_logging so that caplog sees package records."""
    from enumer import logging_config

    root = logging.getLogger(logging_config.ROOT_LOGGER_NAME)
    handlers = list(root.handlers)
    level = root.level
    propagate = root.propagate
    monkeypatch.setattr(logging_config, "_configured", logging_config._configured)

    yield

    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate
