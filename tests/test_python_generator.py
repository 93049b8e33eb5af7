"""Tests for the Python generator, including the generated module's behaviour."""

import json

import pytest
import yaml

from enumer.codegen.core.generator import generate_code
from enumer.codegen.core.resolver import resolve_definition
from enumer.codegen.core.schema import EnumSpecDocument
from enumer.codegen.languages.python import PythonGenerator, create_python_generator
from enumer.runtime import Companion, NullValueError, UnrecognizedValueError


def _load_module(code: str) -> dict:
    namespace = {"__name__": "generated_task_status"}
    exec(compile(code, "task_status.py", "exec"), namespace)
    return namespace


@pytest.fixture
def py_result(task_status_document):
    definition = resolve_definition(
        task_status_document, output_path="/project/status/task_status.py"
    )
    return generate_code(create_python_generator(), definition)


@pytest.fixture
def module(py_result):
    return _load_module(py_result.code)


@pytest.fixture
def task_status(module):
    return module["TaskStatus"]


class TestPythonSource:
    def test_success(self, py_result):
        assert py_result.success
        assert py_result.metadata["language"] == "python"
        assert py_result.metadata["type_name"] == "TaskStatus"

    def test_declarations(self, py_result):
        code = py_result.code

        assert "from enumer.runtime import Companion, codecs\n" in code
        assert "class TaskStatus(str, Enum):" in code
        assert "    InProgress = 'in-progress'\n" in code
        assert "TaskStatuses: \"Companion[TaskStatus]\" = Companion(" in code

    def test_header(self, py_result):
        assert py_result.code.startswith("# +")
        assert "Lifecycle of a task." in py_result.code

    def test_runtime_module_setting(self, task_status_document):
        definition = resolve_definition(task_status_document, output_path="/p/status/t.py")
        result = generate_code(
            create_python_generator({"runtime_module": "vendored.enumer.runtime"}), definition
        )

        assert "from vendored.enumer.runtime import Companion, codecs" in result.code

    def test_reserved_member_renamed(self):
        document = EnumSpecDocument.from_dict(
            {"type": "Verb", "package": "verbs", "values": [{"name": "parse", "serialized": "parse"}]}
        )

        result = generate_code(PythonGenerator(), resolve_definition(document))
        namespace = _load_module(result.code)

        assert "    parse_ = 'parse'\n" in result.code
        assert any("parse_" in warning for warning in result.warnings)
        assert namespace["Verb"].parse("PARSE") is namespace["Verb"].parse_

    def test_private_member_prefixed(self):
        document = EnumSpecDocument.from_dict(
            {"type": "Kind", "package": "kinds", "values": ["__internal", "public"]}
        )

        result = generate_code(PythonGenerator(), resolve_definition(document))
        kind = _load_module(result.code)["Kind"]

        assert "    V__internal = '__internal'\n" in result.code
        assert kind.parse("__INTERNAL") is kind.V__internal
        assert [member.name for member in kind] == ["V__internal", "public"]

    def test_default_output_path(self):
        generator = PythonGenerator()

        assert generator.default_output_path("/p/status/task-status.enum.yaml") == (
            "/p/status/task_status.py"
        )


class TestGeneratedModule:
    def test_members(self, task_status):
        assert [member.value for member in task_status] == ["in-progress", "done", "blocked"]
        assert task_status.InProgress == "in-progress"
        assert str(task_status.done) == "done"

    def test_companion(self, module, task_status):
        companion = module["TaskStatuses"]

        assert isinstance(companion, Companion)
        assert companion.values() == list(task_status)

    def test_parse(self, task_status):
        assert task_status.parse("IN-PROGRESS") is task_status.InProgress
        assert task_status.parse("InProgress") is task_status.InProgress
        assert task_status.parse("Finished") is task_status.done

    def test_parse_failure(self, task_status):
        with pytest.raises(UnrecognizedValueError) as exc_info:
            task_status.parse("doneX")

        assert exc_info.value.valid_values == ["in-progress", "done", "blocked"]

    def test_parse_from_and_match(self, task_status):
        assert task_status.parse_from("complete", task_status.done) is task_status.done
        assert task_status.is_("BLOCKED")
        assert not task_status.is_("paused")
        assert not task_status.is_from("complete", task_status.InProgress, task_status.Blocked)

    def test_json(self, task_status):
        assert task_status.InProgress.to_json() == '"in-progress"'
        assert task_status.from_json('"COMPLETE"') is task_status.done
        assert json.loads(task_status.Blocked.to_json()) == "blocked"

    def test_yaml(self, task_status):
        assert yaml.safe_load(task_status.done.to_yaml()) == "done"
        assert task_status.from_yaml("in-progress\n") is task_status.InProgress

    def test_xml(self, task_status):
        assert task_status.done.to_xml() == "<task-status>done</task-status>"
        assert task_status.done.to_xml("state") == "<state>done</state>"
        assert task_status.from_xml("<state>Finished</state>") is task_status.done

    def test_db_value(self, task_status):
        assert task_status.Blocked.to_db_value() == "blocked"
        assert task_status.from_db_value(b"blocked") is task_status.Blocked

        with pytest.raises(NullValueError):
            task_status.from_db_value(None)
