"""Tests for generate_from_document."""

from enumer.codegen import GeneratorConfig, build_generator_config, generate_from_document
from enumer.codegen.core.config import UnknownCaseStrategyError
from enumer.codegen.core.resolver import AmbiguousEnumValueError, MissingOutputPathError
from enumer.codegen.core.schema import EnumSpecDocument
from enumer.codegen.registry import RegistryError


class TestGenerateFromDocument:
    def test_default_output_path_go(self, task_status_document):
        result = generate_from_document(task_status_document, "go")

        assert result.success
        assert result.metadata["output_path"] == "/project/status/task-status.enum.go"
        assert result.definition.package_name == "status"
        assert result.definition.type_name == "TaskStatus"

    def test_default_output_path_python(self, task_status_document):
        result = generate_from_document(task_status_document, "python")

        assert result.success
        assert result.metadata["output_path"] == "/project/status/task_status.py"

    def test_document_output_path(self, task_status_document):
        task_status_document.output_path = "/elsewhere/states/job-state.go"

        result = generate_from_document(task_status_document, "go")

        assert result.definition.type_name == "JobState"
        assert result.definition.package_name == "states"

    def test_config_overrides(self, task_status_document):
        result = generate_from_document(
            task_status_document, "go", {"type_converter": "pascal-to-snake-upper"}
        )

        assert result.definition.get_value("InProgress").serialized == "IN_PROGRESS"

    def test_ready_config_used_as_is(self, task_status_document):
        config = GeneratorConfig(value_converter="identity")

        assert build_generator_config(task_status_document, "go", config) is config

        result = generate_from_document(task_status_document, "go", config)

        # the document's serialize settings are not merged into a ready config
        assert result.definition.get_value("InProgress").serialized == "InProgress"

    def test_skip_format(self, task_status_document):
        raw = {"add_comments": False}
        formatted = generate_from_document(task_status_document, "go", raw)

        task_status_document.skip_format = True
        unformatted = generate_from_document(task_status_document, "go", raw)

        assert unformatted.success
        assert "\n\n\n" in unformatted.code
        assert "\n\n\n" not in formatted.code

    def test_ambiguous_document(self):
        document = EnumSpecDocument.from_dict(
            {"type": "State", "package": "state", "values": ["Active", "active"]}
        )

        result = generate_from_document(document, "go")

        assert not result.success
        assert isinstance(result.exception, AmbiguousEnumValueError)
        assert result.code == ""

    def test_missing_output_path(self):
        document = EnumSpecDocument.from_dict({"values": ["a"]})

        result = generate_from_document(document, "go")

        assert not result.success
        assert isinstance(result.exception, MissingOutputPathError)

    def test_unknown_strategy(self, task_status_document):
        task_status_document.serialize.value = "nope"

        result = generate_from_document(task_status_document, "go")

        assert not result.success
        assert isinstance(result.exception, UnknownCaseStrategyError)

    def test_unknown_language(self, task_status_document):
        result = generate_from_document(task_status_document, "cobol")

        assert not result.success
        assert isinstance(result.exception, RegistryError)
