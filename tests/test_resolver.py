"""Tests for enumeration resolution."""

import pytest

from enumer.codegen.core.config import CaseConversionConfig, UnknownCaseStrategyError
from enumer.codegen.core.header import DEFAULT_HEADER
from enumer.codegen.core.resolver import (
    AmbiguousEnumValueError,
    DuplicateEnumNameError,
    InvalidValueSpecError,
    MissingOutputPathError,
    ResolutionError,
    derive_companion_name,
    derive_package_name,
    derive_type_name,
    resolve_definition,
    resolve_value,
    resolve_values,
)
from enumer.codegen.core.schema import EnumSpecDocument, EnumValueSpec
from enumer.runtime import UnrecognizedValueError, build_companion


def _document(values, **kwargs) -> EnumSpecDocument:
    kwargs.setdefault("type", "Status")
    kwargs.setdefault("package", "status")
    return EnumSpecDocument.from_dict({"values": values, **kwargs})


class TestResolveValue:
    """Tests for the per-value derivation rules."""

    def test_neither_name_nor_serialized(self, default_cfg):
        with pytest.raises(InvalidValueSpecError) as exc_info:
            resolve_value(EnumValueSpec(), default_cfg, 4)

        assert exc_info.value.index == 4

    def test_name_from_serialized(self, default_cfg):
        value = resolve_value(EnumValueSpec(serialized="done"), default_cfg, 0)

        assert value.name == "done"
        assert value.serialized == "done"

    def test_serialized_kept_as_supplied(self):
        cfg = CaseConversionConfig.from_names(value_strategy="kebab-to-pascal")
        value = resolve_value(EnumValueSpec(serialized="in-progress"), cfg, 0)

        assert value.name == "InProgress"
        assert value.serialized == "in-progress"

    def test_name_from_serialized_strips_symbols(self, default_cfg):
        value = resolve_value(EnumValueSpec(serialized="in progress!"), default_cfg, 0)

        assert value.name == "inprogress"
        assert value.serialized == "in progress!"

    def test_serialized_from_name_defaults(self, default_cfg):
        value = resolve_value(EnumValueSpec(name="InProgress"), default_cfg, 0)

        assert value.name == "InProgress"
        assert value.serialized == "InProgress"

    def test_serialized_from_name_with_type_converter(self):
        cfg = CaseConversionConfig.from_names(type_strategy="pascal-to-kebab-lower")
        value = resolve_value(EnumValueSpec(name="InProgress"), cfg, 0)

        assert value.serialized == "in-progress"

    def test_phrase_name(self, default_cfg):
        value = resolve_value(EnumValueSpec(name="in progress"), default_cfg, 0)

        assert value.serialized == "InProgress"
        assert value.name == "inprogress"

    def test_both_present(self, default_cfg):
        value = resolve_value(
            EnumValueSpec(name="In Progress", serialized="in_progress"), default_cfg, 0
        )

        assert value.name == "InProgress"
        assert value.serialized == "in_progress"

    def test_name_empty_after_stripping(self, default_cfg):
        with pytest.raises(InvalidValueSpecError):
            resolve_value(EnumValueSpec(name="!!", serialized="bang"), default_cfg, 1)

    def test_parse_from_kept(self, default_cfg):
        value = resolve_value(
            EnumValueSpec(serialized="done", parse_from=["complete", "finished"]),
            default_cfg,
            0,
        )

        assert value.parse_from == ("complete", "finished")
        assert value.aliases == ("done", "complete", "finished")

    def test_aliases_include_name(self, default_cfg):
        value = resolve_value(EnumValueSpec(name="Done", serialized="done"), default_cfg, 0)

        assert value.aliases == ("done", "Done")
        assert value.match_keys == frozenset({"done"})


class TestValidation:
    """Tests for uniqueness and ambiguity checks."""

    def test_invalid_value_reports_index(self, default_cfg):
        specs = [
            EnumValueSpec(serialized="a"),
            EnumValueSpec(serialized="b"),
            EnumValueSpec(),
        ]

        with pytest.raises(InvalidValueSpecError) as exc_info:
            resolve_values(specs, default_cfg)

        assert exc_info.value.index == 2

    def test_values_differing_only_by_case(self, default_cfg):
        specs = [EnumValueSpec(serialized="Active"), EnumValueSpec(serialized="active")]

        with pytest.raises(AmbiguousEnumValueError):
            resolve_values(specs, default_cfg)

    def test_duplicate_names(self, default_cfg):
        specs = [
            EnumValueSpec(name="Open", serialized="open"),
            EnumValueSpec(name="Open", serialized="opened"),
        ]

        with pytest.raises(DuplicateEnumNameError) as exc_info:
            resolve_values(specs, default_cfg)

        assert exc_info.value.name == "Open"

    def test_names_equal_after_stripping(self, default_cfg):
        specs = [
            EnumValueSpec(name="In Progress", serialized="a"),
            EnumValueSpec(name="InProgress", serialized="b"),
        ]

        with pytest.raises(DuplicateEnumNameError):
            resolve_values(specs, default_cfg)

    def test_ambiguous_parse_from(self, default_cfg):
        specs = [
            EnumValueSpec(serialized="open", parse_from=["new"]),
            EnumValueSpec(serialized="closed", parse_from=["NEW"]),
        ]

        with pytest.raises(AmbiguousEnumValueError):
            resolve_values(specs, default_cfg)

    def test_alias_matching_other_serialized(self, default_cfg):
        specs = [
            EnumValueSpec(serialized="open"),
            EnumValueSpec(serialized="closed", parse_from=["Open"]),
        ]

        with pytest.raises(AmbiguousEnumValueError):
            resolve_values(specs, default_cfg)

    def test_self_overlap_allowed(self, default_cfg):
        specs = [EnumValueSpec(name="Done", serialized="done", parse_from=["DONE"])]

        values = resolve_values(specs, default_cfg)

        assert len(values) == 1

    def test_errors_share_base(self):
        assert issubclass(AmbiguousEnumValueError, ResolutionError)
        assert issubclass(DuplicateEnumNameError, ResolutionError)
        assert issubclass(InvalidValueSpecError, ResolutionError)


class TestDerivedNames:
    """Tests for names derived from the output path."""

    def test_package_name(self):
        assert derive_package_name("/project/status/task-status.enum.go") == "status"
        assert derive_package_name("/project/my-enums/x.go") == "my_enums"

    def test_type_name(self):
        assert derive_type_name("/project/status/task-status.enum.go") == "TaskStatus"
        assert derive_type_name("/project/status/task_status.py") == "TaskStatus"
        assert derive_type_name("/project/status/color") == "Color"

    def test_companion_name(self):
        assert derive_companion_name("TaskStatus") == "TaskStatuses"
        assert derive_companion_name("Color") == "Colors"


class TestResolveDefinition:
    """Tests for resolving whole documents."""

    def test_derives_names_from_output_path(self, task_status_document):
        definition = resolve_definition(
            task_status_document, output_path="/project/status/task-status.enum.go"
        )

        assert definition.package_name == "status"
        assert definition.type_name == "TaskStatus"
        assert definition.companion_name == "TaskStatuses"
        assert definition.companion_struct_name == "taskStatuses"
        assert definition.description == "Lifecycle of a task."

    def test_uses_document_serialize_settings(self, task_status_document):
        definition = resolve_definition(
            task_status_document, output_path="/project/status/task-status.enum.go"
        )

        assert [v.serialized for v in definition.values] == ["in-progress", "done", "blocked"]
        assert [v.name for v in definition.values] == ["InProgress", "done", "Blocked"]

    def test_explicit_names_win(self):
        document = _document([{"serialized": "a"}], type="Letter", package="letters")
        definition = resolve_definition(document, output_path="/x/other/thing.enum.go")

        assert definition.type_name == "Letter"
        assert definition.package_name == "letters"
        assert definition.companion_name == "Letters"

    def test_missing_output_path(self):
        document = EnumSpecDocument.from_dict({"values": ["a"]})

        with pytest.raises(MissingOutputPathError):
            resolve_definition(document)

    def test_unknown_strategy(self):
        document = _document(["a"], serialize={"value": "nope-to-pascal"})

        with pytest.raises(UnknownCaseStrategyError):
            resolve_definition(document)

    def test_default_header(self):
        definition = resolve_definition(_document(["a"]))

        assert DEFAULT_HEADER[0] in definition.header

    def test_inline_header(self):
        definition = resolve_definition(_document(["a"], header="Owned by the platform team"))

        assert "Owned by the platform team" in definition.header
        assert "DO NOT EDIT" not in definition.header

    def test_no_values(self):
        definition = resolve_definition(_document([]))

        assert definition.values == ()

    def test_get_value(self, task_status_document):
        definition = resolve_definition(task_status_document, output_path="/p/s/t.enum.go")

        assert definition.get_value("done").serialized == "done"
        assert definition.get_value("missing") is None


class TestScenarios:
    """End-to-end resolution plus matching."""

    def test_kebab_lower_type_converter(self):
        document = _document([{"name": "InProgress"}], serialize={"type": "pascal-to-kebab-lower"})

        companion = build_companion(resolve_definition(document))
        value = companion.parse("in-progress")

        assert value.serialized == "in-progress"
        assert companion.parse("IN-PROGRESS") is value

    def test_parse_from_aliases(self):
        document = _document([{"serialized": "done", "parse-from": ["complete", "finished"]}])
        definition = resolve_definition(document)
        companion = build_companion(definition)

        done = definition.values[0]
        assert done.name == "done"
        assert companion.parse("FINISHED") is done
        assert companion.parse("Complete") is done

        with pytest.raises(UnrecognizedValueError) as exc_info:
            companion.parse("doneX")

        assert exc_info.value.text == "doneX"
        assert exc_info.value.valid_values == ["done"]

    def test_every_alias_parses_to_its_value(self, task_status_document):
        definition = resolve_definition(task_status_document, output_path="/p/s/t.enum.go")
        companion = build_companion(definition)

        for value in definition.values:
            for alias in value.aliases:
                assert companion.parse(alias) is value
                assert companion.parse(alias.upper()) is value
                assert companion.parse(alias.lower()) is value
