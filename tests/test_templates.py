"""Tests for the template engine."""

import pytest

from enumer.codegen.core.templates import TemplateEngine, TemplateError, comment_block


class TestCommentBlock:
    def test_prefixes_lines(self):
        assert comment_block("one\n\ntwo", "#") == "# one\n#\n# two"

    def test_empty(self):
        assert comment_block("") == ""
        assert comment_block(None) == ""


class TestTemplateEngine:
    def test_renders_directory_templates(self, tmp_path):
        (tmp_path / "hello.j2").write_text("{{ text | comment('//') }}\n")
        engine = TemplateEngine(tmp_path)

        assert engine.template_exists("hello.j2")
        assert engine.render_template("hello.j2", {"text": "hi"}) == "// hi\n"

    def test_custom_filter(self, tmp_path):
        (tmp_path / "quote.j2").write_text("{{ text | shout }}")
        engine = TemplateEngine(tmp_path)
        engine.add_filter("shout", str.upper)

        assert engine.render_template("quote.j2", {"text": "hi"}) == "HI"

    def test_missing_template(self):
        engine = TemplateEngine()

        assert not engine.template_exists("nope.j2")
        with pytest.raises(TemplateError):
            engine.render_template("nope.j2", {})

    def test_undefined_variable(self, tmp_path):
        (tmp_path / "strict.j2").write_text("{{ missing }}")

        with pytest.raises(TemplateError):
            TemplateEngine(tmp_path).render_template("strict.j2", {})
