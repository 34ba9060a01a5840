"""
tests/test_templates.py
Unit tests for the Jinja2 template engine wrapper.
"""

import pytest

from queryset_gen.codegen.core.templates import (
    TemplateEngine,
    TemplateError,
    create_template_engine,
    go_comment,
    indent_code,
)


@pytest.fixture()
def engine():
    return TemplateEngine()


def render(engine, source, **context):
    engine.add_template("inline", source)
    return engine.render_template("inline", context)


def test_memory_template(engine):
    engine.add_template("greet", "func {{ name }}() {}")
    assert engine.template_exists("greet")
    assert engine.render_template("greet", {"name": "Run"}) == "func Run() {}"


def test_no_html_escaping(engine):
    value = 'd.Where("a < ?", a) && &x'
    assert render(engine, "{{ value }}", value=value) == value


def test_undefined_variable_is_an_error(engine):
    with pytest.raises(TemplateError, match="inline"):
        render(engine, "{{ missing }}")


def test_unknown_template(engine):
    assert not engine.template_exists("nope")
    with pytest.raises(TemplateError, match="nope"):
        engine.render_template("nope", {})


@pytest.mark.parametrize(
    "source, context, expected",
    [
        ("{{ 'UserID' | db_name }}", {}, "user_id"),
        ("{{ 'CreatedAt' | lower_first }}", {}, "createdAt"),
        ("{{ 'order by' | title_words }}", {}, "Order By"),
        ("{{ text | indent_code }}", {"text": "a\n\nb"}, "\ta\n\n\tb"),
        ("{{ text | comment }}", {"text": "one\ntwo"}, "// one\n// two"),
    ],
)
def test_filters(engine, source, context, expected):
    assert render(engine, source, **context) == expected


def test_indent_code_custom_prefix():
    assert indent_code("a\nb", prefix="  ") == "  a\n  b"


def test_go_comment_keeps_paragraphs():
    assert go_comment("Registered users.\n\nSoft deleted rows are kept.\n") == (
        "// Registered users.\n//\n// Soft deleted rows are kept."
    )


def test_file_templates_and_memory_precedence(tmp_path):
    (tmp_path / "x.j2").write_text("from file")
    (tmp_path / "y.j2").write_text("{{ name }} from file")
    engine = TemplateEngine(tmp_path)
    engine.add_template("x.j2", "from memory")

    assert engine.render_template("y.j2", {"name": "y"}) == "y from file"
    assert engine.render_template("x.j2", {}) == "from memory"


def test_create_template_engine(tmp_path):
    assert create_template_engine() is create_template_engine()
    assert create_template_engine(tmp_path).template_dir == tmp_path
    assert create_template_engine(tmp_path) is not create_template_engine(tmp_path)
