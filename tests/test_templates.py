import pytest

from genbuilder.codegen.core.templates import TemplateEngine, TemplateError


@pytest.fixture
def template_dir(tmp_path):
    (tmp_path / "greet.j2").write_text("hello {{ who }}\n", encoding="utf-8")
    (tmp_path / "doc.j2").write_text("{{ text|comment }}", encoding="utf-8")
    (tmp_path / "raw.j2").write_text("&{{ name }}{} {{ value }}", encoding="utf-8")
    (tmp_path / "strict.j2").write_text("{{ missing }}", encoding="utf-8")
    return tmp_path


@pytest.fixture
def engine(template_dir):
    return TemplateEngine(template_dir)


def test_renders_from_directory(engine):
    assert engine.render_template("greet.j2", {"who": "go"}) == "hello go\n"


def test_comment_filter(engine):
    text = engine.render_template("doc.j2", {"text": "first\n\nsecond"})
    assert text == "// first\n//\n// second"


def test_go_syntax_is_not_escaped(engine):
    text = engine.render_template("raw.j2", {"name": "Jason", "value": "a < b && c"})
    assert text == "&Jason{} a < b && c"


def test_missing_variable_is_an_error(engine):
    with pytest.raises(TemplateError):
        engine.render_template("strict.j2", {})


def test_missing_template_is_an_error(engine):
    with pytest.raises(TemplateError):
        engine.render_template("nope.j2", {})


def test_engine_without_directory_has_no_templates():
    with pytest.raises(TemplateError):
        TemplateEngine().render_template("greet.j2", {"who": "go"})
