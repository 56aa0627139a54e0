"""Unit tests for TemplateRegistry class."""

import pytest
from pathlib import Path
from jinja2 import TemplateNotFound

from vitae.contexts.rendering.registries import TemplateRegistry, description_lines
from vitae.contexts.rendering.variants import TemplateId


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
@pytest.mark.parametrize("template", [t.value for t in TemplateId])
def test_every_template_identity_has_layout_and_style(template):
    registry = TemplateRegistry()

    assert registry.get_template_path(template).exists()
    style = registry.get_style(template)
    assert {"fonts", "sizes", "colors", "layout"} <= set(style)


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("modern")
    assert registry.is_cached("modern")

    template2 = registry.get_template("modern")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent_layout")


@pytest.mark.unit
def test_get_style_not_found():
    with pytest.raises(FileNotFoundError):
        TemplateRegistry().get_style("nonexistent_layout")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("professional")

    assert isinstance(path, Path)
    assert path.name == "template.xml.jinja"
    assert "professional" in str(path)


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    registry.get_template("compact")
    registry.get_style("compact")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0
    assert len(registry._style_cache) == 0


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    layout_dir = tmp_path / "plain"
    layout_dir.mkdir()
    (layout_dir / "template.xml.jinja").write_text("<resume>{{ contacts }}</resume>")
    (layout_dir / "style.yaml").write_text("name: Plain\n")

    registry = TemplateRegistry(templates_path=tmp_path)

    assert registry.get_template("plain").render(contacts="Ada & co") == "<resume>Ada &amp; co</resume>"
    assert registry.get_style("plain") == {"name": "Plain"}


@pytest.mark.unit
def test_description_lines_escape_and_style():
    """Draft text cannot inject tags; inline markup becomes <b>/<i>."""
    lines = description_lines("Built <tools> & more\n- Cut costs by **30%**\n• *Led* team")

    assert [line["bullet"] for line in lines] == [False, True, True]
    assert str(lines[0]["markup"]) == "Built &lt;tools&gt; &amp; more"
    assert str(lines[1]["markup"]) == "Cut costs by <b>30%</b>"
    assert str(lines[2]["markup"]) == "<i>Led</i> team"
