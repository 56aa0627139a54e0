"""
Rendering Registries

Centralized registry for loading and caching visual templates and their
style presets. Each template lives in its own directory under the templates
path:

    templates/
        macros.xml.jinja          # shared section macros
        professional/
            template.xml.jinja    # layout (extends nothing, imports macros)
            style.yaml            # fonts, sizes, colors, layout switches
        modern/ ...
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from markupsafe import Markup, escape
from omegaconf import OmegaConf

from vitae.utils.markup import parse_description, strip_control_characters
from vitae.utils.timestamp import format_month

load_dotenv()
DEFAULT_TEMPLATES_PATH = Path(__file__).parent / "templates"
TEMPLATES_PATH = Path(os.getenv("VITAE_TEMPLATES_PATH", str(DEFAULT_TEMPLATES_PATH)))

TEMPLATE_FILENAME = "template.xml.jinja"
STYLE_FILENAME = "style.yaml"


def _segments_markup(segments) -> Markup:
    parts = []
    for segment in segments:
        chunk = escape(segment.text)
        if segment.bold:
            chunk = Markup("<b>%s</b>") % chunk
        if segment.italic:
            chunk = Markup("<i>%s</i>") % chunk
        parts.append(chunk)
    return Markup("").join(parts)


def xml_safe(value):
    """Output finalizer: strip XML-illegal characters from rendered strings."""
    if isinstance(value, Markup):
        return Markup(strip_control_characters(value))
    if isinstance(value, str):
        return strip_control_characters(value)
    return value


def description_lines(text: str):
    """Parsed description lines with their markup, for templates."""
    return [
        {"bullet": line.bullet, "markup": _segments_markup(line.segments)}
        for line in parse_description(text or "")
    ]


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 layout templates and style presets.

    Templates produce résumé markup: a small XML vocabulary whose line
    contents are reportlab paragraph markup (<b>, <i>, <a>). Autoescaping is
    on, so draft text can never inject tags.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base path for template directories. Defaults to
                            VITAE_TEMPLATES_PATH from environment, or the
                            packaged templates
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}
        self._style_cache: Dict[str, Dict[str, Any]] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            finalize=xml_safe,
        )
        self.env.filters["month"] = format_month
        self.env.filters["description_lines"] = description_lines

    def get_template(self, template_name: str) -> Template:
        """
        Get a layout template by name, loading and caching it if necessary.

        Args:
            template_name: Name of the template directory (e.g., 'modern')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if template_name in self._cache:
            return self._cache[template_name]

        template_path = f"{template_name}/{TEMPLATE_FILENAME}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{template_name}' at {self.templates_path / template_path}"
            ) from e

        self._cache[template_name] = template
        return template

    def get_style(self, template_name: str) -> Dict[str, Any]:
        """
        Get the style preset of a template as a plain dict.

        Raises:
            FileNotFoundError: If style.yaml doesn't exist
        """
        if template_name in self._style_cache:
            return self._style_cache[template_name]

        style_path = self.get_style_path(template_name)
        if not style_path.exists():
            raise FileNotFoundError(f"Style preset not found for '{template_name}' at {style_path}")

        style = OmegaConf.to_container(OmegaConf.load(style_path), resolve=True)
        self._style_cache[template_name] = style
        return style

    def get_template_path(self, template_name: str) -> Path:
        return self.templates_path / template_name / TEMPLATE_FILENAME

    def get_style_path(self, template_name: str) -> Path:
        return self.templates_path / template_name / STYLE_FILENAME

    def clear_cache(self):
        """Clear the template and style caches."""
        self._cache.clear()
        self._style_cache.clear()

    def is_cached(self, template_name: str) -> bool:
        return template_name in self._cache
