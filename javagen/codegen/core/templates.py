"""
Template engine wrapper for code generation.

Templates cover the fixed parts of a compilation unit (package and import
declarations); everything indentation-sensitive goes through the code writers.
"""

from typing import Dict, Any, Iterable, Optional, Tuple

from jinja2 import Environment, DictLoader


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


# Built-in templates
UNIT_HEADER_TEMPLATE = """\
{% if package %}
package {{ package }};

{% endif %}
{% if imports %}
{% for qualifier, name in imports %}
import {{ qualifier }}.{{ name }};
{% endfor %}

{% endif %}
"""

BUILTIN_TEMPLATES = {
    "unit_header.java.j2": UNIT_HEADER_TEMPLATE,
}


class TemplateEngine:
    """Jinja2 environment over the built-in templates."""

    def __init__(self, line_ending: str = "\n"):
        """
        Initialize template engine.

        Args:
            line_ending: Line ending used in rendered output
        """
        self.line_ending = line_ending
        self._env = Environment(
            loader=DictLoader(dict(BUILTIN_TEMPLATES)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            newline_sequence=line_ending,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of a built-in template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {str(e)}") from e


def create_template_engine(line_ending: str = "\n") -> TemplateEngine:
    """Create a template engine for the given line ending."""
    return TemplateEngine(line_ending)


def render_unit_header(
    package: str,
    imports: Iterable[Tuple[str, str]],
    line_ending: str = "\n",
    engine: Optional[TemplateEngine] = None,
) -> str:
    """
    Render the package and import declarations of a compilation unit.

    Args:
        package: Package name, empty for the default package
        imports: ``(qualifier, name)`` pairs in output order
        line_ending: Line ending used in the output
        engine: Engine to render with (a fresh one by default)

    Returns:
        Header text, empty when there is neither a package nor an import
    """
    engine = engine or create_template_engine(line_ending)
    return engine.render_template(
        "unit_header.java.j2", {"package": package, "imports": list(imports)}
    )
