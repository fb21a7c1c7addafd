# ubergallery/utils/templates.py
"""
Jinja2 environment for gallery themes.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from ..exceptions import ConfigurationError

ERROR_TEMPLATE = "error.html"


def theme_template_name(theme_name: str) -> str:
    return f"{theme_name}.html"


def create_template_environment(view_directory: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(view_directory)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def preload_theme(environment: Environment, theme_name: str) -> None:
    """
    Load the theme and error templates once so a bad theme fails at startup.

    Raises:
        ConfigurationError: If either template is missing
    """
    for name in (theme_template_name(theme_name), ERROR_TEMPLATE):
        try:
            environment.get_template(name)
        except TemplateNotFound as e:
            raise ConfigurationError(f"Template not found: {name}") from e
