"""
Request body templates.
"""

from typing import Any, Dict

from jinja2 import Environment, StrictUndefined
from jinja2 import TemplateError as JinjaTemplateError

from ..exceptions import TemplateError

_environment = Environment(
    undefined=StrictUndefined,
    autoescape=True,
    keep_trailing_newline=True,
)


def load(path: str) -> str:
    """
    Read a template file.

    Args:
        path: Template file path

    Returns:
        Template source

    Raises:
        TemplateError: If the file cannot be read
    """
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return handle.read()
    except OSError as e:
        raise TemplateError(f"Unable to load template {path}: {e}") from e


def render(path: str, params: Dict[str, Any]) -> str:
    """
    Load a template and render it with the given parameters.

    Values are XML-escaped. Every placeholder must be supplied.

    Args:
        path: Template file path
        params: Template parameters

    Returns:
        Rendered body

    Raises:
        TemplateError: If loading or rendering fails
    """
    source = load(path)
    try:
        return _environment.from_string(source).render(**params)
    except JinjaTemplateError as e:
        raise TemplateError(f"Unable to render template {path}: {e}") from e
