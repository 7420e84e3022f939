"""
Template rendering for prompt text.

Question labels and rejection messages are Jinja2 templates kept in the
templates directory and addressed by the constants on Template.
"""

from functools import lru_cache
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from .templates import Template

TEMPLATES_DIR = Path(__file__).parent / "templates"
TEMPLATE_SUFFIX = ".jinja2"


def _template_names() -> List[str]:
    return [value for name, value in vars(Template).items() if not name.startswith("_")]


def _check_templates():
    """Every Template constant needs a file. Fails fast at import."""
    missing = [
        name
        for name in _template_names()
        if not (TEMPLATES_DIR / f"{name}{TEMPLATE_SUFFIX}").exists()
    ]
    if missing:
        raise FileNotFoundError(f"Templates missing from {TEMPLATES_DIR}: {missing}")


_check_templates()


@lru_cache(maxsize=1)
def _get_environment() -> Environment:
    # Plain terminal text: no escaping, and the file's final newline is dropped
    # so labels keep their trailing space.
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
    )


def render(template_name: str, **context) -> str:
    """Renders the named template (without suffix) with the given variables."""
    template = _get_environment().get_template(f"{template_name}{TEMPLATE_SUFFIX}")
    return template.render(**context)
