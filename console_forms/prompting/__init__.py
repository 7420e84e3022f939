"""
Prompting Layer - Asking Questions

Defines the Prompter contract (ask, validate, retry) and the template
helpers used to render question labels and rejection messages.
"""

from console_forms.prompting.interface import Prompter
from console_forms.prompting.loader import render
from console_forms.prompting.templates import Template

__all__ = [
    "Prompter",
    "Template",
    "render",
]
