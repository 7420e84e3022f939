"""
Repository Layer - Form Lookup

Defines where built forms come from: an in-memory repository and
filesystem discovery of FormDefinition subclasses.
"""

from console_forms.repositories.discovery import FormDiscovery
from console_forms.repositories.forms import FormRepository, StaticFormRepository

__all__ = [
    "FormDiscovery",
    "FormRepository",
    "StaticFormRepository",
]
