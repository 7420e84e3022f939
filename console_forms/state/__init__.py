"""
State Layer - Runtime Result Models

Defines the ResultTree produced by processing a form and the ABSENT
sentinel returned by path lookups that find nothing.
"""

from console_forms.state.models import (
    ABSENT,
    ResultTree,
    is_empty_value,
)

__all__ = [
    "ABSENT",
    "ResultTree",
    "is_empty_value",
]
