"""
Domain Layer - Static Form Definitions

Defines the declarative structure of a console form: Fields, Conditions,
FieldGroups and the discoverable FormDefinition contract.
"""

from console_forms.domain.models import (
    Condition,
    ConditionOperator,
    FieldGroup,
    FieldType,
    FormDefinition,
    FormField,
    FormItem,
)

__all__ = [
    "Condition",
    "ConditionOperator",
    "FieldGroup",
    "FieldType",
    "FormDefinition",
    "FormField",
    "FormItem",
]
