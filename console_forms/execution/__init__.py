"""
Execution Layer - Form Traversal

Defines the FormEngine (tree walk, sub-forms, repeat groups), the
ConditionEvaluator that gates fields, and question materialization.
"""

from console_forms.execution.conditions import ConditionEvaluator
from console_forms.execution.engine import FormEngine
from console_forms.execution.questions import format_answer, materialize

__all__ = [
    "ConditionEvaluator",
    "FormEngine",
    "format_answer",
    "materialize",
]
