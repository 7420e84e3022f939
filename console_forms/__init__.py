"""
Console Forms

An interactive form engine for terminal question/answer sessions:
conditional fields, dynamically reconfigured fields, nested sub-forms and
repeatable field groups, collected into a nested ResultTree.
"""

from console_forms.config import configure_logging, settings
from console_forms.domain import (
    Condition,
    ConditionOperator,
    FieldGroup,
    FieldType,
    FormDefinition,
    FormField,
    FormItem,
)
from console_forms.exceptions import (
    AttemptsExhausted,
    ConfigurationError,
    DiscoveryError,
    FormError,
    FormNotFoundError,
    FormProcessingError,
    PromptCancelled,
    ValidationRejected,
)
from console_forms.schemas import Choice, QuestionKind, QuestionSpec
from console_forms.state import ABSENT, ResultTree
from console_forms.prompting import Prompter
from console_forms.prompting.adapters import ScriptedPrompter, TerminalPrompter
from console_forms.execution import ConditionEvaluator, FormEngine
from console_forms.repositories import (
    FormDiscovery,
    FormRepository,
    StaticFormRepository,
)

__all__ = [
    # Configuration
    "configure_logging",
    "settings",
    # Domain Layer
    "Condition",
    "ConditionOperator",
    "FieldGroup",
    "FieldType",
    "FormDefinition",
    "FormField",
    "FormItem",
    # Errors
    "AttemptsExhausted",
    "ConfigurationError",
    "DiscoveryError",
    "FormError",
    "FormNotFoundError",
    "FormProcessingError",
    "PromptCancelled",
    "ValidationRejected",
    # Schemas
    "Choice",
    "QuestionKind",
    "QuestionSpec",
    # State Layer
    "ABSENT",
    "ResultTree",
    # Prompting
    "Prompter",
    "ScriptedPrompter",
    "TerminalPrompter",
    # Execution Layer
    "ConditionEvaluator",
    "FormEngine",
    # Repositories
    "FormDiscovery",
    "FormRepository",
    "StaticFormRepository",
]
