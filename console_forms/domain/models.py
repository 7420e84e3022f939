"""
Domain Layer - Static Form Definitions

This module defines the declarative building blocks of a console form:
Fields, the Conditions that gate them, and FieldGroups that repeat a block
of fields. These dataclasses are built once by the caller and treated as
templates; the FormEngine walks them to produce a ResultTree.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Literal,
    Mapping,
    Optional,
    Sequence,
    Union,
)

from ..config import settings

if TYPE_CHECKING:
    from ..execution.engine import FormEngine
    from ..state.models import ResultTree

"""
FieldType selects how a field is asked and how its answer is formatted:
- text: Free-form answer, stored as given (after normalization)
- boolean: Yes/no confirmation, stored as a bool
- select: One of a fixed (or dynamically computed) set of options
"""
FieldType = Literal["text", "boolean", "select"]

Validator = Callable[[Any], Any]
Normalizer = Callable[[Any], Any]


class ConditionOperator(str, Enum):
    """Comparison applied between a previously collected answer and the expected value."""
    EQUALS = "="
    NOT_EQUALS = "!="


@dataclass
class Condition:
    """
    Expected value for a previously answered field.

    Conditions live on FormField.conditions keyed by the dotted path of the
    field they inspect (e.g. "questions.how_old").

    Attributes:
        value: The value the referenced answer is compared against.
        operator: EQUALS or NOT_EQUALS.
    """
    value: Any
    operator: ConditionOperator = ConditionOperator.EQUALS


@dataclass
class FormField:
    """
    One logical question.

    Attributes:
        name: Result key, unique within its enclosing field list. Spaces are
            replaced with underscores.
        label: Prompt text. Derived from the name when omitted.
        type: FieldType
        default: Value used when the answer is left empty. Boolean fields
            default to True.
        required: Reject empty answers (never applies to boolean fields).
        max_attempts: Retries allowed before the whole session fails.
        hidden: Do not echo the answer.
        validators: Checks run in order; raise ValueError (or return False) to reject.
        normalizer: Transform applied to the raw answer. Replaces the
            type-specific default transform when set.
        conditions: Dotted path -> Condition. All must hold for the field to be asked.
        options: Select choices, either a sequence of values or a key -> label mapping.
        true_pattern: Regex (case-insensitive) marking a boolean answer as "yes".
        field_callback: Called with (field, results) right before the question
            is built; may reconfigure the field, e.g. its options.
        subform: Called with (child engine, answer); fields it adds to the
            child engine are processed immediately and their results replace
            this field's answer.
    """
    name: str
    label: Optional[str] = None
    type: FieldType = "text"
    default: Any = None
    required: bool = field(default_factory=lambda: settings.DEFAULT_REQUIRED)
    max_attempts: int = field(default_factory=lambda: settings.DEFAULT_MAX_ATTEMPTS)
    hidden: bool = False
    validators: List[Validator] = field(default_factory=list)
    normalizer: Optional[Normalizer] = None
    conditions: Dict[str, Condition] = field(default_factory=dict)
    options: Union[Sequence[Any], Mapping[Any, Any]] = field(default_factory=list)
    true_pattern: str = field(default_factory=lambda: settings.BOOLEAN_TRUE_PATTERN)
    field_callback: Optional[Callable[["FormField", "ResultTree"], None]] = None
    subform: Optional[Callable[["FormEngine", Any], None]] = None

    def __post_init__(self):
        self.name = self.name.replace(" ", "_")
        if self.type == "boolean" and self.default is None:
            self.default = True

    @property
    def data_type(self) -> str:
        return "boolean" if self.type == "boolean" else "string"

    @property
    def display_label(self) -> str:
        if self.label is not None:
            return self.label
        return self.name.replace("_", " ").title()

    def add_condition(
        self,
        path: str,
        value: Any,
        operator: ConditionOperator = ConditionOperator.EQUALS,
    ) -> "FormField":
        self.conditions[path] = Condition(value=value, operator=ConditionOperator(operator))
        return self

    def add_validator(self, validator: Validator) -> "FormField":
        self.validators.append(validator)
        return self


@dataclass
class FieldGroup:
    """
    A named block of fields processed zero or more times.

    Each iteration is processed from an empty context and produces its own
    ResultTree; the group stores the list of kept iterations under its name.

    Attributes:
        name: Result key for the list of iterations.
        fields: FormFields and nested FieldGroups, in declaration order.
        loop_predicate: Called with the latest iteration's ResultTree.
            True keeps the iteration and loops again; False discards it and
            stops. Without a predicate the group runs exactly once.
    """
    name: str
    fields: List["FormItem"] = field(default_factory=list)
    loop_predicate: Optional[Callable[["ResultTree"], bool]] = None

    def add_field(self, item: "FormItem") -> "FieldGroup":
        self.fields.append(item)
        return self

    def add_fields(self, items: Iterable[Any]) -> "FieldGroup":
        for item in items:
            if not isinstance(item, (FormField, FieldGroup)):
                continue
            self.add_field(item)
        return self


FormItem = Union[FormField, FieldGroup]


class FormDefinition(ABC):
    """
    A named, reusable form.

    Subclasses are picked up by FormDiscovery and registered under `name`.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Machine name the built form is registered under."""
        pass

    @abstractmethod
    def build_form(self) -> List[FormItem]:
        """Builds the field tree for this form."""
        pass
