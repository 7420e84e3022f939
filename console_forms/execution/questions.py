"""
Question Materialization

Turns a FormField into the QuestionSpec a Prompter asks, and turns the
accepted answer back into the value stored in the results. Field types
only differ here: how the question is built and how the answer is
formatted.
"""

import logging
import re
from typing import Any, Callable, List, Mapping

from ..domain.models import FormField
from ..exceptions import ConfigurationError
from ..prompting.loader import render
from ..prompting.templates import Template
from ..schemas.questions import Choice, QuestionKind, QuestionSpec, is_blank

logger = logging.getLogger(__name__)


def materialize(field: FormField) -> QuestionSpec:
    """
    Builds the question for a field in its current configuration.
    Raises ConfigurationError for a select field without options.
    """
    if field.type == "boolean":
        question = QuestionSpec(
            field_name=field.name,
            kind=QuestionKind.CONFIRM,
            label=format_label(field),
            default=field.default,
            hidden=field.hidden,
            # "no" is a real answer, so boolean fields are never required
            required=False,
            max_attempts=field.max_attempts,
            validators=list(field.validators),
            normalizer=field.normalizer or boolean_normalizer(field),
        )
    elif field.type == "select":
        question = QuestionSpec(
            field_name=field.name,
            kind=QuestionKind.CHOICE,
            label=format_label(field),
            default=field.default,
            hidden=field.hidden,
            required=field.required,
            max_attempts=field.max_attempts,
            choices=build_choices(field),
            validators=list(field.validators),
            normalizer=field.normalizer,
        )
    elif field.type == "text":
        question = QuestionSpec(
            field_name=field.name,
            kind=QuestionKind.TEXT,
            label=format_label(field),
            default=field.default,
            hidden=field.hidden,
            required=field.required,
            max_attempts=field.max_attempts,
            validators=list(field.validators),
            normalizer=field.normalizer,
        )
    else:
        raise ConfigurationError(f"Unknown field type '{field.type}' for field '{field.name}'.")

    logger.debug(f"Materialized {question.kind.value} question for '{field.name}'")
    return question


def format_label(field: FormField) -> str:
    """Renders "Label [default]: ", or "Label: " when there is no default."""
    hint = field.default
    if field.type == "boolean" and hint is not None:
        hint = "yes" if hint else "no"
    return render(Template.QUESTION_LABEL, label=field.display_label, hint=hint)


def build_choices(field: FormField) -> List[Choice]:
    options = field.options
    if not options:
        raise ConfigurationError(f"Select field '{field.name}' has no options.")

    if isinstance(options, Mapping):
        return [Choice(value=key, title=str(label)) for key, label in options.items()]

    return [
        Choice(value=option, title=str(option), aliases=[str(index)])
        for index, option in enumerate(options)
    ]


def boolean_normalizer(field: FormField) -> Callable[[Any], Any]:
    """
    Maps an answer onto True/False using the field's regex.
    Booleans (e.g. the default) pass through unchanged.
    """
    pattern = re.compile(field.true_pattern, re.IGNORECASE)

    def normalize(answer: Any) -> Any:
        if isinstance(answer, bool):
            return answer
        if is_blank(answer):
            return bool(field.default)
        return bool(pattern.search(str(answer)))

    return normalize


def format_answer(field: FormField, answer: Any) -> Any:
    """
    The value stored for an accepted answer.

    A user normalizer has already shaped the answer and takes precedence
    over the boolean conversion.
    """
    if field.type == "boolean" and field.normalizer is None:
        return boolean_normalizer(field)(answer)
    return answer
