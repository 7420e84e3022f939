"""
Schemas - Backend-Agnostic Question Descriptors

This module defines the QuestionSpec handed to a Prompter for every field.
It carries everything a backend needs to ask, retry and accept an answer,
so prompter implementations never look at FormField directly.
"""
from enum import Enum
from typing import Any, Callable, List, Optional

from pydantic import BaseModel, Field

from ..exceptions import ValidationRejected


class QuestionKind(str, Enum):
    """
    How the backend should present the question.

    TEXT: Free-form input (masked when hidden).
    CONFIRM: Yes/no input interpreted by the question's normalizer.
    CHOICE: Pick one of the question's choices.
    """
    TEXT = "text"
    CONFIRM = "confirm"
    CHOICE = "choice"


class Choice(BaseModel):
    """
    A selectable option.

    value is what gets stored; title is what gets shown. aliases lists extra
    spellings that select the option (the position of a sequence option).
    """
    value: Any
    title: str
    aliases: List[str] = Field(default_factory=list)


def is_blank(answer: Any) -> bool:
    return answer is None or (isinstance(answer, str) and answer.strip() == "")


class QuestionSpec(BaseModel):
    """
    The materialized form of one field.
    """
    field_name: str = Field(..., description="Result key of the field being asked.")
    kind: QuestionKind = QuestionKind.TEXT
    label: str = Field(..., description="Prompt text with the default hint rendered inline.")
    default: Any = Field(None, description="Answer used when the input is left empty.")
    hidden: bool = False
    required: bool = Field(False, description="Reject empty answers.")
    max_attempts: int = Field(3, ge=1)
    choices: List[Choice] = Field(default_factory=list)
    validators: List[Callable[[Any], Any]] = Field(default_factory=list)
    normalizer: Optional[Callable[[Any], Any]] = None

    def apply_default(self, raw: Any) -> Any:
        if is_blank(raw):
            return self.default
        if isinstance(raw, str):
            return raw.strip()
        return raw

    def normalize(self, answer: Any) -> Any:
        if self.normalizer is None or answer is None:
            return answer
        return self.normalizer(answer)

    def match_choice(self, answer: Any) -> Optional[Choice]:
        """Resolves an answer by value, then by title, then by alias."""
        text = str(answer).strip()
        for choice in self.choices:
            if answer == choice.value or text == str(choice.value):
                return choice
        for choice in self.choices:
            if text == choice.title:
                return choice
        for choice in self.choices:
            if text in choice.aliases:
                return choice
        return None

    def check_answer(self, answer: Any) -> Any:
        """
        Runs the validation chain and returns the accepted answer.

        Order: required check, choice membership, then each validator in
        registration order. The first rejection raises ValidationRejected.
        """
        if self.required and is_blank(answer):
            raise ValidationRejected("Field is required.")

        if self.choices and not is_blank(answer):
            choice = self.match_choice(answer)
            if choice is None:
                raise ValidationRejected(f'Value "{answer}" is invalid.')
            answer = choice.value

        for validator in self.validators:
            try:
                outcome = validator(answer)
            except ValidationRejected:
                raise
            except ValueError as e:
                raise ValidationRejected(str(e)) from e
            if outcome is False:
                raise ValidationRejected(f'Value "{answer}" is invalid.')

        return answer
