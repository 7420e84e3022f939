"""
Schemas - Question Descriptors

Defines the QuestionSpec contract shared between the FormEngine, which
builds questions from fields, and Prompter backends, which ask them.
"""

from console_forms.schemas.questions import Choice, QuestionKind, QuestionSpec

__all__ = [
    "Choice",
    "QuestionKind",
    "QuestionSpec",
]
