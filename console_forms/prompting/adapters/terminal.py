from typing import Any

import questionary

from ...exceptions import PromptCancelled
from ...schemas.questions import QuestionKind, QuestionSpec
from ..interface import Prompter
from ..loader import render
from ..templates import Template


class TerminalPrompter(Prompter):
    """
    Asks questions on the terminal through questionary.

    Only presentation lives here; defaults, normalization and validation
    are applied by Prompter.ask() on whatever this returns.
    """

    def read_answer(self, question: QuestionSpec) -> Any:
        if question.kind == QuestionKind.CONFIRM:
            prompt = questionary.confirm(
                question.label, default=bool(question.default), auto_enter=False
            )
        elif question.kind == QuestionKind.CHOICE:
            choices = [
                questionary.Choice(title=choice.title, value=choice.value)
                for choice in question.choices
            ]
            default = question.match_choice(question.default)
            prompt = questionary.select(
                question.label,
                choices=choices,
                default=default.value if default is not None else None,
            )
        elif question.hidden:
            prompt = questionary.password(question.label)
        else:
            prompt = questionary.text(question.label)

        answer = prompt.ask()

        # questionary returns None when the user aborts (Ctrl-C / EOF)
        if answer is None:
            raise PromptCancelled(f"Prompt for '{question.field_name}' was cancelled.")
        return answer

    def report_error(
        self, question: QuestionSpec, message: str, attempts_left: int
    ) -> None:
        questionary.print(
            render(Template.VALIDATION_ERROR, message=message, attempts_left=attempts_left),
            style="fg:ansired",
        )
