from collections import deque
from typing import Any, Iterable, List, Optional

from ...exceptions import PromptCancelled
from ...schemas.questions import QuestionSpec
from ..interface import Prompter


class ScriptedPrompter(Prompter):
    """
    Replays a fixed sequence of answers, one per read.

    Used for non-interactive runs (piped input, CI) and in tests. Every
    question read is recorded in `asked`, every rejection in `errors`.
    """

    def __init__(self, answers: Optional[Iterable[Any]] = None, interactive: bool = True):
        self.answers = deque(answers or [])
        self.interactive = interactive
        self.asked: List[QuestionSpec] = []
        self.errors: List[str] = []

    def read_answer(self, question: QuestionSpec) -> Any:
        self.asked.append(question)
        if not self.answers:
            raise PromptCancelled(f"No scripted answer left for '{question.field_name}'.")
        return self.answers.popleft()

    def report_error(
        self, question: QuestionSpec, message: str, attempts_left: int
    ) -> None:
        self.errors.append(message)

    @property
    def remaining(self) -> int:
        return len(self.answers)
