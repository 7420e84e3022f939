import logging
from abc import ABC, abstractmethod
from typing import Any

from ..exceptions import AttemptsExhausted, ValidationRejected
from ..schemas.questions import QuestionSpec

logger = logging.getLogger(__name__)


class Prompter(ABC):
    """
    Abstract Base Class interface that defines the contract for any prompt
    backend (terminal, scripted replay, ...).

    Backends only implement read_answer(); the ask/normalize/validate/retry
    cycle is shared so every backend enforces max_attempts the same way.
    """

    # Non-interactive prompters are never asked anything; the engine skips fields.
    interactive: bool = True

    def ask(self, question: QuestionSpec) -> Any:
        """
        Asks until the answer passes the question's validation chain.
        Raises AttemptsExhausted once max_attempts answers were rejected.
        """
        last_error = None

        for attempt in range(1, question.max_attempts + 1):
            raw = self.read_answer(question)
            try:
                answer = question.normalize(question.apply_default(raw))
                return question.check_answer(answer)
            except ValueError as e:
                # Normalizers reject answers they cannot convert the same way validators do
                rejection = e if isinstance(e, ValidationRejected) else ValidationRejected(str(e))
                last_error = rejection
                logger.warning(
                    f"Answer for '{question.field_name}' rejected "
                    f"(attempt {attempt}/{question.max_attempts}): {rejection.reason}"
                )
                self.report_error(question, rejection.reason, question.max_attempts - attempt)

        raise AttemptsExhausted(
            last_error.reason if last_error else "Too many invalid answers.",
            field_name=question.field_name,
            attempts=question.max_attempts,
        )

    @abstractmethod
    def read_answer(self, question: QuestionSpec) -> Any:
        """
        Presents the question once and returns the raw answer.
        """
        pass

    def report_error(
        self, question: QuestionSpec, message: str, attempts_left: int
    ) -> None:
        """Shows a rejection message before the next attempt. Silent by default."""
        pass
