"""
Engine - Form Traversal Layer

The FormEngine walks a declared field tree in order and builds a ResultTree
from the answers a Prompter returns.
-----------------------------------------------

For every item, in declaration order:
1. FieldGroups run their fields once per iteration, each iteration from an
    empty context, and store the list of kept iterations.
2. Fields whose conditions fail are skipped (nothing written, nothing asked).
3. A field's callback may reconfigure it from the answers so far.
4. The Prompter asks the materialized question (retries happen there).
5. Fields with a sub-form hand their answer to a fresh child engine; the
    child's results replace the answer.

Any failure aborts the whole pass with a single FormProcessingError.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from ..config import settings
from ..domain.models import FieldGroup, FormField, FormItem
from ..exceptions import FormProcessingError
from ..prompting.interface import Prompter
from ..state.models import ResultTree
from .conditions import ConditionEvaluator
from .questions import format_answer, materialize

logger = logging.getLogger(__name__)


class FormEngine:
    """
    Owns one declared field tree and the ResultTree built from it.

    Sub-forms get their own child engine sharing the same Prompter, so no
    answers leak between scopes.
    """

    def __init__(
        self,
        prompter: Prompter,
        fields: Optional[Iterable[Any]] = None,
        evaluator: Optional[ConditionEvaluator] = None,
    ):
        self.prompter = prompter
        self.evaluator = evaluator or ConditionEvaluator()
        self._fields: List[FormItem] = []
        self._results = ResultTree()

        if fields:
            self.add_fields(fields)

    # ==========================================================================
    # Form Building
    # ==========================================================================

    def add_field(self, item: FormItem) -> "FormEngine":
        self._fields.append(item)
        return self

    def add_fields(self, items: Iterable[Any]) -> "FormEngine":
        """Adds FormFields and FieldGroups; anything else is ignored."""
        for item in items:
            if not isinstance(item, (FormField, FieldGroup)):
                continue
            self.add_field(item)
        return self

    def get_fields(self) -> Iterator[FormItem]:
        return iter(list(self._fields))

    # ==========================================================================
    # Processing
    # ==========================================================================

    def process(self) -> ResultTree:
        """
        Asks every applicable field and returns the results.

        Once a pass has produced results they are kept: later calls return
        them without asking again.
        """
        if self._results.is_empty:
            try:
                self._results = self._process_items(self._fields, ResultTree())
            except FormProcessingError:
                raise
            except Exception as e:
                message = str(e).strip()
                logger.error(f"Form processing aborted: {message}")
                raise FormProcessingError(message) from e
            logger.info(f"Form processed with {len(self._results)} top-level entries")
        return self._results

    def get_results(self, filter_empty: bool = True) -> Dict[str, Any]:
        return self._results.get_results(filter_empty)

    @property
    def results(self) -> ResultTree:
        return self._results

    def save(
        self,
        sink: Callable[[Dict[str, Any]], Any],
        confirm: bool = True,
        confirm_message: Optional[str] = None,
    ) -> bool:
        """
        Processes the form, then hands the filtered results to `sink`.

        With `confirm`, a yes/no question (default yes) is asked first and
        the sink only runs when it is answered yes. Returns whether the sink
        was called.
        """
        self.process()

        # Without a terminal the confirmation takes its default answer
        if confirm and self.prompter.interactive:
            confirmation = FormField(
                name="confirm_save",
                label=confirm_message or settings.SAVE_CONFIRM_MESSAGE,
                type="boolean",
                default=True,
            )
            answer = self._ask(confirmation)
            if not format_answer(confirmation, answer):
                logger.info("Save declined")
                return False

        sink(self.get_results())
        logger.info("Form results saved")
        return True

    # ==========================================================================
    # Traversal (The Core Logic)
    # ==========================================================================

    def _process_items(self, items: Iterable[FormItem], results: ResultTree) -> ResultTree:
        for item in items:
            if isinstance(item, FieldGroup):
                results.record(item.name, self._process_group(item))
            elif isinstance(item, FormField):
                self._process_field(item, results)
        return results

    def _process_field(self, field: FormField, results: ResultTree) -> None:
        if not self.evaluator.evaluate(field, results):
            logger.debug(f"Skipping '{field.name}': conditions not met")
            return

        if field.field_callback is not None:
            field.field_callback(field, results)

        if not self.prompter.interactive:
            logger.debug(f"Skipping '{field.name}': prompter is not interactive")
            return

        try:
            answer = self._ask(field)
            if field.subform is not None:
                results.record(field.name, self._process_subform(field, answer))
            else:
                results.record(field.name, format_answer(field, answer))

        except FormProcessingError:
            # Already reported by the nested engine
            raise
        except Exception as e:
            message = str(e).strip()
            logger.error(f"Form processing aborted at '{field.name}': {message}")
            raise FormProcessingError(message) from e

    def _ask(self, field: FormField) -> Any:
        return self.prompter.ask(materialize(field))

    def _process_subform(self, field: FormField, answer: Any) -> ResultTree:
        """Runs the fields the sub-form callback adds in a fresh, empty-context engine."""
        child = FormEngine(self.prompter, evaluator=self.evaluator)
        field.subform(child, answer)
        logger.debug(f"Sub-form of '{field.name}' declares {len(list(child.get_fields()))} items")
        return child.process()

    def _process_group(self, group: FieldGroup) -> List[ResultTree]:
        """
        Runs the group's fields until its predicate says stop.

        Without a predicate the group runs once. With one, an iteration is
        kept only when the predicate returns True for it; the iteration that
        returns False ends the loop and is dropped.
        """
        iterations: List[ResultTree] = []

        while True:
            result = self._process_items(group.fields, ResultTree())

            if group.loop_predicate is None:
                iterations.append(result)
                break

            if not group.loop_predicate(result):
                break
            iterations.append(result)

        logger.debug(f"Group '{group.name}' kept {len(iterations)} iterations")
        return iterations
