"""
Condition Evaluation

Decides whether a field is asked by comparing its conditions against the
answers collected so far. Paths are dotted ("questions.how_old") and are
resolved one segment at a time through nested results.
"""

import logging
from typing import Any, Mapping, Optional

from ..config import settings
from ..domain.models import Condition, ConditionOperator, FormField
from ..state.models import ABSENT, ResultTree

logger = logging.getLogger(__name__)


class ConditionEvaluator:
    """
    Checks a field's conditions against the answers collected so far.

    Every condition must hold. A path that resolves to nothing compares as
    an unanswered (None) value.
    """

    def __init__(self, delimiter: Optional[str] = None):
        self.delimiter = delimiter or settings.PATH_DELIMITER

    def resolve(self, path: str, results: ResultTree) -> Any:
        """
        Walks `path` through the results.
        Returns ABSENT as soon as a segment has no entry.
        """
        current: Any = results
        for segment in path.split(self.delimiter):
            current = _child(current, segment)
            if current is ABSENT:
                return ABSENT
        return current

    def evaluate(self, field: FormField, results: ResultTree) -> bool:
        """True when every condition on the field holds. No conditions means True."""
        for path, condition in field.conditions.items():
            if not self.check(path, condition, results):
                logger.debug(f"Condition on '{path}' failed for field '{field.name}'")
                return False
        return True

    def check(self, path: str, condition: Condition, results: ResultTree) -> bool:
        actual = self.resolve(path, results)

        # A nested result holding an entry keyed by the whole path is compared
        # through that entry; otherwise it is compared as a whole.
        nested = _child(actual, path)
        if nested is not ABSENT:
            actual = nested

        matches = _loosely_equal(_comparable(actual), condition.value)
        if condition.operator == ConditionOperator.NOT_EQUALS:
            return not matches
        return matches


def _child(value: Any, segment: str) -> Any:
    if isinstance(value, (ResultTree, Mapping)):
        return value[segment] if segment in value else ABSENT
    if isinstance(value, list) and segment.isdigit():
        index = int(segment)
        return value[index] if index < len(value) else ABSENT
    return ABSENT


def _comparable(value: Any) -> Any:
    if value is ABSENT:
        return None
    if isinstance(value, ResultTree):
        return value.to_dict()
    if isinstance(value, list):
        return [_comparable(item) for item in value]
    return value


def _loosely_equal(actual: Any, expected: Any) -> bool:
    """
    Equality that tolerates string/number mismatches ("1000" == 1000).
    None, "" and False all count as unanswered and match each other.
    Other booleans and containers are compared strictly.
    """
    if actual == expected:
        return True
    if _is_unanswered(actual) and _is_unanswered(expected):
        return True
    scalars = (str, int, float)
    if (
        isinstance(actual, scalars)
        and isinstance(expected, scalars)
        and not isinstance(actual, bool)
        and not isinstance(expected, bool)
    ):
        return str(actual).strip() == str(expected).strip()
    return False


def _is_unanswered(value: Any) -> bool:
    return value is None or value is False or (isinstance(value, str) and value == "")
