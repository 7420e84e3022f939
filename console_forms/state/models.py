"""
State Layer - Runtime Result Models

This module defines the ResultTree, the ordered and nested structure built
while a form is processed. Values are scalar answers, nested ResultTrees
(sub-forms) or lists of ResultTrees (repeat group iterations).
"""

from typing import Any, Dict, ItemsView, KeysView

from pydantic import BaseModel, Field

from ..exceptions import ConfigurationError


class _Absent:
    """Marks a lookup that found nothing, as opposed to an answer that was empty."""

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def is_empty_value(value: Any) -> bool:
    """Empty string, None, False and empty containers are hidden by filtered views."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, dict, ResultTree)):
        return len(value) == 0
    return False


class ResultTree(BaseModel):
    """
    Answers collected by one processing pass, keyed by field or group name.
    Insertion order mirrors declaration order.
    """
    entries: Dict[str, Any] = Field(default_factory=dict)

    def record(self, name: str, value: Any) -> None:
        """Writes a value once. A second write for the same key is a configuration error."""
        if name in self.entries:
            raise ConfigurationError(
                f"Duplicate field name '{name}': a result was already recorded for it."
            )
        self.entries[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        return self.entries.get(name, default)

    def keys(self) -> KeysView[str]:
        return self.entries.keys()

    def items(self) -> ItemsView[str, Any]:
        return self.entries.items()

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def get_results(self, filter_empty: bool = True) -> Dict[str, Any]:
        """
        Plain-dict view of the tree. With filter_empty, empty values are left
        out at every level; the stored tree is not modified.
        """
        view = {}
        for name, value in self.entries.items():
            if filter_empty and is_empty_value(value):
                continue
            view[name] = _plain(value, filter_empty)
        return view

    def to_dict(self) -> Dict[str, Any]:
        return self.get_results(filter_empty=False)

    def __getitem__(self, name: str) -> Any:
        return self.entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __len__(self) -> int:
        return len(self.entries)


def _plain(value: Any, filter_empty: bool) -> Any:
    if isinstance(value, ResultTree):
        return value.get_results(filter_empty)
    if isinstance(value, list):
        return [_plain(item, filter_empty) for item in value]
    return value
