from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from ..domain.models import FormDefinition, FormItem
from ..exceptions import FormNotFoundError


# The Interface
class FormRepository(ABC):
    """
    Defines how the application looks up built forms by name.
    The FormEngine only ever receives the resulting field list, so where
    forms come from (code, discovery, ...) can change freely.
    """

    @abstractmethod
    def get_form(self, name: str) -> List[FormItem]:
        """
        Retrieves the field list of a form.
        Raises FormNotFoundError if not found.
        """
        pass


class StaticFormRepository(FormRepository):
    """
    Keeps built forms in memory, keyed by form name.
    """

    def __init__(self, forms: Optional[Dict[str, List[FormItem]]] = None):
        self._index: Dict[str, List[FormItem]] = dict(forms or {})

    @classmethod
    def from_definitions(cls, definitions: Iterable[FormDefinition]) -> "StaticFormRepository":
        return cls({definition.name: definition.build_form() for definition in definitions})

    def register(self, name: str, fields: List[FormItem]) -> "StaticFormRepository":
        self._index[name] = fields
        return self

    def get_form(self, name: str) -> List[FormItem]:
        if name not in self._index:
            raise FormNotFoundError(f"Unable to find {name} form.")
        return self._index[name]

    def names(self) -> List[str]:
        return list(self._index)
