"""
Form Discovery

Finds FormDefinition subclasses in Python modules below a set of
directories and builds them. Each directory is treated as the root of
`package`, so "<dir>/project/forms.py" is imported as
"<package>.project.forms".
"""

import importlib
import inspect
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..config import settings
from ..domain.models import FormDefinition, FormItem
from ..exceptions import DiscoveryError

logger = logging.getLogger(__name__)


class FormDiscovery:
    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = settings.DISCOVERY_MAX_DEPTH if max_depth is None else max_depth

    def discover(
        self,
        directories: Union[str, Path, Iterable[Union[str, Path]]],
        package: str,
    ) -> Dict[str, List[FormItem]]:
        """
        Returns {form name: built field list} for every form found.
        Raises DiscoveryError when a module cannot be imported.
        """
        if isinstance(directories, (str, Path)):
            directories = [directories]

        forms: Dict[str, List[FormItem]] = {}
        for directory in directories:
            root = Path(directory)
            for path in self._find_modules(root):
                for definition in self._load_definitions(root, path, package):
                    forms[definition.name] = definition.build_form()

        logger.info(f"Discovered {len(forms)} forms: {sorted(forms)}")
        return forms

    def _find_modules(self, root: Path) -> List[Path]:
        if not root.is_dir():
            raise DiscoveryError(f"Form directory '{root}' does not exist.")

        modules = []
        for path in sorted(root.rglob("*.py")):
            depth = len(path.relative_to(root).parts) - 1
            if depth > self.max_depth or path.name == "__init__.py":
                continue
            modules.append(path)
        return modules

    def _load_definitions(self, root: Path, path: Path, package: str) -> List[FormDefinition]:
        relative = path.relative_to(root).with_suffix("")
        module_name = ".".join([package, *relative.parts])

        try:
            module = importlib.import_module(module_name)
        except Exception as e:
            raise DiscoveryError(f"Unable to import form module '{module_name}': {e}") from e

        definitions = []
        for _, cls in inspect.getmembers(module, inspect.isclass):
            # Only forms declared in this module, not ones it imports
            if cls.__module__ != module.__name__:
                continue
            if not issubclass(cls, FormDefinition) or inspect.isabstract(cls):
                continue
            try:
                definitions.append(cls())
            except Exception as e:
                raise DiscoveryError(f"Unable to build form class '{cls.__name__}': {e}") from e

        if not definitions:
            logger.debug(f"No forms declared in '{module_name}'")
        return definitions
