"""
Pytest fixtures shared by the form engine tests.
Terminal interaction is replaced by ScriptedPrompter throughout.
"""

import pytest

from console_forms import FormEngine, ScriptedPrompter


@pytest.fixture
def make_prompter():
    """Build a ScriptedPrompter that replays the given answers in order."""

    def _make(*answers, interactive=True):
        return ScriptedPrompter(list(answers), interactive=interactive)

    return _make


@pytest.fixture
def make_engine(make_prompter):
    """Build a FormEngine over the given fields, answered by the given script."""

    def _make(fields, answers=(), interactive=True):
        prompter = make_prompter(*answers, interactive=interactive)
        return FormEngine(prompter, fields), prompter

    return _make
