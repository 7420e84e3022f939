from console_forms.prompting.adapters.scripted import ScriptedPrompter
from console_forms.prompting.adapters.terminal import TerminalPrompter

__all__ = [
    "ScriptedPrompter",
    "TerminalPrompter",
]
