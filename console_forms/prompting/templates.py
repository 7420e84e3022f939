"""
Names of the prompt text templates, one per file in templates/.
"""


class Template:
    """Template name constants. Use these instead of raw strings."""

    QUESTION_LABEL = "question_label"
    VALIDATION_ERROR = "validation_error"
