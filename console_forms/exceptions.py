"""
Form Exceptions

Error taxonomy for the form engine. Everything raised by this package
derives from FormError so callers can catch a single type at the session
boundary.
"""

from typing import Optional


class FormError(Exception):
    """Base class for all form errors."""
    pass


class ValidationRejected(FormError, ValueError):
    """
    A single answer failed validation.
    Recovered by the Prompter, which re-asks until max_attempts is reached.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class AttemptsExhausted(FormError):
    """Raised by the Prompter when every allowed attempt was rejected."""

    def __init__(self, message: str, field_name: Optional[str] = None, attempts: int = 0):
        super().__init__(message)
        self.field_name = field_name
        self.attempts = attempts


class ConfigurationError(FormError):
    """A field was materialized with invalid configuration (e.g. a select without options)."""
    pass


class PromptCancelled(FormError):
    """The prompt backend returned no answer (Ctrl-C, EOF or an exhausted script)."""
    pass


class FormProcessingError(FormError):
    """
    The single failure raised out of FormEngine.process().
    The underlying exception is chained as __cause__.
    """
    pass


class FormNotFoundError(FormError, LookupError):
    """Raised when a repository has no form registered under the requested name."""
    pass


class DiscoveryError(FormError):
    """Raised when a form module cannot be loaded during discovery."""
    pass
