"""
Exceptions raised by the SDK itself.
Transport failures are not wrapped; they surface as requests exceptions.
"""


class MaestroError(Exception):
    """Base class for errors raised locally by the SDK."""


class RequiredError(MaestroError):
    """A required parameter was None when an operation was called."""

    def __init__(self, field: str, msg: str | None = None):
        super().__init__(msg or f"Required parameter {field} was missing.")
        self.field = field


class ConfigurationError(MaestroError):
    """The configuration could not be assembled from the environment."""
