"""Exceptions raised by term_ai.

Every failure the CLI knows how to report derives from TermAIError, so the
entry point can print a single error line and exit non-zero.
"""


class TermAIError(Exception):
    """Base class for all term_ai errors."""


class TransportError(TermAIError):
    """Raised when an HTTP call fails or returns a non-success status."""


class MalformedResponseError(TermAIError):
    """Raised when a response body does not have the expected shape."""


class MissingCredentialError(TermAIError):
    """Raised when a provider that needs an API key is selected without one."""


class UnknownProviderError(TermAIError):
    """Raised for an unrecognized search provider name."""


class UnknownToolError(TermAIError):
    """Raised when the model asks for a tool that is not registered."""


class MissingParameterError(TermAIError):
    """Raised when a tool call lacks a required argument."""


class MaxIterationsExceededError(TermAIError):
    """Raised when the tool loop runs out of iterations without an answer."""

    def __init__(self, max_iterations: int):
        self.max_iterations = max_iterations
        super().__init__(
            f"Maximum iterations ({max_iterations}) exceeded. "
            "The model may be stuck in a tool-calling loop."
        )


class EmptyInputError(TermAIError):
    """Raised when no prompt was given via argument or stdin."""
