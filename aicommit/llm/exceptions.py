"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- AiErrorKind: Category reported to the user for a failed AI round
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when the API key is not set
- AuthError, RateLimitedError, NetworkError, ServerError: Provider failures
- MalformedResponseError: Provider answered with nothing usable
- NoValidSuggestionsError: No candidate passed validation
"""

from enum import Enum
from typing import Optional

from aicommit.errors import AICommitError, PreconditionError


class AiErrorKind(Enum):
    NETWORK = "network"
    AUTH = "auth"
    RATE_LIMITED = "rate_limited"
    MALFORMED_RESPONSE = "malformed_response"
    NO_VALID_SUGGESTIONS = "no_valid_suggestions"


class LLMError(AICommitError):
    """Base exception for LLM-related errors."""

    kind: Optional[AiErrorKind] = None


class MissingAPIKeyError(LLMError, PreconditionError):
    """Raised when the required API key is not set."""

    pass


class AuthError(LLMError):
    """Raised when the provider rejects the API key."""

    kind = AiErrorKind.AUTH


class RateLimitedError(LLMError):
    """Raised when the provider throttles the request."""

    kind = AiErrorKind.RATE_LIMITED


class NetworkError(LLMError):
    """Raised when the provider cannot be reached."""

    kind = AiErrorKind.NETWORK


class ServerError(NetworkError):
    """Raised when the provider fails or refuses the request."""

    pass


class MalformedResponseError(LLMError):
    """Raised when the response carries no candidate text."""

    kind = AiErrorKind.MALFORMED_RESPONSE


class NoValidSuggestionsError(LLMError):
    """Raised when every candidate fails validation."""

    kind = AiErrorKind.NO_VALID_SUGGESTIONS
