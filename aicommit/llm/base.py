"""Base class shared by LLM providers."""

import os
from abc import ABC, abstractmethod

from aicommit.config import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from aicommit.llm.exceptions import MissingAPIKeyError


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers.

    A provider turns one prompt into raw candidate texts. It does not parse
    or validate them and keeps no state between calls.
    """

    default_model: str = ""

    def __init__(
        self,
        model: str | None = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        self.model = model or self.default_model
        self.max_tokens = max_tokens
        self.temperature = temperature

    @abstractmethod
    def generate(self, prompt: str, count: int) -> list[str]:
        """Ask the model for commit message candidates.

        Args:
            prompt: The full prompt.
            count: Number of messages requested.

        Returns:
            Raw candidate texts in the order the provider returned them.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            AuthError: If the key is rejected.
            RateLimitedError: If the provider throttles the request.
            NetworkError: If the provider cannot be reached or fails.
            MalformedResponseError: If the response has no text.
        """
        pass

    @abstractmethod
    def get_api_key(self) -> str:
        """Get the API key from the environment.

        Raises:
            MissingAPIKeyError: If the API key is not set.
        """
        pass

    def _get_api_key_from_env(self, env_var_name: str, provider_name: str) -> str:
        api_key = os.getenv(env_var_name)
        if api_key and api_key.strip():
            return api_key.strip()
        raise MissingAPIKeyError(
            f"{provider_name} API key not found. Set it with: export {env_var_name}=your_key_here"
        )
