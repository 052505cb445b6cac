"""Anthropic Claude provider implementation."""

import anthropic
from anthropic import Anthropic

from aicommit.config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMProvider
from aicommit.llm.base import BaseLLMProvider
from aicommit.llm.exceptions import (
    AuthError,
    MalformedResponseError,
    NetworkError,
    RateLimitedError,
    ServerError,
)


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider.

    The Messages API returns a single completion, so all requested messages
    come back in one text block, one per line.
    """

    default_model = DEFAULT_MODELS[LLMProvider.ANTHROPIC]

    def get_api_key(self) -> str:
        """Get the Anthropic API key from the environment.

        Raises:
            MissingAPIKeyError: If ANTHROPIC_API_KEY is not set.
        """
        return self._get_api_key_from_env(API_KEY_ENV_VARS[LLMProvider.ANTHROPIC], "Anthropic")

    def generate(self, prompt: str, count: int) -> list[str]:
        api_key = self.get_api_key()
        client = Anthropic(api_key=api_key)

        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except (anthropic.AuthenticationError, anthropic.PermissionDeniedError) as e:
            raise AuthError(f"Anthropic rejected the API key: {e}")
        except anthropic.RateLimitError as e:
            raise RateLimitedError(f"Anthropic rate limit reached: {e}")
        except anthropic.APIConnectionError as e:
            raise NetworkError(f"Could not reach Anthropic: {e}")
        except anthropic.APIStatusError as e:
            raise ServerError(f"Anthropic request failed with status {e.status_code}: {e}")

        texts = [
            block.text
            for block in message.content
            if getattr(block, "type", None) == "text" and block.text.strip()
        ]
        if not texts:
            raise MalformedResponseError("Anthropic returned no text content")
        return texts
