"""OpenAI GPT provider implementation."""

import openai
from openai import OpenAI

from aicommit.config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMProvider
from aicommit.llm.base import BaseLLMProvider
from aicommit.llm.exceptions import (
    AuthError,
    MalformedResponseError,
    NetworkError,
    RateLimitedError,
    ServerError,
)


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    default_model = DEFAULT_MODELS[LLMProvider.OPENAI]

    def get_api_key(self) -> str:
        """Get the OpenAI API key from the environment.

        Raises:
            MissingAPIKeyError: If OPENAI_API_KEY is not set.
        """
        return self._get_api_key_from_env(API_KEY_ENV_VARS[LLMProvider.OPENAI], "OpenAI")

    def generate(self, prompt: str, count: int) -> list[str]:
        """Generate candidates with OpenAI, one choice per message."""
        api_key = self.get_api_key()
        client = OpenAI(api_key=api_key)

        try:
            response = client.chat.completions.create(
                model=self.model,
                n=max(count, 1),
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            raise AuthError(f"OpenAI rejected the API key: {e}")
        except openai.RateLimitError as e:
            raise RateLimitedError(f"OpenAI rate limit reached: {e}")
        except openai.APIConnectionError as e:
            raise NetworkError(f"Could not reach OpenAI: {e}")
        except openai.APIStatusError as e:
            raise ServerError(f"OpenAI request failed with status {e.status_code}: {e}")

        texts = [
            choice.message.content
            for choice in response.choices
            if choice.message.content and choice.message.content.strip()
        ]
        if not texts:
            raise MalformedResponseError("OpenAI returned no message content")
        return texts
