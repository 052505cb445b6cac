"""Google Gemini provider implementation."""

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from aicommit.config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMProvider
from aicommit.llm.base import BaseLLMProvider
from aicommit.llm.exceptions import (
    AuthError,
    LLMError,
    MalformedResponseError,
    NetworkError,
    RateLimitedError,
    ServerError,
)


def _map_api_error(error: genai_errors.APIError) -> LLMError:
    """Translate a Gemini API error into the aicommit taxonomy."""
    code = error.code or 0
    detail = error.message or str(error)
    # Gemini reports an invalid key as 400 INVALID_ARGUMENT
    if code in (401, 403) or (code == 400 and "api key" in detail.lower()):
        return AuthError(f"Google Gemini rejected the API key: {detail}")
    if code == 429:
        return RateLimitedError(f"Google Gemini rate limit reached: {detail}")
    return ServerError(f"Google Gemini request failed with status {code}: {detail}")


class GoogleProvider(BaseLLMProvider):
    """Google Gemini LLM provider."""

    default_model = DEFAULT_MODELS[LLMProvider.GOOGLE]

    def get_api_key(self) -> str:
        """Get the Gemini API key from the environment.

        Raises:
            MissingAPIKeyError: If GEMINI_API_KEY is not set.
        """
        return self._get_api_key_from_env(API_KEY_ENV_VARS[LLMProvider.GOOGLE], "Google Gemini")

    def generate(self, prompt: str, count: int) -> list[str]:
        """Generate candidates with Gemini, one API candidate per message."""
        api_key = self.get_api_key()
        client = genai.Client(api_key=api_key)

        try:
            response = client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    candidate_count=max(count, 1),
                    max_output_tokens=self.max_tokens,
                    temperature=self.temperature,
                ),
            )
        except genai_errors.APIError as e:
            raise _map_api_error(e)
        except httpx.TransportError as e:
            raise NetworkError(f"Could not reach Google Gemini: {e}")

        texts = []
        for candidate in response.candidates or []:
            content = candidate.content
            if content is None or not content.parts:
                continue
            text = "".join(part.text for part in content.parts if part.text)
            if text.strip():
                texts.append(text)

        if not texts:
            raise MalformedResponseError("Google Gemini returned no candidate text")
        return texts
