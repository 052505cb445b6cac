"""LLM provider module for aicommit.

This module provides a unified interface to the supported LLM providers.
The active provider comes from aicommit.config.Settings.
"""

from aicommit.config import DEFAULT_MAX_TOKENS, DEFAULT_PROVIDER, DEFAULT_TEMPERATURE, LLMProvider, Settings
from aicommit.llm.base import BaseLLMProvider
from aicommit.llm.exceptions import (
    AiErrorKind,
    AuthError,
    LLMError,
    MalformedResponseError,
    MissingAPIKeyError,
    NetworkError,
    NoValidSuggestionsError,
    RateLimitedError,
    ServerError,
)
from aicommit.llm.parsing import split_candidates, strip_code_fences


def get_provider(
    provider: LLMProvider | None = None,
    model: str | None = None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        provider: The provider to use. Defaults to DEFAULT_PROVIDER from config.
        model: The model to use. Defaults to the provider's default model.
        max_tokens: Output token budget per request.
        temperature: Sampling temperature.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    provider = provider or DEFAULT_PROVIDER
    kwargs = {"model": model, "max_tokens": max_tokens, "temperature": temperature}

    if provider == LLMProvider.GOOGLE:
        from aicommit.llm.google_provider import GoogleProvider

        return GoogleProvider(**kwargs)

    elif provider == LLMProvider.ANTHROPIC:
        from aicommit.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(**kwargs)

    elif provider == LLMProvider.OPENAI:
        from aicommit.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(**kwargs)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


def get_provider_for_settings(settings: Settings) -> BaseLLMProvider:
    """Get the provider described by the effective settings."""
    return get_provider(
        provider=settings.provider,
        model=settings.model,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
    )


__all__ = [
    "BaseLLMProvider",
    "AiErrorKind",
    "LLMError",
    "MissingAPIKeyError",
    "AuthError",
    "RateLimitedError",
    "NetworkError",
    "ServerError",
    "MalformedResponseError",
    "NoValidSuggestionsError",
    "split_candidates",
    "strip_code_fences",
    "get_provider",
    "get_provider_for_settings",
]
