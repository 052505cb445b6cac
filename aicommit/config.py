"""Configuration for ai-commit.

Everything the tool needs is either an in-source constant below or an
environment variable (optionally provided through a .env file). There is no
on-disk configuration file and no cache.
"""

import os
from dataclasses import dataclass
from enum import Enum

from dotenv import load_dotenv

from aicommit.errors import PreconditionError


class LLMProvider(Enum):
    """Supported LLM providers."""

    GOOGLE = "google"
    ANTHROPIC = "anthropic"
    OPENAI = "openai"


class ConfigError(PreconditionError):
    """Raised when an environment override has an invalid value."""

    pass


# ============================================================
# DEFAULT VALUES
# ============================================================

DEFAULT_PROVIDER = LLMProvider.GOOGLE
DEFAULT_MAX_TOKENS = 1024
DEFAULT_TEMPERATURE = 0.3

DEFAULT_MODELS = {
    LLMProvider.GOOGLE: "gemini-2.0-flash",
    LLMProvider.ANTHROPIC: "claude-3-5-haiku-latest",
    LLMProvider.OPENAI: "gpt-4o-mini",
}

# Description length bounds, measured on the text after "<type>: "
MIN_DESCRIPTION_CHARS = 10
MAX_DESCRIPTION_CHARS = 72

# Number of candidates requested per AI round
AUTO_SUGGESTION_COUNT = 1
INTERACTIVE_SUGGESTION_COUNT = 5


# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VARS = {
    LLMProvider.GOOGLE: "GEMINI_API_KEY",
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
}

# Environment overrides for the defaults above
PROVIDER_ENV_VAR = "AICOMMIT_PROVIDER"
MODEL_ENV_VAR = "AICOMMIT_MODEL"
MAX_TOKENS_ENV_VAR = "AICOMMIT_MAX_TOKENS"
TEMPERATURE_ENV_VAR = "AICOMMIT_TEMPERATURE"


@dataclass(frozen=True)
class Settings:
    """Effective settings for one invocation."""

    provider: LLMProvider = DEFAULT_PROVIDER
    model: str = DEFAULT_MODELS[DEFAULT_PROVIDER]
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    min_description_chars: int = MIN_DESCRIPTION_CHARS
    max_description_chars: int = MAX_DESCRIPTION_CHARS

    @property
    def api_key_env_var(self) -> str:
        return API_KEY_ENV_VARS[self.provider]


def parse_provider(value: str) -> LLMProvider:
    """Parse a provider name (case-insensitive).

    Raises:
        ConfigError: If the name is not a supported provider.
    """
    try:
        return LLMProvider(value.strip().lower())
    except ValueError:
        valid = ", ".join(p.value for p in LLMProvider)
        raise ConfigError(f"Unknown provider '{value}'. Valid providers: {valid}")


def load_config(provider: str | None = None, model: str | None = None) -> Settings:
    """Build the effective settings.

    Precedence: explicit arguments (CLI flags) > environment (.env included) > defaults.

    Args:
        provider: Provider name override.
        model: Model id override.

    Returns:
        The effective Settings.

    Raises:
        ConfigError: If an override cannot be parsed.
    """
    load_dotenv()

    provider_name = provider or os.getenv(PROVIDER_ENV_VAR)
    active_provider = parse_provider(provider_name) if provider_name else DEFAULT_PROVIDER

    active_model = model or os.getenv(MODEL_ENV_VAR) or DEFAULT_MODELS[active_provider]

    max_tokens = DEFAULT_MAX_TOKENS
    raw_max_tokens = os.getenv(MAX_TOKENS_ENV_VAR)
    if raw_max_tokens:
        try:
            max_tokens = int(raw_max_tokens)
        except ValueError:
            raise ConfigError(f"{MAX_TOKENS_ENV_VAR} must be an integer, got '{raw_max_tokens}'")
        if max_tokens <= 0:
            raise ConfigError(f"{MAX_TOKENS_ENV_VAR} must be positive, got {max_tokens}")

    temperature = DEFAULT_TEMPERATURE
    raw_temperature = os.getenv(TEMPERATURE_ENV_VAR)
    if raw_temperature:
        try:
            temperature = float(raw_temperature)
        except ValueError:
            raise ConfigError(f"{TEMPERATURE_ENV_VAR} must be a number, got '{raw_temperature}'")

    return Settings(
        provider=active_provider,
        model=active_model,
        max_tokens=max_tokens,
        temperature=temperature,
    )
