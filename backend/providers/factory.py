"""Factory functions for creating LLM providers."""

from typing import Optional

from .base import LLMProvider, ModelConfig
from .gemini import GeminiProvider


def get_providers() -> dict[str, LLMProvider]:
    """Get instances of each provider type.

    Returns:
        Dictionary mapping provider type names to provider instances.
        Keys are: "gemini"
    """
    return {
        "gemini": GeminiProvider(),
    }


def parse_model_string(model: str) -> tuple[str, str]:
    """Parse 'provider/model_id' into (provider_type, model_id).

    Args:
        model: Model string in format "provider/model_id"
               e.g., "gemini/gemini-2.0-flash"

    Returns:
        Tuple of (provider_type, model_id)

    Raises:
        ValueError: If model string doesn't contain a '/'
    """
    if "/" not in model:
        raise ValueError(
            f"Invalid model string '{model}'. "
            "Expected format: 'provider/model_id' (e.g., 'gemini/gemini-2.0-flash')"
        )
    provider_type, model_id = model.split("/", 1)
    return provider_type, model_id


def build_model_config(
    model_name: str,
    model: str,
    api_key: str = "",
    timeout: Optional[float] = None,
) -> ModelConfig:
    """Build a ModelConfig from a 'provider/model_id' string.

    Raises:
        ValueError: If the model string is malformed or names an unknown provider
    """
    provider_type, model_id = parse_model_string(model)
    if provider_type not in get_providers():
        raise ValueError(f"Unknown LLM provider '{provider_type}' in '{model}'")
    return ModelConfig(
        model_name=model_name,
        provider_type=provider_type,
        model_id=model_id,
        api_key=api_key,
        timeout=timeout,
    )
