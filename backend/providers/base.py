"""Base classes and models for LLM providers."""

from abc import ABC, abstractmethod
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel
from pydantic import BaseModel


class ModelConfig(BaseModel):
    """Configuration for a model, parsed from a "provider/model_id" string.

    Attributes:
        model_name: Friendly alias (e.g., "triage")
        provider_type: Extracted from model prefix (e.g., "gemini")
        model_id: Model identifier (e.g., "gemini-2.0-flash")
        api_key: API key
        timeout: Per-request timeout in seconds, None for the client default
        max_retries: Client-side retries on transient failures
    """

    model_config = {"frozen": True}

    model_name: str
    provider_type: str
    model_id: str
    api_key: str = ""
    timeout: Optional[float] = None
    max_retries: int = 0


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Implementations are thin wrappers around a LangChain chat model with
    provider-specific defaults.
    """

    @abstractmethod
    def get_llm(self, config: ModelConfig) -> BaseChatModel:
        """Return a configured chat model for the given config.

        Args:
            config: Model configuration with provider details

        Returns:
            A configured LangChain chat model
        """
        pass
