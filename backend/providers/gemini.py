"""Google Gemini chat models for grievance triage.

Triage asks for a short JSON classification, so the client is
deterministic (temperature 0) and bounded by the configured request
timeout. Retries default to none: a rate-limited request should fall
back quickly rather than hold up grievance filing.
"""

from langchain_google_genai import ChatGoogleGenerativeAI

from .base import LLMProvider, ModelConfig


class GeminiProvider(LLMProvider):
    """Provider for Google Gemini models.

    Suitable models:
        - gemini-2.0-flash (default)
        - gemini-2.0-flash-lite
    """

    def get_llm(self, config: ModelConfig) -> ChatGoogleGenerativeAI:
        """Build a ChatGoogleGenerativeAI client for the triage model.

        Raises:
            ValueError: If api_key is not provided
        """
        if not config.api_key:
            raise ValueError(
                "Google AI API key is required. "
                "Set it via the GOOGLE_API_KEY environment variable."
            )

        return ChatGoogleGenerativeAI(
            model=config.model_id,
            google_api_key=config.api_key,
            temperature=0,
            timeout=config.timeout,
            max_retries=config.max_retries,
        )
