"""
Gemini-backed triage advisor.

Asks the model for a severity, a priority and a short summary of a new
grievance, using LangChain's JsonOutputParser for structured output.
Every failure is absorbed and replaced by TriageResult.fallback() with a
diagnostic summary; callers bound the call with their own timeout.
"""

import logging
from typing import Any

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.output_parsers import JsonOutputParser

from providers.base import LLMProvider, ModelConfig

from .interfaces import ITriageAdvisor
from .models import (
    TriageResult,
    SUMMARY_API_KEY_MISSING,
    SUMMARY_RATE_LIMITED,
    SUMMARY_UNAVAILABLE,
)
from .exceptions import TriageUnavailableError

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = (
    "You are an expert municipal infrastructure auditor. "
    "Analyze citizen reports filed with the {city} municipal corporation."
)

USER_PROMPT = """Title: {title}
Description: {description}

Tasks:
1. Determine Severity (Low, Medium, High) based on potential danger or environmental damage.
2. Suggest Priority (Low, Medium, High, Critical) based on immediate threat to public safety or core utilities.
3. Provide a concise action-oriented summary (max 50 words).

{format_instructions}"""


def _content_text(content: Any) -> str:
    """Flatten a chat model's content (string or list of parts) to text."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, dict):
            parts.append(part.get("text", ""))
        else:
            parts.append(str(part))
    return "".join(parts)


def _is_rate_limited(error: Exception) -> bool:
    for attr in ("status_code", "code", "status"):
        if getattr(error, attr, None) == 429:
            return True
    text = str(error)
    return "429" in text or "RESOURCE_EXHAUSTED" in text


class GeminiTriageAdvisor(ITriageAdvisor):
    """
    Triage advisor backed by an LLM provider.

    Never raises from classify(); failures become the fallback result.
    """

    def __init__(
        self,
        provider: LLMProvider,
        config: ModelConfig,
        city_name: str = "Puttur",
    ):
        self._provider = provider
        self._config = config
        self._city = city_name
        self._parser = JsonOutputParser(pydantic_object=TriageResult)

    async def classify(self, title: str, description: str) -> TriageResult:
        """Classify a grievance, falling back on any failure."""
        try:
            return await self._request_classification(title, description)
        except TriageUnavailableError as e:
            logger.warning(f"Triage fallback applied: {e.message}")
            return TriageResult.fallback(e.summary)

    async def _request_classification(self, title: str, description: str) -> TriageResult:
        if not self._config.api_key:
            raise TriageUnavailableError(SUMMARY_API_KEY_MISSING)

        messages = [
            SystemMessage(content=SYSTEM_PROMPT.format(city=self._city)),
            HumanMessage(
                content=USER_PROMPT.format(
                    title=title,
                    description=description,
                    format_instructions=self._parser.get_format_instructions(),
                )
            ),
        ]

        try:
            llm = self._provider.get_llm(self._config)
            response = await llm.ainvoke(messages)
            text = _content_text(response.content)
            if not text.strip():
                raise TriageUnavailableError(SUMMARY_UNAVAILABLE, "empty response")
            parsed = self._parser.parse(text)
            result = TriageResult.model_validate(parsed)
        except TriageUnavailableError:
            raise
        except Exception as e:
            summary = SUMMARY_RATE_LIMITED if _is_rate_limited(e) else SUMMARY_UNAVAILABLE
            raise TriageUnavailableError(summary, str(e)) from e

        logger.debug(
            f"Triage result: severity={result.severity.value}, "
            f"priority={result.priority.value}"
        )
        return result
