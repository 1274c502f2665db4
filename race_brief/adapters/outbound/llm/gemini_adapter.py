"""Google Gemini adapter generating circuit history narratives."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from google.genai.types import GenerateContentConfig

from ....common.utils import clean_text
from ....core.domain.exceptions import NarrativeError
from ....core.ports import NarrativePort
from ....core.services.prompts import CIRCUIT_HISTORY_SYSTEM_PROMPT, CIRCUIT_HISTORY_USER_PROMPT
from ...common.exception_handler import log_exception

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiNarrativeAdapter(NarrativePort):
    """Narrative generator backed by an already constructed ``genai.Client``."""

    def __init__(
        self,
        client: genai.Client,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.3,
        max_tokens: int = 1024,
    ) -> None:
        """Initialize the adapter.

        Args:
            client: Configured Google GenAI client.
            model: Model to use.
            temperature: Sampling temperature (0.0-1.0).
            max_tokens: Maximum tokens to generate.
        """
        self.client = client
        self.model_name = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def _generate(self, prompt: str) -> str | None:
        """Run one generation request, returning None when it yields no text.

        Failures are logged as ``NarrativeError`` records at WARNING level.
        """
        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=GenerateContentConfig(
                    system_instruction=CIRCUIT_HISTORY_SYSTEM_PROMPT,
                    temperature=self.temperature,
                    max_output_tokens=self.max_tokens,
                ),
            )
        except Exception as e:
            failure = NarrativeError(
                "Gemini request failed", cause=e, context={"model": self.model_name}
            )
            log_exception(failure, log=logger, level=logging.WARNING)
            return None

        usage = response.usage_metadata
        if usage:
            logger.info(
                f"Gemini model - {self.model_name}, tokens - prompt: {usage.prompt_token_count}, "
                f"completion: {usage.candidates_token_count}, total: {usage.total_token_count}"
            )

        # Safety filters leave no candidates
        text = clean_text(response.text) if response.candidates else ""
        if not text:
            failure = NarrativeError(
                "No valid response received from Gemini", context={"model": self.model_name}
            )
            log_exception(failure, log=logger, level=logging.WARNING)
            return None
        return text

    def generate_history(
        self,
        circuit_name: str,
        race_name: str,
        locality: str,
        country: str,
    ) -> str | None:
        prompt = CIRCUIT_HISTORY_USER_PROMPT.format(
            circuit_name=circuit_name,
            race_name=race_name,
            locality=locality,
            country=country,
        )
        history = self._generate(prompt)
        if history is None:
            logger.warning(f"Circuit history unavailable for {circuit_name}")
            return None

        logger.info(f"Generated historical info for {circuit_name}")
        return history
