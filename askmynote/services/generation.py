from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol

from openai import OpenAI, OpenAIError

from askmynote.core.errors import GenerationError, MissingCredential

logger = logging.getLogger(__name__)


class ResponseFormat(str, Enum):
    text = "text"
    json = "json"


@dataclass
class GenerationRequest:
    subject: str
    prompt_text: str
    response_format: ResponseFormat = ResponseFormat.text


class TextGenerator(Protocol):
    def generate(self, prompt: str, response_format: ResponseFormat = ResponseFormat.text) -> str:
        ...


class GenerationClient:
    """
    Client du service de génération (API OpenAI ou compatible, via base_url).
    - La clé est injectée à la construction, jamais lue dans l'environnement ici.
    - Un appel = une requête : pas de retry, pas de cache.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        model: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
        temperature: float = 0.2,
        timeout: float = 60.0,
        client: Any = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.temperature = temperature
        self.timeout = timeout
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    def generate(self, prompt: str, response_format: ResponseFormat = ResponseFormat.text) -> str:
        if not self.api_key:
            raise MissingCredential()

        kwargs: dict[str, Any] = {
            "model": self.model,
            "temperature": self.temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if response_format == ResponseFormat.json:
            kwargs["response_format"] = {"type": "json_object"}

        logger.info("generation call model=%s format=%s prompt_chars=%d", self.model, response_format.value, len(prompt))
        try:
            comp = self._get_client().chat.completions.create(**kwargs)
        except OpenAIError as e:
            logger.warning("generation error: %s", e)
            raise GenerationError(f"Generation service error: {e}") from e

        try:
            return comp.choices[0].message.content or ""
        except (AttributeError, IndexError) as e:
            raise GenerationError(f"Unexpected generation response: {e}") from e
