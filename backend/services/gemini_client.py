"""Google Gemini API wrapper with error handling."""

import asyncio
import logging
from typing import Protocol

from google import genai
from google.genai import types

from config import Settings
from services.errors import CompletionError

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"


class CompletionClient(Protocol):
    async def complete(self, prompt: str, attachment: bytes | None = None) -> str:
        """Send a prompt (and optional PDF) and return the raw reply text."""
        ...


class GeminiCompletionClient:
    """Text completion against the Gemini API.

    The underlying ``genai.Client`` is created on first use so that an app
    without an API key still starts; requests then fail with CompletionError.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.2,
        max_output_tokens: int = 4096,
        timeout_seconds: float = 60.0,
        client: genai.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.timeout_seconds = timeout_seconds
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiCompletionClient":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            temperature=settings.gemini_temperature,
            max_output_tokens=settings.gemini_max_output_tokens,
            timeout_seconds=settings.gemini_timeout_seconds,
        )

    @property
    def is_configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
                raise CompletionError("Completion service is not configured (GEMINI_API_KEY missing)")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def complete(self, prompt: str, attachment: bytes | None = None) -> str:
        client = self._get_client()

        contents: list = []
        if attachment is not None:
            contents.append(types.Part.from_bytes(data=attachment, mime_type=PDF_MIME_TYPE))
        contents.append(prompt)

        try:
            response = await asyncio.wait_for(
                client.aio.models.generate_content(
                    model=self.model,
                    contents=contents,
                    config=types.GenerateContentConfig(
                        temperature=self.temperature,
                        max_output_tokens=self.max_output_tokens,
                    ),
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.error("Gemini call timed out after %.0fs", self.timeout_seconds)
            raise CompletionError(
                f"Completion service timed out after {self.timeout_seconds:.0f}s"
            ) from e
        except Exception as e:
            logger.error("Gemini API error: %s", e)
            raise CompletionError(f"Completion service error: {e}") from e

        text = (response.text or "").strip()
        if not text:
            raise CompletionError("Completion service returned an empty response")

        logger.debug("Gemini returned %d chars", len(text))
        return text
