import json
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from config import Settings
from models import Content, GeminiRequest, GeminiResponse, Part

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error:"


class ReplyParseError(ValueError):
    """Base class for upstream bodies we cannot turn into reply text."""


class ResponseFormatError(ReplyParseError):
    pass


class MissingContentError(ReplyParseError):
    pass


def build_request_body(prompt: str) -> dict:
    body = GeminiRequest(contents=[Content(parts=[Part(text=prompt)])])
    return body.model_dump()


def parse_reply(raw: str) -> str:
    """
    Pull candidates[0].content.parts[0].text out of a generateContent body.
    Raises ResponseFormatError for non-JSON, MissingContentError when any
    level of that path is absent.
    """
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise ResponseFormatError("Unable to process API response.") from e

    try:
        parsed = GeminiResponse.model_validate(data)
    except ValidationError as e:
        raise MissingContentError("Unable to extract content from API response.") from e

    return parsed.candidates[0].content.parts[0].text


class GeminiClient:
    def __init__(self, settings: Settings, http: Optional[httpx.Client] = None):
        self.url = settings.api_url
        self._key = settings.api_key
        self._http = http or httpx.Client(timeout=settings.timeout)

    def close(self) -> None:
        self._http.close()

    def generate(self, prompt: str) -> str:
        """Blocking call; every failure comes back as an "Error: ..." string."""
        logger.debug("Sending request to Gemini API: %s", self.url)
        try:
            r = self._http.post(
                self.url,
                params={"key": self._key},
                headers={"Content-Type": "application/json"},
                json=build_request_body(prompt),
            )
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "🚨 Gemini HTTP error: %s → %s",
                e.response.status_code,
                e.response.text[:200],
            )
            return f"{ERROR_PREFIX} API request failed with status {e.response.status_code}"
        except Exception as e:
            logger.error("🚨 Gemini unexpected error: %s", e, exc_info=True)
            return f"{ERROR_PREFIX} Unable to generate email reply."

        if not r.text.strip():
            logger.error("⚠️ Received empty response from API.")
            return f"{ERROR_PREFIX} Received empty response from API."

        try:
            return parse_reply(r.text)
        except ReplyParseError as e:
            logger.error("⚠️ No valid response text found: %s", e)
            return f"{ERROR_PREFIX} {e}"
