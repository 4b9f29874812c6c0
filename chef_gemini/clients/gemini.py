"""Gemini generateContent client.

Issues exactly one POST per invocation to the Generative Language REST API and
returns the text of the first candidate's first part. There is no retry and no
timeout beyond aiohttp's session default; a hanging call keeps the caller
waiting until that default expires.
"""

import asyncio
from typing import Optional

import aiohttp
from pydantic import ValidationError

from chef_gemini.models.errors import ModelClientError
from chef_gemini.models.models import GenerateContentRequest, GenerateContentResponse
from chef_gemini.utils.config import config
from chef_gemini.utils.logger import logger


class GeminiClient:
    """Thin async client for the Gemini generateContent endpoint.

    The API key is read from the process-wide config on every call, sent as
    the `key` query parameter, and never logged.
    """

    def __init__(self, model: Optional[str] = None, base_url: Optional[str] = None) -> None:
        """Initialize client.

        Args:
            model: Model name override. Defaults to config.GEMINI_MODEL at call time.
            base_url: API base URL override. Defaults to config.GEMINI_BASE_URL at call time.
        """
        self.model = model
        self.base_url = base_url

    @property
    def endpoint(self) -> str:
        """generateContent URL without credentials."""
        base_url = (self.base_url or config.GEMINI_BASE_URL).rstrip("/")
        model = self.model or config.GEMINI_MODEL
        return f"{base_url}/models/{model}:generateContent"

    async def invoke(self, prompt: str) -> str:
        """Send a prompt and return the raw model text.

        Args:
            prompt: Full prompt text.

        Returns:
            Text of candidates[0].content.parts[0].

        Raises:
            ModelClientError: If the request fails, the status is not successful,
                the body is not JSON, or the envelope lacks the expected path.
        """
        url = self.endpoint
        body = GenerateContentRequest.from_prompt(prompt).model_dump(exclude_none=True)
        logger.debug(f"POST {url} ({len(prompt)} prompt chars)")

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(url, params={"key": config.GEMINI_API_KEY}, json=body) as response:
                    if response.status >= 400:
                        detail = await response.text()
                        logger.debug(f"Gemini error body: {detail[:500]}")
                        raise ModelClientError(f"Gemini returned HTTP {response.status}", status=response.status)
                    payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ModelClientError(f"Gemini request failed: {type(e).__name__}: {e}") from e
        except ValueError as e:
            raise ModelClientError("Gemini response body is not valid JSON") from e

        try:
            text = GenerateContentResponse.model_validate(payload).text
        except ValidationError as e:
            logger.debug(f"Unexpected Gemini envelope: {str(payload)[:500]}")
            raise ModelClientError(
                f"Gemini response is missing candidates[0].content.parts[0].text ({e.error_count()} errors)"
            ) from e
        except ModelClientError:
            logger.debug(f"Unexpected Gemini envelope: {str(payload)[:500]}")
            raise

        logger.debug(f"Received {len(text)} chars from Gemini")
        return text
