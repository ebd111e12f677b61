from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional

import httpx
import ollama
import requests
from ollama import ResponseError

from ..config import DEFAULT_GEMINI_API_BASE
from ..errors import EmptyResponseError, TransportError

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "No text response from the model."


class LLMAdapter:
    """
    Thin gateway around a text-generation API.
    Turns one prompt into the model's raw text, or raises a PlannerError.
    No retries: a failed request is reported to the caller as-is.
    """

    stage = "llm"

    def __init__(self, model: str, *, verbose: bool = False) -> None:
        self.model = model
        self.verbose = verbose

    async def request_text(self, prompt: str) -> str:
        raise NotImplementedError

    def _log(self, message: str, *args: Any) -> None:
        if self.verbose:
            logger.info("[%s] " + message, self.stage.upper(), *args)


# -------------------------------------------------
# Gemini (HTTP)
# -------------------------------------------------

class GeminiAdapter(LLMAdapter):
    """Calls the Gemini generateContent endpoint over plain HTTP."""

    stage = "gemini"

    def __init__(
        self,
        model: str,
        *,
        api_key: str = "",
        api_base: str = DEFAULT_GEMINI_API_BASE,
        timeout: float = 60.0,
        verbose: bool = False,
    ) -> None:
        super().__init__(model, verbose=verbose)
        self.api_key = api_key
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    @staticmethod
    def build_payload(prompt: str) -> Dict[str, Any]:
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": prompt}],
                }
            ]
        }

    async def request_text(self, prompt: str) -> str:
        return await asyncio.to_thread(self._post, prompt)

    def _post(self, prompt: str) -> str:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            # never in the query string: requests echoes the URL in its errors
            headers["x-goog-api-key"] = self.api_key

        self._log("request started (%s)", self.model)

        try:
            response = requests.post(
                self.endpoint,
                json=self.build_payload(prompt),
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Request failed: {type(exc).__name__}: {exc}") from exc

        if not response.ok:
            raise TransportError(f"API error: {response.status_code} {response.reason}")

        try:
            body = response.json()
        except ValueError as exc:
            raise TransportError("API returned a body that is not JSON.") from exc

        text = self._extract_text(body)
        if not text:
            raise EmptyResponseError(NO_TEXT_MESSAGE)

        self._log("success (%s chars)", len(text))
        return text

    @staticmethod
    def _extract_text(body: Any) -> str:
        """Read candidates[0].content.parts[0].text, or "" when any hop is missing."""
        try:
            text = body["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return ""
        return text if isinstance(text, str) else ""


# -------------------------------------------------
# Ollama (local models)
# -------------------------------------------------

class OllamaAdapter(LLMAdapter):
    """Sends the prompt as a single user message to a local Ollama model."""

    stage = "ollama"

    def __init__(
        self,
        model: str,
        *,
        host: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
        timeout: Optional[float] = None,
        client: Optional[Any] = None,
        verbose: bool = False,
    ) -> None:
        super().__init__(model, verbose=verbose)
        self.options = dict(options or {})
        self.timeout = timeout
        self.client = client or ollama.AsyncClient(host=host, timeout=timeout)

    async def request_text(self, prompt: str) -> str:
        self._log("request started (%s)", self.model)

        try:
            response = await self.client.chat(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                options=self.options or None,
            )
        except ResponseError as exc:
            raise TransportError(f"API error: {exc.status_code} {exc.error}") from exc
        except ConnectionError as exc:
            raise TransportError(f"Request failed: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Request failed: {type(exc).__name__}: {exc}") from exc

        content = self._extract_content(response)
        if not content.strip():
            raise EmptyResponseError(NO_TEXT_MESSAGE)

        self._log("success (%s chars)", len(content))
        return content

    @staticmethod
    def _extract_content(response: Any) -> str:
        message = getattr(response, "message", None)

        if message is None and isinstance(response, dict):
            message = response.get("message")

        if not message:
            return ""

        if hasattr(message, "model_dump"):
            payload = message.model_dump(exclude_none=True)
        elif isinstance(message, dict):
            payload = message
        else:
            return ""

        content = payload.get("content") or ""

        if isinstance(content, list):
            content = "".join(map(str, content))

        return str(content)


__all__ = [
    "NO_TEXT_MESSAGE",
    "LLMAdapter",
    "GeminiAdapter",
    "OllamaAdapter",
]
