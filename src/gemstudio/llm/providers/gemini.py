"""Google Gemini gateway implementation.

Uses the official Google GenAI SDK for async generation.
Reference: https://github.com/googleapis/python-genai
"""

import asyncio
import logging
from typing import Any

import aiohttp
import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ...config import StudioConfig
from ...contracts import ChatTurn
from ...errors import ConfigurationError, TransportError
from ..base import ModelGateway
from ..models import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)

# genai sends async requests through aiohttp when it is installed, httpx otherwise
_TRANSPORT_ERRORS = (
    genai_errors.APIError,
    httpx.HTTPError,
    aiohttp.ClientError,
    asyncio.TimeoutError,
)


class GeminiGateway(ModelGateway):
    """Google Gemini gateway implementation.

    Hidden design decisions:
    - Google GenAI client initialization (deferred until the first call)
    - Conversion of chat turns to the provider's Content format
    - Structured output configuration
    - Mapping of SDK, HTTP and timeout failures to TransportError
    """

    def __init__(self, config: StudioConfig, client: Any | None = None):
        """Initialize the Gemini gateway.

        Args:
            config: Client configuration (credential, model, timeout)
            client: Pre-built genai.Client, mainly for tests
        """
        self._config = config
        self._client = client

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._config.model

    def _get_client(self) -> Any:
        if not self._config.has_credentials:
            raise ConfigurationError("API Key not found in environment variables.")
        if self._client is None:
            http_options = None
            if self._config.timeout is not None:
                # HttpOptions.timeout is in milliseconds
                http_options = types.HttpOptions(timeout=int(self._config.timeout * 1000))
            self._client = genai.Client(api_key=self._config.api_key, http_options=http_options)
        return self._client

    @staticmethod
    def _convert_turns(turns: list[ChatTurn]) -> list[types.Content]:
        """Convert chat turns to Gemini Content objects, preserving order."""
        return [
            types.Content(role=turn.role.value, parts=[types.Part(text=turn.text)])
            for turn in turns
        ]

    @staticmethod
    def _build_config(request: GenerationRequest) -> types.GenerateContentConfig | None:
        options: dict[str, Any] = {}
        if request.response_schema is not None:
            options["response_mime_type"] = "application/json"
            options["response_schema"] = request.response_schema
        if request.system_instruction is not None:
            options["system_instruction"] = request.system_instruction
        if request.temperature is not None:
            options["temperature"] = request.temperature
        if not options:
            return None
        return types.GenerateContentConfig(**options)

    @staticmethod
    def _extract_content(response: Any) -> str:
        """Extract text content from a Gemini response, handling empty responses.

        Args:
            response: Gemini GenerateContentResponse

        Returns:
            Text content or empty string
        """
        candidates = getattr(response, "candidates", None)
        if candidates:
            candidate = candidates[0]
            if candidate.content and candidate.content.parts:
                texts = [part.text for part in candidate.content.parts if getattr(part, "text", None)]
                if texts:
                    return "".join(texts)

        # Fallback to response.text (may raise or return None)
        try:
            return response.text or ""
        except (ValueError, AttributeError):
            return ""

    @staticmethod
    def _extract_usage(response: Any) -> dict[str, int] | None:
        metadata = getattr(response, "usage_metadata", None)
        if not metadata:
            return None
        return {
            "prompt_tokens": metadata.prompt_token_count or 0,
            "completion_tokens": metadata.candidates_token_count or 0,
            "total_tokens": metadata.total_token_count or 0,
        }

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Send one generateContent request to Gemini.

        Args:
            request: Provider-neutral request

        Returns:
            GenerationResult with the raw text

        Raises:
            ConfigurationError: If no API key is configured
            TransportError: If the SDK or HTTP layer reports a failure or times out
        """
        client = self._get_client()
        model_to_use = request.model or self._config.model

        if isinstance(request.contents, str):
            contents: Any = request.contents
            size = len(request.contents)
        else:
            contents = self._convert_turns(request.contents)
            size = sum(len(turn.text) for turn in request.contents)

        logger.debug(
            "Sending %s request to %s (%d chars of content)",
            request.kind.value, model_to_use, size
        )

        try:
            response = await client.aio.models.generate_content(
                model=model_to_use,
                contents=contents,
                config=self._build_config(request),
            )
        except _TRANSPORT_ERRORS as e:
            logger.warning("%s request to %s failed: %s", request.kind.value, model_to_use, e)
            raise TransportError(f"Gemini request failed: {e}") from e

        return GenerationResult(
            text=self._extract_content(response),
            model=model_to_use,
            usage=self._extract_usage(response),
        )

    async def close(self) -> None:
        """Release the client.

        Note: The Google GenAI client doesn't require explicit closing;
        dropping the reference lets a later call build a fresh one.
        """
        self._client = None
