from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from ..config import AUTOMATION_FALLBACK, AUTOMATION_TEMPERATURE
from ..contracts import ChatTurn, DashboardSpec
from ..errors import EmptyResponseError
from ..validation import coerce_text, parse_dashboard
from .models import GenerationRequest, GenerationResult, TaskKind


class ModelGateway(ABC):
    """The sole call boundary to the model provider.

    This module hides the design decision of which provider answers the
    requests. Implementations only move a GenerationRequest over the
    wire and hand back the raw text; the per-task result semantics
    (empty-response handling, dashboard parsing) live here so every
    provider behaves the same.

    Each operation issues exactly one request: no retries, no backoff,
    no partial results. Transport failures surface as TransportError and
    a missing credential as ConfigurationError.

    Supports async context manager protocol for resource cleanup:
        async with gateway:
            dashboard = await gateway.generate_dashboard(text, schema)
    """

    @abstractmethod
    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Send one request to the provider.

        Raises:
            ConfigurationError: If no API credential is configured
            TransportError: If the provider call fails
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def generate_dashboard(self, prompt_text: str, output_schema: dict[str, Any]) -> DashboardSpec:
        """Generate a dashboard constrained to `output_schema`.

        Raises:
            EmptyResponseError: If the provider returned no text
            MalformedResponseError: If the text is not a valid dashboard
        """
        result = await self.generate(GenerationRequest(
            kind=TaskKind.DASHBOARD,
            contents=prompt_text,
            response_schema=output_schema,
        ))
        if not result.text.strip():
            raise EmptyResponseError("No data returned from Gemini")
        return parse_dashboard(result.text)

    async def run_automation(
        self,
        prompt_text: str,
        system_instruction: str,
        temperature: float = AUTOMATION_TEMPERATURE,
    ) -> str:
        """Run a free-text automation task.

        An empty response is not an error here: the fallback text is
        returned as content instead.
        """
        result = await self.generate(GenerationRequest(
            kind=TaskKind.AUTOMATION,
            contents=prompt_text,
            system_instruction=system_instruction,
            temperature=temperature,
        ))
        return coerce_text(result.text, AUTOMATION_FALLBACK)

    async def send_chat(self, contents: Sequence[ChatTurn]) -> str:
        """Send the full conversation; returns the reply or an empty string."""
        result = await self.generate(GenerationRequest(
            kind=TaskKind.CHAT,
            contents=list(contents),
        ))
        return coerce_text(result.text)

    async def __aenter__(self) -> "ModelGateway":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup."""
        await self.close()
