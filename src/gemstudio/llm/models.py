from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..contracts import ChatTurn


class TaskKind(str, Enum):
    """Kind of request sent through the gateway."""
    DASHBOARD = "dashboard"
    AUTOMATION = "automation"
    CHAT = "chat"


class GenerationRequest(BaseModel):
    """A single provider-neutral generation request."""

    model_config = ConfigDict(frozen=True)

    kind: TaskKind = Field(description="Task kind, used for logging and routing")
    contents: str | list[ChatTurn] = Field(description="Prompt text or ordered conversation turns")
    model: str | None = Field(default=None, description="Model to use (None uses the gateway default)")
    response_schema: dict[str, Any] | None = Field(
        default=None,
        description="Output schema for structured generation"
    )
    system_instruction: str | None = None
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)


class GenerationResult(BaseModel):
    """Raw result of a generation request."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(default="", description="Generated text (empty if none returned)")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )
