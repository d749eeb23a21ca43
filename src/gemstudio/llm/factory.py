from typing import Any

from ..config import StudioConfig
from .base import ModelGateway
from .providers import GeminiGateway


def create_gateway(provider: str, config: StudioConfig, **options: Any) -> ModelGateway:
    """Create a model gateway instance.

    This factory function hides the instantiation logic for different providers.

    Args:
        provider: Provider type (currently only 'gemini')
        config: Client configuration shared by every gateway operation
        **options: Provider-specific options
            For Gemini:
                - client: pre-built genai.Client (default: built on first call)

    Returns:
        Initialized gateway instance

    Raises:
        ValueError: If provider type is not supported

    Examples:
        >>> gateway = create_gateway("gemini", StudioConfig(api_key="..."))
    """
    provider_lower = provider.lower()

    if provider_lower in ("gemini", "google"):
        return GeminiGateway(config, **options)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'gemini'"
    )
