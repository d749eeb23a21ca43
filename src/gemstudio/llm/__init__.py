from .base import ModelGateway
from .factory import create_gateway
from .models import GenerationRequest, GenerationResult, TaskKind
from .providers import GeminiGateway

__all__ = [
    "ModelGateway",
    "create_gateway",
    "GenerationRequest",
    "GenerationResult",
    "TaskKind",
    "GeminiGateway",
]
