"""
Gemini Studio: dashboard generation, text automation and chat on top of Gemini.

The core is the boundary between UI state and the model API: prompt
composition, the model gateway and response validation. Each subpackage
hides one design decision.
"""

__version__ = "0.1.0"

from .config import StudioConfig
from .contracts import (
    Chart,
    ChartPoint,
    ChartType,
    ChatMessage,
    ChatTurn,
    DashboardSpec,
    Metric,
    Role,
    Trend,
)
from .errors import (
    ConfigurationError,
    EmptyResponseError,
    MalformedResponseError,
    PanelBusyError,
    StudioError,
    TransportError,
    UnsupportedFileError,
)
from .llm import ModelGateway, create_gateway

__all__ = [
    "Chart",
    "ChartPoint",
    "ChartType",
    "ChatMessage",
    "ChatTurn",
    "ConfigurationError",
    "DashboardSpec",
    "EmptyResponseError",
    "MalformedResponseError",
    "Metric",
    "ModelGateway",
    "PanelBusyError",
    "Role",
    "StudioConfig",
    "StudioError",
    "TransportError",
    "Trend",
    "UnsupportedFileError",
    "create_gateway",
]
