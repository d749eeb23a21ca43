from .models import (
    AutomationResult,
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

__all__ = [
    "AutomationResult",
    "Chart",
    "ChartPoint",
    "ChartType",
    "ChatMessage",
    "ChatTurn",
    "DashboardSpec",
    "Metric",
    "Role",
    "Trend",
]
