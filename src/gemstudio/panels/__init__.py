"""Per-panel session state.

Each panel owns its result, error and loading flags; nothing is shared
between panels and nothing outlives the process.
"""

from .automation import AutomationPanel
from .base import Panel
from .chat import ChatPanel
from .dashboard import DashboardPanel

__all__ = [
    "AutomationPanel",
    "ChatPanel",
    "DashboardPanel",
    "Panel",
]
