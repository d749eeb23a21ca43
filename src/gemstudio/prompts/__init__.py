"""Prompt management module.

Externalizes prompt templates to text files and composes the requests
for dashboard generation, automation tasks and chat.
"""

from .composer import (
    AutomationPrompt,
    DashboardPrompt,
    compose_automation_prompt,
    compose_chat_request,
    compose_dashboard_prompt,
    truncate_dataset,
)
from .loader import clear_cache, load_prompt, template_paths
from .schema import dashboard_output_schema

__all__ = [
    "AutomationPrompt",
    "DashboardPrompt",
    "clear_cache",
    "compose_automation_prompt",
    "compose_chat_request",
    "compose_dashboard_prompt",
    "dashboard_output_schema",
    "load_prompt",
    "template_paths",
    "truncate_dataset",
]
