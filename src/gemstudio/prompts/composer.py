"""Prompt composition for the three task kinds.

Turns raw user input into what the gateway sends: instruction text, and
for structured tasks the output schema. Pure functions; nothing here
talks to the provider.
"""

from collections.abc import Sequence
from typing import Any, NamedTuple

from ..config import (
    AUTOMATION_TEMPERATURE,
    DASHBOARD_CHART_COUNT,
    DASHBOARD_METRIC_COUNT,
    MAX_DATASET_CHARS,
    TRUNCATION_MARKER,
)
from ..contracts import ChatMessage, ChatTurn, Role
from .loader import load_prompt
from .schema import dashboard_output_schema


class DashboardPrompt(NamedTuple):
    text: str
    schema: dict[str, Any]


class AutomationPrompt(NamedTuple):
    text: str
    system_instruction: str
    temperature: float


def truncate_dataset(content: str, limit: int = MAX_DATASET_CHARS) -> str:
    """Keep the first `limit` characters of uploaded content, marking the cut."""
    if len(content) > limit:
        return content[:limit] + TRUNCATION_MARKER
    return content


def compose_dashboard_prompt(input: str, is_file_data: bool = False) -> DashboardPrompt:
    """Build the dashboard instruction and its output schema.

    Args:
        input: Raw file content when is_file_data is set, otherwise a topic
        is_file_data: Whether input is uploaded data to analyze

    Returns:
        DashboardPrompt of (instruction text, output schema)
    """
    counts = {
        "metric_count": DASHBOARD_METRIC_COUNT,
        "chart_count": DASHBOARD_CHART_COUNT,
    }
    if is_file_data:
        text = load_prompt("dashboard_file").format(dataset=truncate_dataset(input), **counts)
    else:
        text = load_prompt("dashboard_topic").format(topic=input, **counts)
    return DashboardPrompt(text=text, schema=dashboard_output_schema())


def compose_automation_prompt(input: str, task_label: str) -> AutomationPrompt:
    """Build the automation request: input text plus the agent persona."""
    return AutomationPrompt(
        text=load_prompt("automation_input").format(input=input),
        system_instruction=load_prompt("automation_system").format(task=task_label),
        temperature=AUTOMATION_TEMPERATURE,
    )


def compose_chat_request(history: Sequence[ChatMessage], new_message: str) -> list[ChatTurn]:
    """Reshape the full conversation plus the new user message into turns.

    The whole history is resent on every call; no windowing is applied.
    """
    turns = [ChatTurn(role=message.role, text=message.content) for message in history]
    turns.append(ChatTurn(role=Role.USER, text=new_message))
    return turns
