import logging

from ..config import AUTOMATION_ERROR_TEXT, AUTOMATION_TASKS, DEFAULT_AUTOMATION_TASK
from ..contracts import AutomationResult
from ..errors import StudioError
from ..llm import ModelGateway
from ..prompts import compose_automation_prompt
from .base import Panel

logger = logging.getLogger(__name__)


class AutomationPanel(Panel):
    """Automation lab state: the selected agent skill and the last result."""

    name = "automation"

    def __init__(self, gateway: ModelGateway, task: str = DEFAULT_AUTOMATION_TASK):
        super().__init__(gateway)
        self.task = task
        self.result: AutomationResult | None = None

    @property
    def tasks(self) -> tuple[str, ...]:
        return AUTOMATION_TASKS

    def select_task(self, label: str) -> None:
        if not label.strip():
            raise ValueError("Task label must not be empty")
        self.task = label

    async def run(self, text: str) -> AutomationResult | None:
        """Run the selected task on `text`.

        Failures are shown as content: the result becomes a fixed error
        text and `error` carries the cause.
        """
        if not text.strip():
            return None
        async with self._in_flight():
            self.result = None
            self.error = None
            prompt = compose_automation_prompt(text, self.task)
            try:
                self.result = await self._gateway.run_automation(
                    prompt.text, prompt.system_instruction, prompt.temperature
                )
            except StudioError as e:
                logger.info("Automation task failed: %s", e)
                self.error = str(e)
                self.result = AUTOMATION_ERROR_TEXT
            return self.result
