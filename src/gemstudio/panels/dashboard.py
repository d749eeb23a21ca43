import logging
from pathlib import Path

from ..contracts import DashboardSpec
from ..errors import StudioError
from ..llm import ModelGateway
from ..files import read_dataset
from ..prompts import compose_dashboard_prompt
from .base import Panel

logger = logging.getLogger(__name__)


class DashboardPanel(Panel):
    """Dashboard generator state: the current dashboard and the last error.

    A failed generation keeps the previously generated dashboard and
    reports the failure through `error`.
    """

    name = "dashboard"

    def __init__(self, gateway: ModelGateway):
        super().__init__(gateway)
        self.dashboard: DashboardSpec | None = None

    def clear(self) -> None:
        """Reset result and error (used when switching between topic and file mode)."""
        self.dashboard = None
        self.error = None

    async def generate_from_topic(self, topic: str) -> DashboardSpec | None:
        """Generate a dashboard with illustrative data for a topic."""
        if not topic.strip():
            return None
        async with self._in_flight():
            return await self._generate(topic, is_file_data=False)

    async def generate_from_file(self, path: str | Path) -> DashboardSpec | None:
        """Generate a dashboard from an uploaded dataset.

        Unsupported extensions are rejected before the file is read and
        before any model call.
        """
        async with self._in_flight():
            self.error = None
            try:
                content = read_dataset(path)
            except StudioError as e:
                self.error = str(e)
                return None
            if not content.strip():
                return None
            return await self._generate(content, is_file_data=True)

    async def _generate(self, input: str, is_file_data: bool) -> DashboardSpec | None:
        self.error = None
        prompt = compose_dashboard_prompt(input, is_file_data=is_file_data)
        try:
            dashboard = await self._gateway.generate_dashboard(prompt.text, prompt.schema)
        except StudioError as e:
            logger.info("Dashboard generation failed: %s", e)
            self.error = str(e) or "Failed to generate dashboard"
            return None
        self.dashboard = dashboard
        return dashboard
