from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from ..errors import PanelBusyError
from ..llm import ModelGateway


class Panel:
    """Transient UI state shared by every panel.

    Each panel owns its own loading/error flags and allows at most one
    request in flight; a second request is refused instead of queued.
    Mutation happens only on the event loop thread, so no locking is
    needed.
    """

    name = "panel"

    def __init__(self, gateway: ModelGateway):
        self._gateway = gateway
        self.loading = False
        self.error: str | None = None

    @asynccontextmanager
    async def _in_flight(self) -> AsyncIterator[None]:
        if self.loading:
            raise PanelBusyError(f"A {self.name} request is already running")
        self.loading = True
        try:
            yield
        finally:
            self.loading = False

    def dismiss_error(self) -> None:
        self.error = None
