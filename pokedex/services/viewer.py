"""
Fetch-and-render cycle for the creature card.

Navigation calls update NavigationState synchronously and start one asyncio
task per retrieval; they never wait for it. The blocking HTTP call runs in a
worker thread. Each task is tagged with the navigation sequence number at
dispatch, and only the task matching the latest number may write to the
surface, so the last navigation action wins.
"""

from __future__ import annotations

import asyncio
from typing import Any

from pokedex.domains.creature import display_fields
from pokedex.domains.navigation import NavigationState
from pokedex.infrastructure.data.sources.pokeapi_client import RetrievalFailure
from pokedex.utils.config import total_creatures
from pokedex.utils.logger import get_logger

logger = get_logger()

ERROR_TEXT = "Error loading"


class CreatureViewer:
    def __init__(
        self,
        client: Any,
        surface: Any,
        state: NavigationState | None = None,
    ) -> None:
        self._client = client
        self._surface = surface
        self.state = state or NavigationState(total_creatures())
        self._sequence = 0
        self._tasks: set[asyncio.Task[None]] = set()
        self.last_error: str | None = None

    @property
    def loading(self) -> bool:
        """True while any retrieval task is still pending."""
        return any(not t.done() for t in self._tasks)

    @property
    def sequence(self) -> int:
        return self._sequence

    # --- Navigation handlers (must be called with a running event loop) ---

    def start(self) -> asyncio.Task[None]:
        """Load the current id; used for the initial page load."""
        return self.load(self.state.current_id)

    def step_backward(self) -> asyncio.Task[None] | None:
        new_id = self.state.step_backward()
        if new_id is None:
            return None
        return self.load(new_id)

    def step_forward(self) -> asyncio.Task[None] | None:
        new_id = self.state.step_forward()
        if new_id is None:
            return None
        return self.load(new_id)

    def jump_random(self) -> asyncio.Task[None]:
        return self.load(self.state.jump_random())

    def load(self, creature_id: int) -> asyncio.Task[None]:
        """Start fetching creature_id and return the task without awaiting it."""
        self._sequence += 1
        task = asyncio.get_running_loop().create_task(
            self._fetch_and_render(creature_id, self._sequence),
            name=f"fetch-creature-{creature_id}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def flush(self) -> None:
        """Wait until no retrieval is pending."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def _fetch_and_render(self, creature_id: int, sequence: int) -> None:
        try:
            record = await asyncio.to_thread(self._client.fetch_creature, creature_id)
        except RetrievalFailure as e:
            if sequence != self._sequence:
                logger.debug("Discarding stale failure for #%d (seq %d < %d)", creature_id, sequence, self._sequence)
                return
            logger.error("Failed to load creature #%d: %s", creature_id, e)
            self.last_error = str(e)
            self._surface.show_error(ERROR_TEXT)
            return

        if sequence != self._sequence:
            logger.debug("Discarding stale record for #%d (seq %d < %d)", creature_id, sequence, self._sequence)
            return
        self.last_error = None
        self._surface.apply(display_fields(record))
