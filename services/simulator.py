"""Periodic temperature simulation feeding the dashboard state."""

from __future__ import annotations

import asyncio
import logging
import random
from collections import deque
from datetime import datetime
from functools import lru_cache
from typing import Callable, Deque, Optional, Set

from models.records import Reading
from services.state_store import DashboardState, StateStore
from services.statistics import StatisticsCalculator
from settings import get_settings

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Generates readings on a cooperative timer and publishes snapshots.

    The engine owns the bounded history. Every change (a new reading or a run
    state transition) is published to the store as one complete snapshot.
    """

    def __init__(
        self,
        store: StateStore,
        calculator: StatisticsCalculator,
        interval: float = 2.0,
        history_limit: int = 20,
        min_temperature: float = 65.0,
        max_temperature: float = 85.0,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        if history_limit < 1:
            raise ValueError("history_limit must be at least 1.")
        if max_temperature < min_temperature:
            raise ValueError("max_temperature must not be below min_temperature.")
        self.store = store
        self.calculator = calculator
        self.interval = interval
        self.min_temperature = min_temperature
        self.max_temperature = max_temperature
        self._history: Deque[Reading] = deque(maxlen=history_limit)
        self._rng = rng or random.Random()
        self._clock = clock
        self._running = False
        self._generation = 0
        self._tasks: Set[asyncio.Task[None]] = set()

    @property
    def running(self) -> bool:
        return self._running

    @property
    def history(self) -> tuple[Reading, ...]:
        return tuple(self._history)

    @property
    def history_limit(self) -> int:
        return self._history.maxlen or 0

    def start(self) -> None:
        """Begin producing readings. Must be called from a running event loop."""
        if self._running:
            return
        loop = asyncio.get_running_loop()
        self._running = True
        self._generation += 1
        generation = self._generation
        task = loop.create_task(self._run(generation), name=f"simulation-loop-{generation}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logger.info(
            "Simulation started",
            extra={"generation": generation, "interval": self.interval},
        )
        self._publish()

    def stop(self) -> None:
        """Ask the loop to exit at its next iteration boundary."""
        if not self._running:
            return
        self._running = False
        logger.info("Simulation stopped", extra={"generation": self._generation})
        self._publish()

    def toggle(self) -> bool:
        if self._running:
            self.stop()
        else:
            self.start()
        return self._running

    def tick(self) -> Reading:
        """Generate one reading and publish the updated state."""
        temperature = self._rng.uniform(self.min_temperature, self.max_temperature)
        reading = Reading.at(temperature, self._clock())
        self.append_reading(reading)
        return reading

    def append_reading(self, reading: Reading) -> None:
        self._history.append(reading)
        logger.debug(
            "Recorded reading",
            extra={
                "reading_id": reading.id,
                "temperature": round(reading.temperature, 2),
                "history_size": len(self._history),
            },
        )
        self._publish()

    async def shutdown(self) -> None:
        """Stop and cancel any in-flight loop during application shutdown."""
        self.stop()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def _is_current(self, generation: int) -> bool:
        # A stopped loop that is still asleep must not resume after a restart.
        return self._running and generation == self._generation

    async def _run(self, generation: int) -> None:
        while self._is_current(generation):
            self.tick()
            await asyncio.sleep(self.interval)
        logger.debug("Simulation loop exited", extra={"generation": generation})

    def _publish(self) -> None:
        readings = tuple(self._history)
        self.store.publish(
            DashboardState(
                readings=readings,
                statistics=self.calculator.compute(readings),
                running=self._running,
            )
        )


@lru_cache
def build_default_engine() -> SimulationEngine:
    """Factory that wires the engine with a fresh store and configured limits."""
    settings = get_settings()
    return SimulationEngine(
        store=StateStore(),
        calculator=StatisticsCalculator(),
        interval=settings.interval_seconds,
        history_limit=settings.history_limit,
        min_temperature=settings.min_temperature,
        max_temperature=settings.max_temperature,
    )
