"""Observable holder for the dashboard state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List

from models.records import Reading
from services.statistics import TemperatureStatistics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardState:
    """Immutable snapshot published after every update."""

    readings: tuple[Reading, ...] = ()
    statistics: TemperatureStatistics = field(default_factory=TemperatureStatistics)
    running: bool = False

    @property
    def reading_count(self) -> int:
        return len(self.readings)

    @property
    def has_data(self) -> bool:
        return bool(self.readings)

    def newest_first(self) -> list[Reading]:
        return list(reversed(self.readings))


Observer = Callable[[DashboardState], None]


class StateStore:
    """Keeps the latest snapshot and notifies observers synchronously."""

    def __init__(self, initial: DashboardState | None = None) -> None:
        self._state = initial if initial is not None else DashboardState()
        self._observers: List[Observer] = []

    @property
    def state(self) -> DashboardState:
        return self._state

    def get(self) -> DashboardState:
        return self._state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Call ``observer`` with the current snapshot, then register it.

        An observer that fails on the current snapshot is not registered.
        Returns a callable that removes the observer again.
        """
        observer(self._state)
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def publish(self, state: DashboardState) -> None:
        self._state = state
        for observer in list(self._observers):
            try:
                observer(state)
            except Exception:
                logger.exception(
                    "Observer failed while handling a state update",
                    extra={"observer": getattr(observer, "__qualname__", repr(observer))},
                )
