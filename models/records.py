"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

TIMESTAMP_FORMAT = "%H:%M:%S"


def _new_reading_id() -> str:
    return str(uuid4())


@dataclass(frozen=True, slots=True)
class Reading:
    """A single simulated temperature sample.

    ``id`` only keeps list rendering stable; it carries no ordering or lookup
    meaning.
    """

    temperature: float
    timestamp: str
    id: str = field(default_factory=_new_reading_id)

    @classmethod
    def at(cls, temperature: float, moment: datetime) -> "Reading":
        return cls(temperature=temperature, timestamp=moment.strftime(TIMESTAMP_FORMAT))
