"""A measurement: one reading from every sensor of the platform."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from inertialbuf.reading import Reading

SENSORS_NUMBER = 17


@dataclass(frozen=True)
class Measurement:
    """Readings of all sensors taken at the same moment."""

    readings: tuple[Reading, ...] = field(
        default_factory=lambda: tuple(Reading() for _ in range(SENSORS_NUMBER))
    )

    def __post_init__(self) -> None:
        items = tuple(self.readings)
        if len(items) != SENSORS_NUMBER:
            raise ValueError(
                f"a measurement needs exactly {SENSORS_NUMBER} readings, "
                f"got {len(items)}"
            )
        object.__setattr__(self, "readings", items)

    @classmethod
    def empty(cls) -> Measurement:
        """A measurement whose readings are all zero."""
        return cls()

    def sensors(self) -> list[Reading]:
        """A fresh list of the readings, one per sensor."""
        return list(self.readings)

    def __str__(self) -> str:
        return "".join(
            f"Sensore {i}\n{reading}\n" for i, reading in enumerate(self.readings)
        )


def measurement_of(readings: Iterable[Reading]) -> Measurement:
    """Build a measurement from any iterable of readings."""
    return Measurement(tuple(readings))