"""A single sensor reading: angular velocity and acceleration on three axes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_FIELD_COUNT = 6


@dataclass(frozen=True)
class Reading:
    """Yaw, pitch and roll velocity and acceleration from one sensor."""

    yaw_velocity: float = 0.0
    yaw_acceleration: float = 0.0
    pitch_velocity: float = 0.0
    pitch_acceleration: float = 0.0
    roll_velocity: float = 0.0
    roll_acceleration: float = 0.0

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Reading:
        """Build a reading from exactly six values.

        The order is yaw velocity, yaw acceleration, pitch velocity,
        pitch acceleration, roll velocity, roll acceleration.
        """
        items = [float(v) for v in values]
        if len(items) != _FIELD_COUNT:
            raise ValueError(
                "Il numero di valori non è coerente con una lettura: inserire "
                "yaw_velocity, yaw_acceleration, pitch_velocity, "
                "pitch_acceleration, roll_velocity, roll_acceleration"
            )
        return cls(*items)

    def __str__(self) -> str:
        return (
            f"YAW  velocity: {self.yaw_velocity:g} "
            f"acceleration: {self.yaw_acceleration:g}\n"
            f"PITCH  velocity: {self.pitch_velocity:g} "
            f"acceleration: {self.pitch_acceleration:g}\n"
            f"ROLL  velocity: {self.roll_velocity:g} "
            f"acceleration: {self.roll_acceleration:g}\n"
        )