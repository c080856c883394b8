"""Circular buffer of measurements from an inertial platform."""

from __future__ import annotations

from collections.abc import Iterable

from inertialbuf.measurement import SENSORS_NUMBER, Measurement
from inertialbuf.reading import Reading

BUFFER_DIM = 10


def increment(i: int) -> int:
    """Next position in the circular buffer."""
    return i + 1 if i < BUFFER_DIM - 1 else 0


def decrement(i: int) -> int:
    """Previous position in the circular buffer."""
    return i - 1 if i > 0 else BUFFER_DIM - 1


class InertialDriver:
    """Keeps the last BUFFER_DIM measurements, overwriting the oldest."""

    def __init__(self) -> None:
        self._index = 0  # slot to be filled next
        self._size = 0
        self._buffer = [Measurement.empty() for _ in range(BUFFER_DIM)]

    def __len__(self) -> int:
        return self._size

    def push_back(self, readings: Iterable[Reading]) -> None:
        """Store a measurement; when full, the oldest one is overwritten."""
        self._buffer[self._index] = Measurement(tuple(readings))
        self._index = increment(self._index)
        if self._size < BUFFER_DIM:
            self._size += 1

    def pop_front(self) -> list[Reading] | None:
        """Remove the oldest measurement and return its readings.

        Returns None when the buffer is empty.
        """
        if self._size == 0:
            return None
        i = self._index
        for _ in range(BUFFER_DIM - self._size):
            i = increment(i)
        front = self._buffer[i].sensors()
        self._buffer[i] = Measurement.empty()
        self._size -= 1
        return front

    def clear_buffer(self) -> None:
        """Drop every stored measurement."""
        for _ in range(BUFFER_DIM):
            self._buffer[self._index] = Measurement.empty()
            self._index = increment(self._index)
        self._size = 0

    def get_reading(self, sensor: int) -> Reading:
        """The given sensor's reading from the most recent measurement."""
        if self._size == 0:
            raise IndexError("Il buffer è vuoto, impossibile reperire una lettura")
        if sensor < 0 or sensor > SENSORS_NUMBER - 1:
            raise ValueError("Inserire un numero di sensore valido")
        return self._buffer[decrement(self._index)].sensors()[sensor]

    def __str__(self) -> str:
        return "".join(
            f"Sensore {i}\n{self.get_reading(i)}" for i in range(SENSORS_NUMBER)
        )