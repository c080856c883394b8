"""Demonstration run of the inertial measurement buffer."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from inertialbuf.driver import BUFFER_DIM, InertialDriver
from inertialbuf.measurement import SENSORS_NUMBER
from inertialbuf.reading import Reading


def _first_measurement() -> list[Reading]:
    readings = [Reading(), Reading(1, 1, 1, 1, 1, 1)]
    readings += [Reading.from_values([v] * 6) for v in range(2, 9)]
    readings.append(Reading.from_values([19, 9, 9, 9, 9, 9]))
    readings += [Reading.from_values([v] * 6) for v in range(10, 17)]
    return readings


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise the driver and print what it returns."""
    parser = argparse.ArgumentParser(
        prog="inertialbuf",
        description="Exercise the circular buffer of inertial measurements.",
    )
    parser.parse_args(argv)

    first = _first_measurement()
    driver = InertialDriver()
    driver.push_back(first)

    sensor = 3
    print(
        f"Accedo al sensore {sensor} dell'ultima misura dopo push_back: \n"
        f"{driver.get_reading(sensor)}"
    )

    for _ in range(BUFFER_DIM - 1):
        driver.push_back(first)

    other = [Reading.from_values([9.9] * 6) for _ in range(SENSORS_NUMBER)]
    driver.push_back(other)
    print(
        f"Verifico che il sensore {sensor} dell'ultima misura sia cambiato "
        f"dopo il riempimento del buffer: \n{driver.get_reading(sensor)}"
    )

    for _ in range(BUFFER_DIM - 1):
        driver.pop_front()
    last = driver.pop_front()
    if last is None:
        raise RuntimeError("the buffer emptied earlier than expected")
    print(
        f"Verifico che il sensore {sensor} restitutito dopo {BUFFER_DIM} "
        f"rimozioni sia uguale a quello dell'ultima aggiunta: \n{last[sensor]}"
    )

    driver.push_back(first)
    print(
        "Riaggiungo la prima misura nel buffer e stampo l'ultima misura "
        f"aggiunta per intero:\n{driver}"
    )

    driver.clear_buffer()
    emptied = driver.pop_front()
    print("Eseguo pop_front dopo clear_buffer:")
    if emptied is None:
        print("L'ultimo array rimosso vale nullptr (CORRETTO)")
    else:
        print("Esistono valori nell'ultimo array rimosso (ERRORE)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())