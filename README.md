# inertialbuf

An in-memory model of an inertial platform with 17 sensors. Each sensor
reading holds yaw, pitch and roll velocity and acceleration. A measurement
is one reading from every sensor. The driver keeps the ten most recent
measurements in a circular buffer.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

- `inertialbuf.reading`: `Reading`, a frozen dataclass with the fields
  `yaw_velocity`, `yaw_acceleration`, `pitch_velocity`,
  `pitch_acceleration`, `roll_velocity` and `roll_acceleration`. All of them
  default to `0.0`.
- `inertialbuf.measurement`: `Measurement`, which holds exactly
  `SENSORS_NUMBER` (17) readings, and `measurement_of(readings)`, which builds
  one from any iterable.
- `inertialbuf.driver`: `InertialDriver`, `BUFFER_DIM` (10), and the helpers
  `increment(i)` and `decrement(i)`. Those helpers step forward or backward
  through the buffer's positions and wrap around at the ends.
- `inertialbuf.cli`: `main()`, the demo command.

## Usage

```python
from inertialbuf.reading import Reading
from inertialbuf.driver import InertialDriver

first = Reading.from_values([1, 1, 1, 1, 1, 1])
readings = [first] * 17

driver = InertialDriver()
driver.push_back(readings)

latest = driver.get_reading(3)   # sensor 3 of the newest measurement
count = len(driver)              # measurements currently stored
oldest = driver.pop_front()      # list of readings of the oldest measurement
driver.clear_buffer()
assert driver.pop_front() is None
```

Behaviour:

- `Reading.from_values` needs exactly six values, in this order: yaw velocity,
  yaw acceleration, pitch velocity, pitch acceleration, roll velocity, roll
  acceleration. Any other count raises `ValueError`.
- `Measurement` raises `ValueError` unless it gets exactly 17 readings.
  `Measurement.empty()` builds one with all-zero readings.
  `Measurement.sensors()` returns a fresh list of its readings.
- `InertialDriver.push_back` stores a measurement. When the buffer is full,
  the oldest measurement is overwritten.
- `InertialDriver.pop_front` removes the oldest measurement and returns its
  readings. It returns `None` when the buffer is empty.
- `InertialDriver.get_reading` raises `IndexError` when the buffer is empty.
  It raises `ValueError` when the sensor number is outside 0–16.
- `str(reading)`, `str(measurement)` and `str(driver)` render the values as
  text. `str(driver)` lists every sensor of the newest measurement, so it
  raises `IndexError` when the buffer is empty.

## Demo

This command pushes, overwrites, pops and clears measurements, and prints what
the driver returns at each step:

```
inertialbuf-demo
```

## Limits

The package does not read from any real device. Measurements exist only in
memory, and only when the caller pushes them in.