import pytest

from inertialbuf.measurement import SENSORS_NUMBER, Measurement, measurement_of
from inertialbuf.reading import Reading


def _readings(value):
    return [Reading.from_values([value] * 6) for _ in range(SENSORS_NUMBER)]


def test_empty_measurement_has_default_readings():
    m = Measurement.empty()
    assert m.sensors() == [Reading()] * SENSORS_NUMBER


def test_sensor_count_is_seventeen():
    assert len(Measurement.empty().sensors()) == 17


def test_measurement_keeps_given_readings():
    readings = [Reading.from_values([i] * 6) for i in range(SENSORS_NUMBER)]
    m = Measurement(readings)
    assert m.sensors() == readings


@pytest.mark.parametrize("count", [0, 16, 18])
def test_wrong_number_of_readings_raises(count):
    with pytest.raises(ValueError):
        Measurement([Reading()] * count)


def test_sensors_returns_independent_copy():
    m = Measurement(_readings(3))
    copy = m.sensors()
    copy[0] = Reading()
    assert m.sensors()[0] == Reading.from_values([3] * 6)


def test_input_list_changes_do_not_leak():
    readings = _readings(4)
    m = Measurement(readings)
    readings[5] = Reading()
    assert m.sensors()[5] == Reading.from_values([4] * 6)


def test_measurement_of_accepts_generator():
    m = measurement_of(Reading() for _ in range(SENSORS_NUMBER))
    assert m == Measurement.empty()


def test_str_lists_every_sensor_in_order():
    text = str(Measurement(_readings(1)))
    assert text.startswith("Sensore 0\n" + str(Reading.from_values([1] * 6)) + "\n")
    assert text.count("Sensore ") == SENSORS_NUMBER
    assert text.index("Sensore 15") < text.index("Sensore 16")