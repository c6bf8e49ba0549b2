import pytest

from dispatch import CarTimings


def test_defaults():
    timings = CarTimings()
    assert timings.travel_seconds == 2.5
    assert timings.door_dwell_seconds == 3.0
    assert timings.home_floor == 1


def test_from_dict_overrides_values():
    timings = CarTimings.from_dict({"travel_seconds": 0, "door_dwell_seconds": 1.5})
    assert timings.travel_seconds == 0
    assert timings.door_dwell_seconds == 1.5


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="speed"):
        CarTimings.from_dict({"speed": 2})


def test_negative_durations_are_rejected():
    with pytest.raises(ValueError):
        CarTimings(travel_seconds=-1)


@pytest.mark.parametrize(
    "values",
    [
        {"travel_seconds": "fast"},
        {"door_dwell_seconds": None},
        {"travel_seconds": True},
        {"home_floor": 1.5},
        {"home_floor": False},
    ],
)
def test_from_dict_rejects_wrong_types(values):
    with pytest.raises(ValueError):
        CarTimings.from_dict(values)
