import io

import pytest

from cowpuzzles.measuring_traffic import SensorInfo, estimate_start_end, main


@pytest.mark.parametrize(
    ("sensors", "want"),
    [
        (
            [
                SensorInfo("on", 1, 1),
                SensorInfo("none", 10, 14),
                SensorInfo("none", 11, 15),
                SensorInfo("off", 2, 3),
            ],
            (10, 13, 8, 12),
        ),
        (
            [SensorInfo("on", 5, 5), SensorInfo("none", 3, 10)],
            (0, 5, 5, 10),
        ),
        (
            [SensorInfo("none", 0, 1000)],
            (0, 1000, 0, 1000),
        ),
        (
            [
                SensorInfo("none", 0, 0),
                SensorInfo("on", 1, 1),
                SensorInfo("off", 1, 1),
                SensorInfo("none", 0, 0),
            ],
            (0, 0, 0, 0),
        ),
    ],
    ids=["sample input", "example", "minimal", "last"],
)
def test_estimate_cases(sensors, want):
    assert estimate_start_end(sensors) == want


def test_unknown_location_is_a_main_road_sensor():
    with_none = [SensorInfo("on", 1, 1), SensorInfo("none", 10, 14)]
    with_other = [SensorInfo("on", 1, 1), SensorInfo("road", 10, 14)]
    assert estimate_start_end(with_none) == estimate_start_end(with_other)


def test_accepts_a_generator():
    sensors = (s for s in [SensorInfo("none", 0, 1000)])
    assert estimate_start_end(sensors) == (0, 1000, 0, 1000)


def test_main_prints_sample_answer(monkeypatch, capsys):
    text = "4\non 1 1\nnone 10 14\nnone 11 15\noff 2 3\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    assert capsys.readouterr().out == "10 13\n8 12\n"


def test_main_rejects_truncated_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\non 1 1\n"))
    with pytest.raises(ValueError):
        main([])