import pytest

from aquaponics_charts.utils.frames import readings_to_frame
from aquaponics_charts.utils.sampling import sample_readings
from aquaponics_charts.utils.summary import summarize


def test_summary_of_readings(make_readings):
    stats = summarize(make_readings([4.0, 1.0, 3.0, 2.0]))
    assert stats.min == 1.0
    assert stats.max == 4.0
    assert stats.avg == pytest.approx(2.5)


def test_frame_and_list_agree(spike_readings):
    assert summarize(spike_readings) == summarize(readings_to_frame(spike_readings))


def test_empty_series_gives_zero_default():
    stats = summarize([])
    assert (stats.min, stats.max, stats.avg) == (0.0, 0.0, 0.0)
    assert summarize(readings_to_frame([])) == stats


def test_summary_of_sampled_data_differs(spike_readings):
    full = summarize(spike_readings)
    sampled = summarize(sample_readings(spike_readings, 10))
    assert full.max == 99.0
    assert full.avg != pytest.approx(sampled.avg)
