import pandas as pd
import pytest

from sugar_token.config import EngineConfig
from sugar_token.data.provider import format_label, generate, series_to_frame
from sugar_token.data.random_source import make_rng
from sugar_token.models.series import DAY_MS, HOUR_MS, MINUTE_MS, TimeFrame

UTC_CFG = EngineConfig(display_timezone="UTC")


@pytest.mark.parametrize("tf, count, interval", [
    ("1H", 61, MINUTE_MS),
    ("24H", 25, HOUR_MS),
    ("7D", 8, DAY_MS),
    ("30D", 31, DAY_MS),
])
def test_generate_length_and_spacing(tf, count, interval, fixed_now):
    series = generate(tf, rng=make_rng(7), now=fixed_now)
    assert len(series) == count
    assert series[-1].timestamp == fixed_now
    gaps = {b.timestamp - a.timestamp for a, b in zip(series, series[1:])}
    assert gaps == {interval}


def test_generate_accepts_enum(fixed_now):
    series = generate(TimeFrame.ONE_WEEK, rng=make_rng(1), now=fixed_now)
    assert len(series) == 8


def test_unknown_timeframe_falls_back_to_24h(fixed_now):
    series = generate("5Y", rng=make_rng(3), now=fixed_now, config=UTC_CFG)
    assert len(series) == 25
    assert series[1].timestamp - series[0].timestamp == HOUR_MS
    assert series[-1].label == "12:34"


@pytest.mark.parametrize("seed", range(20))
def test_prices_respect_floors(seed):
    for tf in TimeFrame:
        for p in generate(tf, rng=make_rng(seed)):
            assert float(p.secondary_price) >= 30
            assert float(p.price) >= 0.01


def test_price_formatting(fixed_now):
    p = generate("24H", rng=make_rng(11), now=fixed_now)[0]
    assert len(p.price.split(".")[1]) == 4
    assert len(p.secondary_price.split(".")[1]) == 2


def test_flat_draws_hold_base_prices(scripted_rng, fixed_now):
    series = generate("24H", rng=scripted_rng([0.5]), now=fixed_now)
    assert {p.price for p in series} == {"0.4500"}
    assert {p.secondary_price for p in series} == {"38.00"}


def test_sustained_drop_clamps_sugar_at_floor(scripted_rng, fixed_now):
    series = generate("1H", rng=scripted_rng([0.0]), now=fixed_now)
    # 38 * 0.98^k stays above 30 for the first 11 steps
    assert series[0].secondary_price == "37.24"
    assert series[-1].secondary_price == "30.00"
    # 0.45 * 30/38 * 0.9
    assert series[-1].price == "0.3197"


def test_labels_intraday_and_daily(fixed_now):
    hourly = generate("1H", rng=make_rng(0), now=fixed_now, config=UTC_CFG)
    assert hourly[0].label == "11:34"
    assert hourly[-1].label == "12:34"

    weekly = generate("7D", rng=make_rng(0), now=fixed_now, config=UTC_CFG)
    assert weekly[0].label == "Sep 30"
    assert weekly[-1].label == "Oct 7"


def test_label_is_stable_for_same_timestamp(fixed_now):
    for tf in TimeFrame:
        assert format_label(fixed_now, tf, "UTC") == format_label(fixed_now, tf, "UTC")
    assert format_label(fixed_now, "24H", "Asia/Kolkata") == "18:04"


def test_series_to_frame(fixed_now):
    series = generate("7D", rng=make_rng(5), now=fixed_now)
    df = series_to_frame(series)
    assert list(df.columns) == ["timestamp", "time", "label", "price", "secondary_price"]
    assert len(df) == 8
    assert df["price"].dtype == float
    assert df["time"].is_monotonic_increasing
    assert df["time"].iloc[-1] == pd.Timestamp("2025-10-07 12:34", tz="UTC")


def test_series_to_frame_empty():
    df = series_to_frame(())
    assert df.empty
    assert "price" in df.columns
