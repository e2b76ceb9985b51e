"""Tests for RRG rotation coordinates and trails."""

import math

import pytest

from rscore.exceptions import InvalidPeriodError, MisalignedSeriesError
from rscore.models import InsufficientData, is_insufficient_data
from rscore.strength.models import (
    RotationCoordinates,
    RotationPoint,
    RotationQuadrant,
    classify_quadrant,
)
from rscore.strength.rotation import calculate_rrg_point, get_rrg_trail, wma

RS_PERIOD = 5
MOMENTUM_PERIOD = 3
TOTAL = RS_PERIOD + MOMENTUM_PERIOD


class TestWma:
    def test_heaviest_weight_on_first_value(self) -> None:
        """weights 3, 2, 1 -> (9 + 4 + 1) / 6."""
        assert wma([3.0, 2.0, 1.0], 3) == pytest.approx(14 / 6)

    def test_constant_series(self) -> None:
        assert wma([0.5] * 4, 4) == pytest.approx(0.5)

    def test_ignores_values_past_period(self) -> None:
        assert wma([1.0, 1.0, 100.0], 2) == pytest.approx(1.0)

    def test_short_input_is_nan(self) -> None:
        assert math.isnan(wma([1.0], 2))


class TestCalculateRrgPoint:
    def test_constant_ratio_sits_at_centre(self, make_candles) -> None:
        result = calculate_rrg_point(
            make_candles([50.0] * TOTAL), make_candles([100.0] * TOTAL), RS_PERIOD, MOMENTUM_PERIOD, 0
        )
        assert isinstance(result, RotationCoordinates)
        assert result.rs_ratio == pytest.approx(100.0)
        assert result.rs_momentum == pytest.approx(100.0)

    def test_outperformer_has_ratio_above_100(self, make_candles) -> None:
        result = calculate_rrg_point(
            make_candles([100.0 + i for i in range(TOTAL)]),
            make_candles([100.0] * TOTAL),
            RS_PERIOD,
            MOMENTUM_PERIOD,
            0,
        )
        assert result.rs_ratio > 100

    def test_underperformer_has_ratio_below_100(self, make_candles) -> None:
        result = calculate_rrg_point(
            make_candles([200.0 - 5 * i for i in range(TOTAL)]),
            make_candles([100.0] * TOTAL),
            RS_PERIOD,
            MOMENTUM_PERIOD,
            0,
        )
        assert result.rs_ratio < 100

    def test_zero_benchmark_close_gives_zero_rs(self, make_candles) -> None:
        """rs = 0.5 x 7 then 0: ratio 0 / wma(...) = 0, momentum 0 / 100 = 0."""
        result = calculate_rrg_point(
            make_candles([50.0] * TOTAL),
            make_candles([100.0] * (TOTAL - 1) + [0.0]),
            RS_PERIOD,
            MOMENTUM_PERIOD,
            0,
        )
        assert result == RotationCoordinates(rs_ratio=0.0, rs_momentum=0.0)

    def test_all_zero_closes(self, make_candles) -> None:
        zeros = make_candles([0.0] * TOTAL)
        result = calculate_rrg_point(zeros, zeros, RS_PERIOD, MOMENTUM_PERIOD, 0)
        assert result == RotationCoordinates(rs_ratio=0.0, rs_momentum=0.0)

    def test_smoothing_needs_extra_bars(self, make_candles) -> None:
        required = 3 + TOTAL
        symbol = make_candles([100.0 + i for i in range(required)])
        benchmark = make_candles([100.0] * required)

        assert isinstance(
            calculate_rrg_point(symbol, benchmark, RS_PERIOD, MOMENTUM_PERIOD, 3),
            RotationCoordinates,
        )
        assert calculate_rrg_point(
            symbol[1:], benchmark[1:], RS_PERIOD, MOMENTUM_PERIOD, 3
        ) == InsufficientData("RRG", required, required - 1)

    def test_insufficient_data(self, make_candles) -> None:
        result = calculate_rrg_point(
            make_candles([1.0] * (TOTAL - 1)),
            make_candles([1.0] * (TOTAL - 1)),
            RS_PERIOD,
            MOMENTUM_PERIOD,
            0,
        )
        assert is_insufficient_data(result)
        assert result.required == TOTAL

    def test_length_mismatch_raises(self, make_candles) -> None:
        with pytest.raises(MisalignedSeriesError):
            calculate_rrg_point(
                make_candles([1.0] * TOTAL),
                make_candles([1.0] * (TOTAL + 1)),
                RS_PERIOD,
                MOMENTUM_PERIOD,
                0,
            )

    def test_zero_rs_period_raises(self, make_candles) -> None:
        with pytest.raises(InvalidPeriodError):
            calculate_rrg_point(make_candles([1.0] * 5), make_candles([1.0] * 5), 0, 3, 0)


class TestGetRrgTrail:
    def test_newest_point_first(self, make_candles) -> None:
        symbol = make_candles([100.0 + i for i in range(TOTAL + 3)])
        benchmark = make_candles([100.0] * (TOTAL + 3))

        trail = get_rrg_trail("XLK", symbol, benchmark, RS_PERIOD, 3, MOMENTUM_PERIOD, 0)

        assert len(trail) == 3
        assert all(isinstance(p, RotationPoint) for p in trail)
        assert [p.timestamp_ms for p in trail] == [
            symbol[-1].timestamp_ms,
            symbol[-2].timestamp_ms,
            symbol[-3].timestamp_ms,
        ]
        assert trail[0].symbol == "XLK"
        assert trail[0].date_str == symbol[-1].time

    def test_point_prices_and_rs_value(self, make_candles) -> None:
        symbol = make_candles([50.0 + i for i in range(TOTAL)])
        benchmark = make_candles([200.0] * TOTAL)

        point = get_rrg_trail("XLE", symbol, benchmark, RS_PERIOD, 1, MOMENTUM_PERIOD, 0)[0]

        assert point.price == symbol[-1].close
        assert point.benchmark_price == 200.0
        assert point.rs_value == pytest.approx(symbol[-1].close / 200.0)

    def test_zero_latest_benchmark_close(self, make_candles) -> None:
        symbol = make_candles([50.0] * TOTAL)
        benchmark = make_candles([100.0] * (TOTAL - 1) + [0.0])

        point = get_rrg_trail("XLRE", symbol, benchmark, RS_PERIOD, 1, MOMENTUM_PERIOD, 0)[0]

        assert point.benchmark_price == 0.0
        assert point.rs_value == 0.0
        assert point.quadrant == RotationQuadrant.LAGGING

    def test_zero_close_inside_history_keeps_trail(self, make_candles) -> None:
        closes = [100.0] * (TOTAL + 2)
        closes[0] = 0.0
        symbol = make_candles([100.0 + i for i in range(TOTAL + 2)])

        trail = get_rrg_trail("XLC", symbol, make_candles(closes), RS_PERIOD, 3, MOMENTUM_PERIOD, 0)

        assert len(trail) == 3
        assert all(math.isfinite(p.rs_ratio) and math.isfinite(p.rs_momentum) for p in trail)

    def test_stops_when_history_runs_out(self, make_candles) -> None:
        symbol = make_candles([100.0 + i for i in range(TOTAL + 2)])
        benchmark = make_candles([100.0] * (TOTAL + 2))

        trail = get_rrg_trail("XLF", symbol, benchmark, RS_PERIOD, 10, MOMENTUM_PERIOD, 0)
        assert len(trail) == 3

    def test_missing_latest_benchmark_bar_gives_empty_trail(self, make_candles) -> None:
        symbol = make_candles([100.0 + i for i in range(TOTAL + 2)])
        benchmark = make_candles([100.0] * (TOTAL + 2))[:-1]

        assert get_rrg_trail("XLU", symbol, benchmark, RS_PERIOD, 3, MOMENTUM_PERIOD, 0) == []

    def test_gap_in_older_benchmark_history_truncates_trail(self, make_candles) -> None:
        symbol = make_candles([100.0 + i for i in range(TOTAL + 2)])
        benchmark = make_candles([100.0] * (TOTAL + 2))[1:]

        trail = get_rrg_trail("XLV", symbol, benchmark, RS_PERIOD, 3, MOMENTUM_PERIOD, 0)
        assert len(trail) == 2

    def test_too_short_for_any_point(self, make_candles) -> None:
        symbol = make_candles([100.0] * (TOTAL - 1))
        assert get_rrg_trail("XLB", symbol, symbol, RS_PERIOD, 5, MOMENTUM_PERIOD, 0) == []


class TestQuadrants:
    @pytest.mark.parametrize(
        ("ratio", "momentum", "expected"),
        [
            (101.0, 102.0, RotationQuadrant.LEADING),
            (101.0, 99.0, RotationQuadrant.WEAKENING),
            (98.0, 97.0, RotationQuadrant.LAGGING),
            (98.0, 100.5, RotationQuadrant.IMPROVING),
            (100.0, 100.0, RotationQuadrant.LEADING),
        ],
    )
    def test_classify_quadrant(self, ratio, momentum, expected) -> None:
        assert classify_quadrant(ratio, momentum) == expected

    def test_point_exposes_quadrant(self) -> None:
        point = RotationPoint(
            symbol="XLK",
            timestamp_ms=0,
            date_str="2024-01-01",
            price=10.0,
            benchmark_price=5.0,
            rs_value=2.0,
            rs_ratio=97.0,
            rs_momentum=103.0,
        )
        assert point.quadrant == RotationQuadrant.IMPROVING
