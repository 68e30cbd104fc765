"""Tests for the forecast pipeline entry point."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from bite_forecast.analysis import forecast as forecast_module
from bite_forecast.analysis.forecast import build_bite_forecast, build_extended_scores
from bite_forecast.analysis.models import FactorCategory, TimeOfDay
from bite_forecast.errors import InsufficientForecastDataError
from bite_forecast.reference.quality import QualityLabel
from bite_forecast.schemas import Location, RawForecastSample

MILLE_LACS = Location(lat=46.25, lon=-93.65, name="Mille Lacs")
START = datetime(2026, 1, 20, 12, tzinfo=UTC)


def _samples(count: int = 9) -> list[RawForecastSample]:
    return [
        RawForecastSample(
            timestamp=START + timedelta(hours=3 * i),
            temperature=18 + i,
            pressure=1020 - i * 1.2,
            cloud_percent=80,
            pop=0.6 if i == 4 else 0.1,
            snow_3h=6.0 if i == 5 else 0.0,
        )
        for i in range(count)
    ]


class TestBuildBiteForecast:
    """Full 24-hour pipeline."""

    def test_shape(self) -> None:
        result = build_bite_forecast(
            _samples(), MILLE_LACS, START, species_ids=["walleye", "burbot"]
        )
        assert result.location == MILLE_LACS
        assert result.start == START
        assert len(result.hourly) == 24
        assert len(result.sun_times) == 24
        assert list(result.scores) == ["walleye", "burbot"]
        for scores in result.scores.values():
            assert [s.hour for s in scores] == list(range(24))
        assert set(result.best_windows) == {"walleye", "burbot"}

    def test_defaults_to_whole_catalog(self) -> None:
        result = build_bite_forecast(_samples(), MILLE_LACS, START)
        assert len(result.scores) == 20

    def test_parallel_matches_serial(self) -> None:
        serial = build_bite_forecast(_samples(), MILLE_LACS, START)
        parallel = build_bite_forecast(_samples(), MILLE_LACS, START, max_workers=4)
        assert parallel.scores == serial.scores
        assert parallel.best_windows == serial.best_windows

    def test_deterministic(self) -> None:
        first = build_bite_forecast(_samples(), MILLE_LACS, START)
        second = build_bite_forecast(_samples(), MILLE_LACS, START)
        assert first == second

    def test_current(self) -> None:
        result = build_bite_forecast(_samples(), MILLE_LACS, START, species_ids=["walleye"])
        current = result.current("walleye")
        assert current is not None
        assert current.hour == 0
        assert result.current("bluegill") is None

    def test_epoch_start(self) -> None:
        result = build_bite_forecast(_samples(), MILLE_LACS, START.timestamp())
        assert result.start == START

    def test_insufficient_data_aborts(self) -> None:
        with pytest.raises(InsufficientForecastDataError):
            build_bite_forecast(_samples(1), MILLE_LACS, START)

    def test_unknown_species_soft_failure(self) -> None:
        result = build_bite_forecast(_samples(), MILLE_LACS, START, species_ids=["carp"])
        assert all(s.score == 0 and s.is_error for s in result.scores["carp"])
        assert result.best_windows["carp"] == []

    def test_species_fault_isolated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        real = forecast_module.calculate_daily_scores

        def flaky(species_id: str, *args: Any, **kwargs: Any) -> Any:
            if species_id == "burbot":
                msg = "boom"
                raise ZeroDivisionError(msg)
            return real(species_id, *args, **kwargs)

        monkeypatch.setattr(forecast_module, "calculate_daily_scores", flaky)
        result = build_bite_forecast(
            _samples(), MILLE_LACS, START, species_ids=["walleye", "burbot"]
        )

        burbot = result.scores["burbot"]
        assert len(burbot) == 24
        assert all(s.score == 0 for s in burbot)
        assert burbot[0].factors[0].category == FactorCategory.ERROR
        assert burbot[0].factors[0].description == "Scoring failed"
        assert not any(s.is_error for s in result.scores["walleye"])

    def test_nan_wind_adds_no_wind_factor(self) -> None:
        samples = [s.model_copy(update={"wind_speed": 45.0}) for s in _samples()]
        raw = [RawForecastSample(timestamp=s.timestamp, wind_speed=float("nan")) for s in samples]
        windy = build_bite_forecast(samples, MILLE_LACS, START, species_ids=["walleye"])
        unreadable = build_bite_forecast(raw, MILLE_LACS, START, species_ids=["walleye"])

        def wind_factors(result: Any) -> list:
            return [
                f
                for s in result.scores["walleye"]
                for f in s.all_factors
                if f.category == FactorCategory.WIND
            ]

        assert wind_factors(windy)
        assert wind_factors(unreadable) == []
        assert all(h.wind_speed == 0 for h in unreadable.hourly)

    def test_storm_events_detected(self) -> None:
        result = build_bite_forecast(_samples(), MILLE_LACS, START, species_ids=["walleye"])
        phases = {(e.hour, str(e.phase)) for e in result.storm_events}
        # 6.0 of snow over hours 15-17 is 2.0/hour: light, active precipitation
        assert {(15, "storm_active"), (16, "storm_active"), (17, "storm_active")} <= phases
        # Falling pressure with pop 0.6 and no snow yet
        assert (12, "pre_storm") in phases


class TestBuildExtendedScores:
    """Multi-day scoring in 24-hour chunks."""

    def test_five_days(self) -> None:
        scores = build_extended_scores(_samples(40), MILLE_LACS, START, "walleye")
        assert len(scores) == 120
        assert [s.hour for s in scores[:2]] == [0, 1]
        assert scores[24].hour == 0
        assert scores[119].hour == 23
        timestamps = [s.timestamp for s in scores]
        assert timestamps == sorted(timestamps)
        assert timestamps[-1] == START + timedelta(hours=119)

    def test_custom_length(self) -> None:
        scores = build_extended_scores(_samples(), MILLE_LACS, START, "walleye", hours=48)
        assert len(scores) == 48


class TestWalleyeEarlyIceDawn:
    """Falling barometer under overcast skies at early-ice dawn."""

    START = datetime(2025, 12, 1, 6, tzinfo=UTC)

    def _falling_overcast(self) -> list[RawForecastSample]:
        # 1013 -> 1005 hPa over 21 hours, 40°F, 80% cloud
        return [
            RawForecastSample(
                timestamp=self.START + timedelta(hours=3 * i),
                temperature=40,
                pressure=1013 - 8 * i / 7,
                cloud_percent=80,
            )
            for i in range(8)
        ]

    def test_dawn_is_excellent(self) -> None:
        result = build_bite_forecast(
            self._falling_overcast(),
            Location(lat=46.25, lon=-93.65),
            self.START,
            species_ids=["walleye"],
        )
        dawn = [s for s in result.scores["walleye"] if s.period == TimeOfDay.DAWN]

        assert dawn
        for score in dawn:
            assert score.score >= 80
            assert score.quality == QualityLabel.EXCELLENT
            categories = {f.category for f in score.all_factors}
            assert FactorCategory.PRESSURE in categories
            assert FactorCategory.CLOUD_COVER in categories
