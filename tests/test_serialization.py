"""Tests for the JSON output contracts."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta

from bite_forecast.analysis.forecast import build_bite_forecast
from bite_forecast.analysis.models import (
    BiteScore,
    BiteWindow,
    FactorCategory,
    ScoreFactor,
    TimeOfDay,
)
from bite_forecast.analysis.serialization import (
    bite_score_to_dict,
    bite_window_to_dict,
    forecast_to_dict,
)
from bite_forecast.reference.quality import QualityLabel, quality_color
from bite_forecast.schemas import Location, RawForecastSample

WHEN = datetime(2026, 1, 20, 13, tzinfo=UTC)


class TestBiteScoreToDict:
    """Per-hour score contract."""

    def test_fields(self) -> None:
        score = BiteScore(
            species_id="walleye",
            hour=3,
            timestamp=WHEN,
            score=72,
            quality=QualityLabel.GOOD,
            factors=(ScoreFactor(FactorCategory.PRESSURE, "Pressure falling", 9.6000001),),
            period=TimeOfDay.DAWN,
        )
        result = bite_score_to_dict(score)
        assert result == {
            "speciesId": "walleye",
            "hour": 3,
            "timestamp": "2026-01-20T13:00:00+00:00",
            "score": 72,
            "qualityLabel": "Good",
            "qualityColor": quality_color(QualityLabel.GOOD),
            "period": "dawn",
            "factors": [
                {"category": "pressure", "description": "Pressure falling", "impact": 9.6}
            ],
        }

    def test_error_score_without_timestamp(self) -> None:
        score = BiteScore("walleye", 30, None, 0, QualityLabel.VERY_POOR)
        result = bite_score_to_dict(score)
        assert result["timestamp"] is None
        assert result["period"] is None


class TestBiteWindowToDict:
    """Best-window contract."""

    def test_fields(self) -> None:
        window = BiteWindow(
            start=WHEN,
            end=WHEN + timedelta(hours=2),
            peak_score=81,
            peak_time=WHEN + timedelta(hours=1),
            duration_hours=3,
            start_hour=0,
            end_hour=2,
            peak_hour=1,
        )
        assert bite_window_to_dict(window) == {
            "start": "2026-01-20T13:00:00+00:00",
            "end": "2026-01-20T15:00:00+00:00",
            "peakScore": 81,
            "peakTime": "2026-01-20T14:00:00+00:00",
            "durationHours": 3,
        }


class TestForecastToDict:
    """Whole-forecast contract."""

    def _forecast_dict(self) -> dict:
        samples = [
            RawForecastSample(timestamp=WHEN + timedelta(hours=3 * i), temperature=20 + i)
            for i in range(9)
        ]
        forecast = build_bite_forecast(
            samples,
            Location(lat=46.25, lon=-93.65, name="Mille Lacs"),
            WHEN,
            species_ids=["walleye", "yellowPerch"],
        )
        return forecast_to_dict(forecast)

    def test_top_level_keys(self) -> None:
        result = self._forecast_dict()
        assert set(result) == {"location", "start", "hourly", "sunTimes", "stormEvents", "species"}
        assert result["location"]["name"] == "Mille Lacs"
        assert len(result["hourly"]) == 24

    def test_species_block(self) -> None:
        walleye = self._forecast_dict()["species"]["walleye"]
        assert walleye["name"] == "Walleye"
        assert walleye["color"] == "#D4AF37"
        assert len(walleye["scores"]) == 24
        assert isinstance(walleye["bestWindows"], list)

    def test_sun_times_unique_by_date(self) -> None:
        sun = self._forecast_dict()["sunTimes"]
        dates = [s["date"] for s in sun]
        assert len(dates) == len(set(dates))
        assert 1 <= len(dates) <= 2

    def test_json_serializable(self) -> None:
        text = json.dumps(self._forecast_dict())
        assert '"qualityColor"' in text

    def test_hourly_rounded_for_display(self) -> None:
        hourly = self._forecast_dict()["hourly"]
        assert hourly[1]["temperature"] == 20.3
        assert hourly[0]["weather"]["icon"] == "01d"
