"""Tests for HTML renderers and display helpers."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any
from zoneinfo import ZoneInfo

from bite_forecast.renderers import render_template
from bite_forecast.renderers.bite_forecast import build_bite_forecast_html, build_species_cards
from bite_forecast.renderers.date_utils import day_prefix, format_hour, format_time_window

CENTRAL = ZoneInfo("America/Chicago")
# 2026-01-20 08:00 Central
NOW = datetime(2026, 1, 20, 14, tzinfo=UTC)


def _score(hour: int, score: int, label: str = "Good", color: str = "#D4AF37") -> dict[str, Any]:
    return {
        "speciesId": "walleye",
        "hour": hour,
        "timestamp": (NOW + timedelta(hours=hour)).isoformat(),
        "score": score,
        "qualityLabel": label,
        "qualityColor": color,
        "period": "day",
        "factors": [
            {"category": "pressure", "description": "Pressure falling steadily", "impact": 9.6},
            {"category": "time_of_day", "description": "Bright midday", "impact": -10.0},
        ],
    }


def _forecast() -> dict[str, Any]:
    return {
        "location": {"lat": 46.25, "lon": -93.65, "name": "Mille Lacs"},
        "start": NOW.isoformat(),
        "hourly": [{"timestamp": (NOW + timedelta(hours=h)).isoformat()} for h in range(24)],
        "sunTimes": [],
        "stormEvents": [
            {"hour": 9, "type": "pre_storm", "score": 15, "description": "Storm approaching"}
        ],
        "species": {
            "walleye": {
                "id": "walleye",
                "name": "Walleye",
                "icon": "🎣",
                "color": "#D4AF37",
                "scores": [_score(h, 72 if h in (9, 10) else 48) for h in range(24)],
                "bestWindows": [
                    {
                        "start": (NOW + timedelta(hours=9)).isoformat(),
                        "end": (NOW + timedelta(hours=10)).isoformat(),
                        "peakScore": 72,
                        "peakTime": (NOW + timedelta(hours=9)).isoformat(),
                        "durationHours": 2,
                    }
                ],
            },
            "bluegill": {
                "id": "bluegill",
                "name": "Bluegill",
                "icon": "🐟",
                "color": "#4169E1",
                "scores": [_score(h, 55, "Fair", "#FFA500") for h in range(24)],
                "bestWindows": [],
            },
        },
    }


class TestDateUtils:
    """Local-time labels."""

    def test_day_prefix(self) -> None:
        now = NOW.astimezone(CENTRAL)
        assert day_prefix(now, now) == "Today"
        assert day_prefix(now + timedelta(days=1), now) == "Tomorrow"
        assert day_prefix(now + timedelta(days=2), now) == "Thu"

    def test_same_suffix(self) -> None:
        # 17:00-19:00 Central
        start = datetime(2026, 1, 20, 23, tzinfo=UTC)
        assert format_time_window(start, start + timedelta(hours=2), NOW, CENTRAL) == "Today 5-7pm"

    def test_crossing_noon(self) -> None:
        start = datetime(2026, 1, 21, 17, tzinfo=UTC)  # 11am Central
        label = format_time_window(start, start + timedelta(hours=2), NOW, CENTRAL)
        assert label == "Tomorrow 11am-1pm"

    def test_minutes_shown(self) -> None:
        start = datetime(2026, 1, 20, 12, 30, tzinfo=UTC)  # 6:30am Central
        label = format_time_window(start, start + timedelta(minutes=90), NOW, CENTRAL)
        assert label == "Today 6:30-8am"

    def test_format_hour(self) -> None:
        assert format_hour(datetime(2026, 1, 20, 6, tzinfo=UTC), CENTRAL) == "12am"
        assert format_hour(datetime(2026, 1, 20, 18, tzinfo=UTC), CENTRAL) == "12pm"


class TestBuildSpeciesCards:
    """Card view-models."""

    def test_best_first(self) -> None:
        cards = build_species_cards(_forecast(), NOW, CENTRAL)
        assert [c["id"] for c in cards] == ["walleye", "bluegill"]

    def test_window_label_covers_last_hour(self) -> None:
        walleye = build_species_cards(_forecast(), NOW, CENTRAL)[0]
        # Hours 17:00 and 18:00 Central, ending at 19:00
        assert walleye["windows"][0]["label"] == "Today 5-7pm"

    def test_factor_signs(self) -> None:
        walleye = build_species_cards(_forecast(), NOW, CENTRAL)[0]
        assert [f["impact"] for f in walleye["factors"]] == ["+9.6", "-10"]

    def test_bars(self) -> None:
        walleye = build_species_cards(_forecast(), NOW, CENTRAL)[0]
        assert len(walleye["bars"]) == 24
        assert walleye["bars"][9]["height"] == 72

    def test_skips_species_without_scores(self) -> None:
        forecast = _forecast()
        forecast["species"]["bluegill"]["scores"] = []
        assert len(build_species_cards(forecast, NOW, CENTRAL)) == 1


class TestBuildBiteForecastHtml:
    """Rendered species grid."""

    def test_contains_species(self) -> None:
        html = build_bite_forecast_html(_forecast(), NOW, CENTRAL)
        assert "Walleye" in html
        assert "Bluegill" in html
        assert "Today 5-7pm" in html
        assert "Pressure falling steadily" in html

    def test_storm_alerts(self) -> None:
        html = build_bite_forecast_html(_forecast(), NOW, CENTRAL)
        assert "Storm approaching" in html
        assert "5pm" in html

    def test_no_windows_message(self) -> None:
        html = build_bite_forecast_html(_forecast(), NOW, CENTRAL)
        assert "No strong bite windows" in html

    def test_empty_forecast(self) -> None:
        assert "No bite forecast available" in build_bite_forecast_html({}, NOW, CENTRAL)

    def test_error_cards_hidden(self) -> None:
        forecast = _forecast()
        error = {**_score(0, 0), "factors": [{"category": "error", "description": "x", "impact": 0}]}
        forecast["species"]["bluegill"]["scores"] = [error]
        html = build_bite_forecast_html(forecast, NOW, CENTRAL)
        assert "Bluegill" not in html

    def test_autoescape(self) -> None:
        forecast = _forecast()
        forecast["species"]["walleye"]["name"] = "<script>x</script>"
        html = build_bite_forecast_html(forecast, NOW, CENTRAL)
        assert "<script>x</script>" not in html


class TestBaseTemplate:
    """Page shell."""

    def test_renders_page(self) -> None:
        html = render_template(
            "base.html.j2",
            updated="2026-01-20 08:00",
            location_name="Mille Lacs",
            lat=46.25,
            lon=-93.65,
            bite_forecast="<p>cards</p>",
        )
        assert "<!DOCTYPE html>" in html
        assert "Bite Forecast: Mille Lacs" in html
        assert "Updated 2026-01-20 08:00" in html
        assert "<p>cards</p>" in html
