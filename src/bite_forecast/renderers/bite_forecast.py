"""Species bite-forecast cards.

One card per species: the current score and quality band, the best
windows for the next 24 hours, the top factors behind the current hour
and a 24-bar score strip.
"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from typing import Any

from bite_forecast.renderers import render_template
from bite_forecast.renderers.date_utils import DEFAULT_TZ, format_hour, format_time_window

# Species with any score at or above this are listed first
HIGHLIGHT_SCORE = 60


def _window_label(window: dict[str, Any], now: datetime, tz: tzinfo) -> str:
    start = datetime.fromisoformat(window["start"])
    # A window ending at hour H covers H through the start of H+1
    end = datetime.fromisoformat(window["end"]) + timedelta(hours=1)
    return format_time_window(start, end, now, tz)


def _factor_sign(impact: float) -> str:
    return f"+{impact:g}" if impact > 0 else f"{impact:g}"


def build_species_cards(
    forecast: dict[str, Any], now: datetime, tz: tzinfo = DEFAULT_TZ
) -> list[dict[str, Any]]:
    """Card view-models, best current score first."""
    cards = []
    for species in forecast.get("species", {}).values():
        scores = species.get("scores", [])
        if not scores:
            continue
        current = scores[0]
        cards.append(
            {
                "id": species["id"],
                "name": species["name"],
                "icon": species["icon"],
                "color": species["color"],
                "score": current["score"],
                "label": current["qualityLabel"],
                "quality_color": current["qualityColor"],
                "error": any(f["category"] == "error" for f in current["factors"]),
                "factors": [
                    {"text": f["description"], "impact": _factor_sign(f["impact"])}
                    for f in current["factors"]
                ],
                "windows": [
                    {
                        "label": _window_label(w, now, tz),
                        "peak": w["peakScore"],
                        "hours": w["durationHours"],
                    }
                    for w in species.get("bestWindows", [])
                ],
                "bars": [
                    {
                        "height": max(2, s["score"]),
                        "color": s["qualityColor"],
                        "title": (
                            f"{format_hour(datetime.fromisoformat(s['timestamp']), tz)}: "
                            f"{s['score']} ({s['qualityLabel']})"
                            if s["timestamp"]
                            else f"{s['score']}"
                        ),
                    }
                    for s in scores
                ],
                "peak": max(s["score"] for s in scores),
            }
        )
    cards.sort(key=lambda c: (c["peak"] < HIGHLIGHT_SCORE, -c["score"], c["name"]))
    return cards


def build_bite_forecast_html(
    forecast: dict[str, Any], now: datetime, tz: tzinfo = DEFAULT_TZ
) -> str:
    """Build the species card grid for a serialized forecast."""
    cards = [c for c in build_species_cards(forecast, now, tz) if not c["error"]]
    if not cards:
        return "<p>No bite forecast available.</p>"

    storms = [
        {
            "time": format_hour(
                datetime.fromisoformat(forecast["hourly"][e["hour"]]["timestamp"]), tz
            ),
            "description": e["description"],
        }
        for e in forecast.get("stormEvents", [])
        if e["hour"] < len(forecast.get("hourly", []))
    ]
    return render_template("bite_forecast.html.j2", cards=cards, storms=storms)
