"""Tiered JSON cache for fetched forecasts and derived outputs.

Files live under one base directory, split by how quickly they go stale:
  - live/: the OpenWeather 3-hour forecast, 3h TTL
  - historical/: weather-history rows for the lake's region, 24h TTL
  - derived/: engine output and the rendered site, always recomputed

Every file is wrapped in a metadata envelope carrying ``fetched_at`` and
``valid_until``, so the fetch flow can skip anything that is still fresh.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime, timedelta
from pathlib import Path  # noqa: TC003
from typing import Any

logger = logging.getLogger(__name__)

FORECAST_PATH = Path("live/forecast.json")
HISTORY_PATH = Path("historical/weather_history.json")
SCORES_PATH = Path("derived/bite_scores.json")

FORECAST_TTL = timedelta(hours=3)
HISTORY_TTL = timedelta(hours=24)


def expires_in(ttl: timedelta) -> datetime:
    """Expiry timestamp ``ttl`` from now."""
    return datetime.now(UTC) + ttl


class DataStore:
    """Reads and writes metadata-enveloped JSON files with TTL."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.historical = base_dir / "historical"
        self.live = base_dir / "live"
        self.derived = base_dir / "derived"

    def read(self, path: Path) -> Any:
        """Return the ``data`` payload of a stored file, or None if missing."""
        envelope = self.read_raw(path)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Return the full envelope (meta + data), or None if missing."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under the base dir (e.g. ``live/forecast.json``).
            data: Payload stored under the ``data`` key.
            source: Where the data came from (e.g. ``"openweathermap.org"``).
            valid_until: Expiry timestamp. None means never fresh.
            **params: Extra metadata (location, region id, ...).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        meta.update(params)

        with full.open("w") as f:
            json.dump({"meta": meta, "data": data}, f, indent=2, default=str)
        logger.info("Stored %s (source=%s)", path, source)
        return full

    def fetched_at(self, path: Path) -> datetime | None:
        """When a stored file was fetched, or None if missing/unknown."""
        envelope = self.read_raw(path) or {}
        value = envelope.get("meta", {}).get("fetched_at")
        return datetime.fromisoformat(value) if value else None

    def is_fresh(self, path: Path) -> bool:
        """True if the file exists and its ``valid_until`` hasn't passed."""
        envelope = self.read_raw(path)
        if envelope is None:
            return False
        valid_until = envelope.get("meta", {}).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
