"""Weather-history response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WeatherRegion(BaseModel):
    """A forecast region returned by ``/api/regions/find``."""

    model_config = ConfigDict(extra="ignore")

    region_id: int
    name: str | None = None
    centroid_lat: float | None = None
    centroid_lon: float | None = None
