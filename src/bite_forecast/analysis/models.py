"""Data models for the bite forecast engine.

Everything here is immutable: the engine builds new records and never
edits them, so one set of annotations can be shared by every
species x hour evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum

from bite_forecast.reference.quality import QualityLabel
from bite_forecast.schemas import Location, WeatherCondition

# =============================================================================
# Categories
# =============================================================================


class TimeOfDay(StrEnum):
    """Base sun-relative periods plus the finer species-specific ones."""

    DAWN = "dawn"
    DAY = "day"
    DUSK = "dusk"
    NIGHT = "night"
    MORNING = "morning"
    MIDDAY = "midday"
    AFTERNOON = "afternoon"
    LATE_AFTERNOON = "late_afternoon"
    EARLY_NIGHT = "early_night"
    LATE_NIGHT = "late_night"

    @property
    def is_night(self) -> bool:
        return self in (TimeOfDay.NIGHT, TimeOfDay.EARLY_NIGHT, TimeOfDay.LATE_NIGHT)


class PressureTrend(StrEnum):
    FALLING_FAST = "falling_fast"
    FALLING = "falling"
    STABLE = "stable"
    RISING = "rising"
    RISING_FAST = "rising_fast"
    LOW_STEADY = "low_steady"
    HIGH = "high"


class TemperatureTrend(StrEnum):
    EXTREME_COLD = "extreme_cold"
    WARMING = "warming"
    COLD_FRONT = "cold_front"
    MILD = "mild"
    STABLE = "stable"


class StormPhase(StrEnum):
    PRE_STORM = "pre_storm"
    STORM_ACTIVE = "storm_active"
    POST_STORM = "post_storm"


class SeasonStage(StrEnum):
    EARLY_ICE = "early_ice"
    MID_WINTER = "mid_winter"
    LATE_ICE = "late_ice"
    OFF_SEASON = "off_season"


class MoonPhase(StrEnum):
    NEW = "new"
    WAXING_GIBBOUS = "waxing_gibbous"
    FIRST_QUARTER = "first_quarter"
    FULL = "full"
    WANING_GIBBOUS = "waning_gibbous"
    LAST_QUARTER = "last_quarter"
    NEUTRAL = "neutral"


class DayLengthTrend(StrEnum):
    LENGTHENING = "lengthening"
    SHORTENING = "shortening"
    STABLE = "stable"


class FactorCategory(StrEnum):
    """What kind of signal a score factor came from."""

    TIME_OF_DAY = "time_of_day"
    PRESSURE = "pressure"
    TEMPERATURE = "temperature"
    CLOUD_COVER = "cloud_cover"
    STORM = "storm"
    WIND = "wind"
    SEASONAL = "seasonal"
    MOON = "moon"
    DAY_LENGTH = "day_length"
    HISTORY = "history"
    ERROR = "error"


# =============================================================================
# Weather
# =============================================================================


@dataclass(frozen=True)
class HourlySample:
    """One interpolated hour of weather.

    ``rain`` and ``snow`` are the hour's share of the 3-hour volume.
    """

    timestamp: datetime
    temperature: float
    pressure: float
    humidity: float
    cloud_percent: float
    wind_speed: float
    wind_deg: float
    pop: float
    rain: float
    snow: float
    condition: WeatherCondition = field(default_factory=WeatherCondition)


@dataclass(frozen=True)
class SunTimes:
    """Sunrise and sunset (UTC) for one solar date at one location.

    On polar days and nights the sun never crosses the horizon and
    ``polar`` is set: a polar night has zero day length, a polar day 24h.
    """

    date: date
    sunrise: datetime
    sunset: datetime
    solar_noon: datetime
    polar: bool = False

    @property
    def day_length_minutes(self) -> float:
        return (self.sunset - self.sunrise).total_seconds() / 60


@dataclass(frozen=True)
class TrendResult:
    """Pressure or temperature trend at one hour."""

    trend: PressureTrend | TemperatureTrend
    score: int
    description: str
    change: float = 0.0


@dataclass(frozen=True)
class StormEvent:
    """A storm phase tagged to one hour of the series."""

    hour: int
    phase: StormPhase
    score: int
    description: str


# =============================================================================
# Seasonal
# =============================================================================


@dataclass(frozen=True)
class SeasonInfo:
    stage: SeasonStage
    modifier: int = 0
    description: str | None = None


@dataclass(frozen=True)
class MoonInfo:
    """Lunar phase plus the (possibly zero) score modifier it earns."""

    phase: MoonPhase
    fraction: float
    name: str
    modifier: int = 0
    description: str | None = None


@dataclass(frozen=True)
class DayLengthInfo:
    trend: DayLengthTrend
    change_minutes: float
    day_length_minutes: float
    modifier: int = 0
    description: str | None = None


# =============================================================================
# Scores
# =============================================================================


@dataclass(frozen=True)
class ScoreFactor:
    """One signed contribution to a bite score."""

    category: FactorCategory
    description: str
    impact: float


@dataclass(frozen=True)
class BiteScore:
    """Score for one species at one hour.

    ``factors`` holds the top contributions for presentation;
    ``all_factors`` keeps every non-zero one.
    """

    species_id: str
    hour: int
    timestamp: datetime | None
    score: int
    quality: QualityLabel
    factors: tuple[ScoreFactor, ...] = ()
    all_factors: tuple[ScoreFactor, ...] = ()
    period: TimeOfDay | None = None

    @property
    def is_error(self) -> bool:
        return any(f.category == FactorCategory.ERROR for f in self.factors)


@dataclass(frozen=True)
class BiteWindow:
    """Contiguous run of good hours around a local score peak."""

    start: datetime
    end: datetime
    peak_score: int
    peak_time: datetime
    duration_hours: int
    start_hour: int
    end_hour: int
    peak_hour: int


@dataclass(frozen=True)
class BiteForecast:
    """Full engine output for one location and start instant."""

    location: Location
    start: datetime
    hourly: tuple[HourlySample, ...]
    sun_times: tuple[SunTimes, ...]
    storm_events: tuple[StormEvent, ...]
    scores: dict[str, list[BiteScore]]
    best_windows: dict[str, list[BiteWindow]]

    def current(self, species_id: str) -> BiteScore | None:
        """Score at hour 0 for a species, if it was scored."""
        series = self.scores.get(species_id)
        return series[0] if series else None
