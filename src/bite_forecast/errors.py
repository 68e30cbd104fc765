"""Error kinds raised by the bite forecast engine.

Only interpolation failures are fatal for a whole forecast. Unknown species
and out-of-range hours are turned into zero scores by the scoring engine;
the strict variants below exist for callers that want to fail loudly.
"""

from __future__ import annotations


class BiteForecastError(Exception):
    """Base class for all engine errors."""


class InsufficientForecastDataError(BiteForecastError, ValueError):
    """Fewer 3-hour forecast samples than interpolation needs."""

    def __init__(self, available: int, required: int = 2) -> None:
        self.available = available
        self.required = required
        super().__init__(
            f"Insufficient forecast data: need at least {required} samples, got {available}"
        )


class InvalidHourIndexError(BiteForecastError, IndexError):
    """Hour index outside the hourly series."""

    def __init__(self, hour: int, length: int) -> None:
        self.hour = hour
        self.length = length
        super().__init__(f"Hour index {hour} out of range for {length} hourly samples")


class UnknownSpeciesError(BiteForecastError, KeyError):
    """Species id not present in the catalogue."""

    def __init__(self, species_id: str) -> None:
        self.species_id = species_id
        super().__init__(species_id)

    def __str__(self) -> str:
        return f"Unknown species: {self.species_id}"
