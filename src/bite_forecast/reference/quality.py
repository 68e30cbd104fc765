"""Score bands, quality labels and display colors.

Labels are assigned by the scoring engine; colors are a presentation
lookup applied only when serializing or rendering.
"""

from __future__ import annotations

from enum import StrEnum

BASELINE_SCORE: int = 50
MIN_SCORE: int = 0
MAX_SCORE: int = 100

# Hours at or above this score count toward a bite window
GOOD_SCORE_THRESHOLD: int = 60


class QualityLabel(StrEnum):
    """Human-readable score band."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    VERY_POOR = "Very Poor"


# (minimum score, label), highest first
QUALITY_BANDS: tuple[tuple[int, QualityLabel], ...] = (
    (80, QualityLabel.EXCELLENT),
    (60, QualityLabel.GOOD),
    (40, QualityLabel.FAIR),
    (20, QualityLabel.POOR),
    (0, QualityLabel.VERY_POOR),
)

QUALITY_COLORS: dict[QualityLabel, str] = {
    QualityLabel.EXCELLENT: "#22c55e",
    QualityLabel.GOOD: "#D4AF37",
    QualityLabel.FAIR: "#FFA500",
    QualityLabel.POOR: "#FF8C00",
    QualityLabel.VERY_POOR: "#D9534F",
}


def quality_color(label: QualityLabel | str) -> str:
    """Hex color for a quality label."""
    return QUALITY_COLORS[QualityLabel(label)]
