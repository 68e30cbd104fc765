"""
Species behaviour catalogue for the bite forecast.

Twenty Upper-Midwest ice-fishing species, each with:
- time-of-day modifiers (added to the baseline score)
- weather-factor weights (multipliers on trend/event impacts)
- cloud-cover preference deltas
- seasonal modifiers per ice-season stage
- night-feeder flag plus moon and day-length sensitivity

Time-of-day keys: dawn, dusk, early_night, late_night, midday, morning,
afternoon, late_afternoon. Omitted periods are neutral. ``window_hours``
on early_night, morning, afternoon and late_afternoon bounds how far from
sunrise/sunset the pattern reaches.

Tables are immutable; profiles are shared safely across threads.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from bite_forecast.errors import UnknownSpeciesError

TIME_PERIODS: tuple[str, ...] = (
    "dawn",
    "dusk",
    "early_night",
    "late_night",
    "midday",
    "morning",
    "afternoon",
    "late_afternoon",
)
SEASON_STAGES: tuple[str, ...] = ("early_ice", "mid_winter", "late_ice")

# Default reach of windowed patterns, in hours from sunrise/sunset
DEFAULT_WINDOW_HOURS = 3


@dataclass(frozen=True)
class TimePattern:
    """Score modifier for one time-of-day period."""

    modifier: int
    window_hours: int | None = None

    @property
    def reach_hours(self) -> int:
        return self.window_hours if self.window_hours is not None else DEFAULT_WINDOW_HOURS


@dataclass(frozen=True)
class WeatherWeights:
    """Multipliers applied to weather-derived impacts."""

    pressure: float = 1.0
    temperature: float = 1.0
    cloud_cover: float = 1.0
    precipitation: float = 1.0
    wind: float = 1.0


@dataclass(frozen=True)
class CloudPreference:
    """Score deltas for overcast (>=70%) and clear (<=30%) skies."""

    overcast: int = 0
    clear: int = 0


@dataclass(frozen=True)
class Education:
    """Angler-facing notes shown with a species card."""

    habits: str
    best_conditions: str
    winter_behavior: str
    tip: str


@dataclass(frozen=True)
class SpeciesProfile:
    """Static behavioural parameters for one species."""

    id: str
    name: str
    icon: str
    color: str
    time_patterns: Mapping[str, TimePattern]
    weights: WeatherWeights
    cloud_preference: CloudPreference
    seasonal_modifiers: Mapping[str, int]
    education: Education
    night_feeder: bool = False
    moon_sensitivity: float = 1.0
    day_length_sensitivity: float = 1.0

    def __post_init__(self) -> None:
        unknown = set(self.time_patterns) - set(TIME_PERIODS)
        if unknown:
            msg = f"{self.id}: unknown time periods {sorted(unknown)}"
            raise ValueError(msg)
        # Freeze the mappings so profiles can't be edited after load
        object.__setattr__(self, "time_patterns", MappingProxyType(dict(self.time_patterns)))
        object.__setattr__(
            self, "seasonal_modifiers", MappingProxyType(dict(self.seasonal_modifiers))
        )

    def pattern(self, period: str) -> TimePattern | None:
        """Time pattern for a period, or None when the species is neutral there."""
        return self.time_patterns.get(period)

    def season_modifier(self, stage: str) -> int:
        """Seasonal modifier for a stage (0 for off_season or unlisted stages)."""
        return self.seasonal_modifiers.get(stage, 0)


class SpeciesCatalog(Mapping[str, SpeciesProfile]):
    """Read-only lookup table of species profiles keyed by id."""

    def __init__(self, profiles: list[SpeciesProfile] | tuple[SpeciesProfile, ...]) -> None:
        table: dict[str, SpeciesProfile] = {}
        for profile in profiles:
            if profile.id in table:
                msg = f"Duplicate species id: {profile.id}"
                raise ValueError(msg)
            table[profile.id] = profile
        self._profiles = MappingProxyType(table)

    def __getitem__(self, species_id: str) -> SpeciesProfile:
        return self._profiles[species_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def require(self, species_id: str) -> SpeciesProfile:
        """Strict lookup.

        Raises:
            UnknownSpeciesError: If the id is not in the catalogue.
        """
        try:
            return self._profiles[species_id]
        except KeyError:
            raise UnknownSpeciesError(species_id) from None

    def ids(self) -> list[str]:
        """All species ids in catalogue order."""
        return list(self._profiles)

    def profiles(self) -> list[SpeciesProfile]:
        """All profiles in catalogue order."""
        return list(self._profiles.values())


def _tp(modifier: int, window_hours: int | None = None) -> TimePattern:
    return TimePattern(modifier=modifier, window_hours=window_hours)


def _seasons(early_ice: int, mid_winter: int, late_ice: int) -> dict[str, int]:
    return {"early_ice": early_ice, "mid_winter": mid_winter, "late_ice": late_ice}


# =============================================================================
# Profiles
# =============================================================================

WALLEYE = SpeciesProfile(
    id="walleye",
    name="Walleye",
    icon="🎣",
    color="#D4AF37",
    time_patterns={
        "dawn": _tp(15),
        "dusk": _tp(15),
        "early_night": _tp(10, 3),
        "midday": _tp(-10),
        "late_night": _tp(0),
    },
    weights=WeatherWeights(1.2, 0.8, 1.1, 1.0, 0.5),
    cloud_preference=CloudPreference(overcast=5, clear=-5),
    seasonal_modifiers=_seasons(7, -5, 8),
    education=Education(
        habits=(
            "Walleye are low-light predators with exceptional vision in dim conditions. "
            "They feed most actively during dawn and dusk twilight periods when they have "
            "a hunting advantage over prey."
        ),
        best_conditions=(
            "Falling barometer before a storm, overcast skies extending feeding windows, "
            "and early morning or evening hours."
        ),
        winter_behavior=(
            "Under ice, walleye often suspend over deep basins during the day and move "
            "shallow to feed during golden hours. Target depths of 15-30 feet near structure."
        ),
        tip=(
            "Use glow jigs tipped with minnow heads. Aggressive jigging followed by long "
            "pauses often triggers strikes."
        ),
    ),
    night_feeder=True,
    moon_sensitivity=1.0,
    day_length_sensitivity=0.6,
)

NORTHERN_PIKE = SpeciesProfile(
    id="northernPike",
    name="Northern Pike",
    icon="🐊",
    color="#1D4D3C",
    time_patterns={
        "dawn": _tp(10),
        "dusk": _tp(10),
        "midday": _tp(0),
        "late_night": _tp(-10),
    },
    weights=WeatherWeights(1.0, 0.9, 0.8, 1.0, 0.5),
    cloud_preference=CloudPreference(overcast=3, clear=0),
    seasonal_modifiers=_seasons(10, -3, 10),
    education=Education(
        habits=(
            "Pike are ambush predators that hunt visually throughout the day. They prefer "
            "to lie in wait near weed edges, drop-offs, and structure."
        ),
        best_conditions=(
            "Active all day in overcast conditions. Look for pike around weed edges, rocky "
            "points, and shallow bays with vegetation."
        ),
        winter_behavior=(
            "Pike remain active under ice and will chase lures aggressively during feeding "
            "periods. They often occupy shallower water (5-15 feet) than other predators."
        ),
        tip=(
            "Quick-strike rigs with large minnows or dead bait work well. Pike love flash "
            "and movement, so run tip-ups with bright flags."
        ),
    ),
    moon_sensitivity=1.0,
    day_length_sensitivity=0.3,
)

MUSKELLUNGE = SpeciesProfile(
    id="muskellunge",
    name="Muskellunge",
    icon="🦈",
    color="#2F4F4F",
    time_patterns={
        "dawn": _tp(10),
        "dusk": _tp(10),
        "midday": _tp(-10),
        "late_night": _tp(0),
    },
    weights=WeatherWeights(1.1, 0.7, 1.0, 1.0, 0.5),
    cloud_preference=CloudPreference(overcast=5, clear=-5),
    seasonal_modifiers=_seasons(5, -8, 6),
    education=Education(
        habits=(
            "Muskies are large apex predators that become very sluggish in winter. Ice "
            "fishing for muskie is rare but possible during twilight periods."
        ),
        best_conditions=(
            "Dawn and dusk during falling barometer events. Very difficult to catch "
            "through ice; patience required."
        ),
        winter_behavior=(
            "Muskies often suspend and barely move in cold water. They may feed once every "
            "few days. Target deep edges near their summer haunts."
        ),
        tip="Large dead sucker or cisco on a quick-strike rig. Set tip-ups in 20-40 feet over weed edges.",
    ),
    moon_sensitivity=1.0,
    day_length_sensitivity=0.3,
)

LARGEMOUTH_BASS = SpeciesProfile(
    id="largemouthBass",
    name="Largemouth Bass",
    icon="🐟",
    color="#228B22",
    time_patterns={
        "midday": _tp(5),
        "dawn": _tp(5),
        "dusk": _tp(5),
        "late_night": _tp(-15),
    },
    weights=WeatherWeights(0.7, 1.3, 0.6, 0.8, 0.4),
    cloud_preference=CloudPreference(overcast=2, clear=2),
    seasonal_modifiers=_seasons(3, -10, 5),
    education=Education(
        habits=(
            "Bass have a much slower metabolism in winter. They still feed, but "
            "infrequently, often when shallow water is marginally warmer in the afternoon."
        ),
        best_conditions=(
            "Warm spells and sunny afternoons when shallow water gets slight solar warming. "
            "Midday (11am-3pm) can be best."
        ),
        winter_behavior=(
            "Bass hold tight to cover in 8-15 feet. They become more active during warming "
            "trends and will strike small jigs tipped with waxworms."
        ),
        tip=(
            "Downsize your presentation. Small jigs (1/16 oz) with finesse baits, fished "
            "very slow with subtle twitches."
        ),
    ),
    moon_sensitivity=0.3,
    day_length_sensitivity=0.3,
)

SMALLMOUTH_BASS = SpeciesProfile(
    id="smallmouthBass",
    name="Smallmouth Bass",
    icon="🟤",
    color="#8B4513",
    time_patterns={
        "dawn": _tp(8),
        "dusk": _tp(8),
        "midday": _tp(5),
        "late_night": _tp(-20),
    },
    weights=WeatherWeights(0.8, 1.2, 0.7, 0.9, 0.4),
    cloud_preference=CloudPreference(overcast=3, clear=2),
    seasonal_modifiers=_seasons(3, -10, 5),
    education=Education(
        habits=(
            "Smallmouth in winter occupy deeper water near rocks. They can be slightly more "
            "active in cold water than largemouth."
        ),
        best_conditions=(
            "Dawn, dusk and midday warmth. They respond to stable warm periods and chase "
            "baitfish near rocky structure."
        ),
        winter_behavior=(
            "Smallmouth stick to rock piles and points in 15-25 feet and may move slightly "
            "shallower during afternoon sun."
        ),
        tip="Small tubes, hair jigs and blade baits. Target rock transitions and hard bottom.",
    ),
    moon_sensitivity=0.3,
    day_length_sensitivity=0.3,
)

YELLOW_PERCH = SpeciesProfile(
    id="yellowPerch",
    name="Yellow Perch",
    icon="🟡",
    color="#FFD700",
    time_patterns={
        "morning": _tp(10, 3),
        "afternoon": _tp(10, 2),
        "midday": _tp(3),
        "late_night": _tp(-20),
    },
    weights=WeatherWeights(0.9, 0.8, 0.6, 1.0, 0.5),
    cloud_preference=CloudPreference(overcast=3, clear=2),
    seasonal_modifiers=_seasons(8, -3, 10),
    education=Education(
        habits=(
            "Perch feed in schools and rely on sight to pick off small prey. They bite best "
            "during daylight, with peaks in morning and late afternoon."
        ),
        best_conditions=(
            "The first 2-3 hours of morning and late afternoon into sunset. Stable weather "
            "helps; big cold fronts shut them down."
        ),
        winter_behavior=(
            "Perch roam mud flats eating larvae and small crustaceans. Schools can be large: "
            "where you find one, you find many."
        ),
        tip=(
            "Small tungsten jigs with spikes or waxworms. Jig aggressively to attract a "
            "school, then slow down for bites."
        ),
    ),
    moon_sensitivity=0.6,
    day_length_sensitivity=1.0,
)

BLACK_CRAPPIE = SpeciesProfile(
    id="blackCrappie",
    name="Black Crappie",
    icon="⚫",
    color="#4B0082",
    time_patterns={
        "dusk": _tp(15),
        "early_night": _tp(10, 4),
        "dawn": _tp(10),
        "midday": _tp(-5),
    },
    weights=WeatherWeights(0.9, 0.7, 1.0, 1.0, 0.5),
    cloud_preference=CloudPreference(overcast=5, clear=-3),
    seasonal_modifiers=_seasons(8, -3, 10),
    education=Education(
        habits=(
            "Crappies are famous for the evening and nighttime bite through the ice. They "
            "start biting at dusk and continue well after dark."
        ),
        best_conditions=(
            "Sunset into night is prime time. A falling barometer helps."
        ),
        winter_behavior=(
            "Crappies suspend at 10-20 feet near brush piles, green weeds or basin edges, "
            "feeding on minnows and plankton."
        ),
        tip=(
            "Small jigs with soft plastics or live minnows. Glow jigs work great at night; "
            "fish under lights."
        ),
    ),
    night_feeder=True,
    moon_sensitivity=0.6,
    day_length_sensitivity=1.0,
)

WHITE_CRAPPIE = SpeciesProfile(
    id="whiteCrappie",
    name="White Crappie",
    icon="⚪",
    color="#9370DB",
    time_patterns=BLACK_CRAPPIE.time_patterns,
    weights=BLACK_CRAPPIE.weights,
    cloud_preference=BLACK_CRAPPIE.cloud_preference,
    seasonal_modifiers=BLACK_CRAPPIE.seasonal_modifiers,
    education=Education(
        habits=(
            "White crappie behave much like black crappie: evening and night feeders that "
            "love low light."
        ),
        best_conditions=(
            "Dusk through night and overcast days. Often in the same areas as black crappie "
            "but may prefer slightly muddier water."
        ),
        winter_behavior=(
            "Suspend in deeper basins or around standing timber. White crappie tolerate "
            "murkier water than blacks."
        ),
        tip="Same tactics as black crappie: small jigs, minnows, and night fishing under lights.",
    ),
    night_feeder=True,
    moon_sensitivity=0.6,
    day_length_sensitivity=1.0,
)

BLUEGILL = SpeciesProfile(
    id="bluegill",
    name="Bluegill",
    icon="🔵",
    color="#4169E1",
    time_patterns={
        "midday": _tp(10),
        "late_afternoon": _tp(8, 3),
        "dawn": _tp(5),
        "dusk": _tp(-5),
        "late_night": _tp(-20),
    },
    weights=WeatherWeights(0.6, 0.9, 0.5, 0.8, 0.4),
    cloud_preference=CloudPreference(overcast=0, clear=3),
    seasonal_modifiers=_seasons(5, -8, 8),
    education=Education(
        habits=(
            "Bluegills feed during daylight and are less active at dawn and dusk than many "
            "fish. Late morning through afternoon is best."
        ),
        best_conditions=(
            "Warm, sunny days. Late morning (10am-2pm) is often peak time; they slow down "
            "as light fades."
        ),
        winter_behavior=(
            "Bluegills hold in basins at 15-25 feet or near green weeds, feeding on small "
            "invertebrates and insect larvae."
        ),
        tip=(
            "Tiny jigs with waxworms or spikes on 2-4lb line. They have soft mouths, so use "
            "a light drag."
        ),
    ),
    moon_sensitivity=0.3,
    day_length_sensitivity=1.0,
)

PUMPKINSEED_SUNFISH = SpeciesProfile(
    id="pumpkinseedSunfish",
    name="Pumpkinseed Sunfish",
    icon="🎃",
    color="#FF8C00",
    time_patterns=BLUEGILL.time_patterns,
    weights=BLUEGILL.weights,
    cloud_preference=BLUEGILL.cloud_preference,
    seasonal_modifiers=BLUEGILL.seasonal_modifiers,
    education=Education(
        habits=(
            "Pumpkinseeds are visual hunters like bluegills. They feed on small prey during "
            "daylight and go quiet at night."
        ),
        best_conditions="Similar to bluegill: midday and afternoon warmth. They often school with bluegills.",
        winter_behavior=(
            "Found in the same areas as bluegills, often in mixed schools, preferring some "
            "vegetation."
        ),
        tip="Same tactics as bluegill. Small ice jigs with live bait; great fish for kids.",
    ),
    moon_sensitivity=0.3,
    day_length_sensitivity=1.0,
)

LAKE_TROUT = SpeciesProfile(
    id="lakeTrout",
    name="Lake Trout",
    icon="🏔️",
    color="#708090",
    time_patterns={
        "midday": _tp(5),
        "morning": _tp(8, 2),
        "dawn": _tp(8),
        "dusk": _tp(8),
        "late_night": _tp(-10),
    },
    weights=WeatherWeights(0.7, 0.6, 0.5, 0.9, 0.5),
    cloud_preference=CloudPreference(overcast=0, clear=2),
    seasonal_modifiers=_seasons(6, -3, 6),
    education=Education(
        habits=(
            "Lake trout stay relatively active in winter, patrolling for ciscoes or smelt. "
            "They can be caught all day."
        ),
        best_conditions=(
            "Late morning through afternoon can be strong. Lakers are not as light-shy as walleye."
        ),
        winter_behavior=(
            "Found in deep, cold lakes at 40-100+ feet, cruising rocky points and humps for "
            "baitfish."
        ),
        tip=(
            "Heavy jigging spoons or tube jigs on stout rods and 10-12lb line. Electronics "
            "are key to finding them."
        ),
    ),
    night_feeder=True,
    moon_sensitivity=1.0,
    day_length_sensitivity=0.6,
)

RAINBOW_TROUT = SpeciesProfile(
    id="rainbowTrout",
    name="Rainbow Trout",
    icon="🌈",
    color="#FF69B4",
    time_patterns={
        "dawn": _tp(10),
        "dusk": _tp(10),
        "midday": _tp(3),
        "late_night": _tp(-20),
    },
    weights=WeatherWeights(0.8, 0.7, 0.8, 1.0, 0.5),
    cloud_preference=CloudPreference(overcast=4, clear=-3),
    seasonal_modifiers=_seasons(6, -3, 6),
    education=Education(
        habits="Rainbows cruise near shallow areas early and late in the day.",
        best_conditions="Dawn and dusk during a stable or falling barometer; they bite mid-morning too.",
        winter_behavior=(
            "Often stocked in small lakes. They cruise 10-20 feet feeding on minnows and "
            "insect larvae."
        ),
        tip="Small spoons or jigs with PowerBait or waxworms. Rainbows hit hard.",
    ),
    moon_sensitivity=1.0,
    day_length_sensitivity=0.6,
)

BROWN_TROUT = SpeciesProfile(
    id="brownTrout",
    name="Brown Trout",
    icon="🟫",
    color="#A0522D",
    time_patterns={
        "dawn": _tp(10),
        "dusk": _tp(10),
        "early_night": _tp(5, 2),
        "midday": _tp(-5),
        "late_night": _tp(0),
    },
    weights=WeatherWeights(0.8, 0.7, 1.0, 1.0, 0.5),
    cloud_preference=CloudPreference(overcast=6, clear=-5),
    seasonal_modifiers=_seasons(6, -3, 6),
    education=Education(
        habits=(
            "Browns are nocturnal by nature and big ones feed at night. Under ice they bite "
            "strongly at dawn and dusk and can feed after dark."
        ),
        best_conditions="Overcast days and dusk into evening. Browns are wary and prefer low light and cover.",
        winter_behavior=(
            "Often deeper than rainbows, near structure, holding tight to bottom to ambush prey."
        ),
        tip="Live minnows or small spoons near drop-offs and rocky areas.",
    ),
    night_feeder=True,
    moon_sensitivity=1.0,
    day_length_sensitivity=0.6,
)

BROOK_TROUT = SpeciesProfile(
    id="brookTrout",
    name="Brook Trout",
    icon="🟩",
    color="#20B2AA",
    time_patterns={
        "dawn": _tp(10),
        "dusk": _tp(10),
        "midday": _tp(3),
        "late_night": _tp(-20),
    },
    weights=WeatherWeights(0.8, 0.6, 0.8, 1.0, 0.5),
    cloud_preference=CloudPreference(overcast=4, clear=-2),
    seasonal_modifiers=_seasons(6, -3, 6),
    education=Education(
        habits=(
            "Brook trout are native to cold streams but stocked in lakes. They feed at dawn "
            "and dusk, and during the day if conditions allow."
        ),
        best_conditions="Morning, evening and overcast days. Brookies thrive in very cold water.",
        winter_behavior=(
            "Found in the coldest, clearest lakes, cruising 10-25 feet near springs or "
            "oxygenated areas."
        ),
        tip="Small jigs, spoons or flies under the ice, on light tackle.",
    ),
    moon_sensitivity=1.0,
    day_length_sensitivity=0.6,
)

CHANNEL_CATFISH = SpeciesProfile(
    id="channelCatfish",
    name="Channel Catfish",
    icon="😺",
    color="#696969",
    time_patterns={
        "late_afternoon": _tp(5, 3),
        "early_night": _tp(5, 2),
        "midday": _tp(0),
        "morning": _tp(0),
        "late_night": _tp(0),
    },
    weights=WeatherWeights(0.5, 1.4, 0.4, 0.7, 0.3),
    cloud_preference=CloudPreference(overcast=0, clear=0),
    seasonal_modifiers=_seasons(2, -8, 4),
    education=Education(
        habits=(
            "Channel cats gather in deep wintering holes and feed very infrequently, maybe "
            "once every few days."
        ),
        best_conditions=(
            "Warm spells. When temperatures approach freezing for a day or two, channel cats "
            "may become active."
        ),
        winter_behavior=(
            "They sit in the deepest holes (20-40+ feet) near river channels or deep "
            "structure with minimal movement."
        ),
        tip="Cut bait or dead minnows on bottom rigs. Warming trends are critical.",
    ),
    moon_sensitivity=0.3,
    day_length_sensitivity=0.3,
)

FLATHEAD_CATFISH = SpeciesProfile(
    id="flatheadCatfish",
    name="Flathead Catfish",
    icon="😸",
    color="#556B2F",
    time_patterns={"dusk": _tp(2)},
    weights=WeatherWeights(0.3, 1.5, 0.2, 0.4, 0.2),
    cloud_preference=CloudPreference(overcast=0, clear=0),
    seasonal_modifiers=_seasons(1, -10, 2),
    education=Education(
        habits=(
            "Flatheads hunker down in log jams or deep holes and barely eat all winter. "
            "Extremely rare through the ice."
        ),
        best_conditions="Practically none. Flathead fishing is effectively off during ice season.",
        winter_behavior="They nearly hibernate in deep, protected structure.",
        tip="Not worth targeting through ice. Save flatheads for summer.",
    ),
    moon_sensitivity=0.3,
    day_length_sensitivity=0.3,
)

LAKE_STURGEON = SpeciesProfile(
    id="lakeSturgeon",
    name="Lake Sturgeon",
    icon="🐋",
    color="#2F4F4F",
    time_patterns={
        "dawn": _tp(10),
        "morning": _tp(8, 3),
        "late_afternoon": _tp(10, 3),
        "dusk": _tp(10),
        "late_night": _tp(5),
        "midday": _tp(0),
    },
    weights=WeatherWeights(0.6, 0.7, 0.5, 0.8, 0.4),
    cloud_preference=CloudPreference(overcast=0, clear=0),
    seasonal_modifiers=_seasons(4, -2, 6),
    education=Education(
        habits=(
            "Through the ice, sturgeon are caught on setlines or by jigging deep river holes. "
            "Morning and late afternoon are best."
        ),
        best_conditions="Dawn through mid-morning and late afternoon toward sunset. Stable conditions help.",
        winter_behavior=(
            "Bottom feeders in deep channels (30-60+ feet) eating invertebrates, crayfish "
            "and small fish."
        ),
        tip="Heavy rods and 20lb+ line. Large hooks with cut bait or worms.",
    ),
    moon_sensitivity=0.3,
    day_length_sensitivity=0.3,
)

SAUGER = SpeciesProfile(
    id="sauger",
    name="Sauger",
    icon="🎣",
    color="#B8860B",
    time_patterns=WALLEYE.time_patterns,
    weights=WeatherWeights(1.2, 0.8, 1.1, 1.0, 0.5),
    cloud_preference=CloudPreference(overcast=5, clear=-5),
    seasonal_modifiers=_seasons(7, -5, 8),
    education=Education(
        habits=(
            "Sauger are close cousins of walleye with nearly identical patterns: low-light "
            "feeding at dawn and dusk, and some night bite."
        ),
        best_conditions="Same as walleye: falling barometer, overcast, twilight. Often in river systems.",
        winter_behavior=(
            "Sauger prefer slightly deeper water and current, and school tightly."
        ),
        tip="Jigs with minnows, fished like walleye.",
    ),
    night_feeder=True,
    moon_sensitivity=1.0,
    day_length_sensitivity=1.0,
)

CISCO = SpeciesProfile(
    id="cisco",
    name="Cisco (Tullibee)",
    icon="🐠",
    color="#87CEEB",
    time_patterns={
        "midday": _tp(10),
        "late_afternoon": _tp(8, 3),
        "dawn": _tp(5),
        "dusk": _tp(5),
        "late_night": _tp(-20),
    },
    weights=WeatherWeights(0.6, 0.7, 0.7, 0.8, 0.5),
    cloud_preference=CloudPreference(overcast=3, clear=3),
    seasonal_modifiers=_seasons(5, -4, 6),
    education=Education(
        habits=(
            "Ciscoes are open-water plankton feeders that roam the water column and feed in "
            "daylight when plankton are active."
        ),
        best_conditions="Late morning through afternoon; on sunny days they may feed more at midday.",
        winter_behavior=(
            "Suspend at 20-60 feet in lake basins and are often caught while targeting lake trout."
        ),
        tip="Small spoons, Swedish pimples or tiny jigs. Find the depth of the school.",
    ),
    moon_sensitivity=0.3,
    day_length_sensitivity=0.3,
)

BURBOT = SpeciesProfile(
    id="burbot",
    name="Burbot (Eelpout)",
    icon="🐍",
    color="#4B5563",
    time_patterns={
        "early_night": _tp(15, 4),
        "late_night": _tp(8),
        "dawn": _tp(5),
        "midday": _tp(-10),
    },
    weights=WeatherWeights(0.7, 0.6, 0.3, 1.2, 0.5),
    cloud_preference=CloudPreference(overcast=0, clear=0),
    seasonal_modifiers=_seasons(3, 10, -5),
    education=Education(
        habits=(
            "Burbot spawn under the ice at night in mid to late winter and are very active "
            "after dark."
        ),
        best_conditions=(
            "Evening into midnight. A falling barometer at night is ideal, and the pre-spawn "
            "period in late January and February is best."
        ),
        winter_behavior=(
            "Burbot move shallow at night to feed in 5-20 feet, bottom-oriented, eating fish "
            "and crayfish."
        ),
        tip="Fish after dark with glow jigs and dead or live bait.",
    ),
    night_feeder=True,
    moon_sensitivity=1.0,
    day_length_sensitivity=0.3,
)

DEFAULT_CATALOG = SpeciesCatalog(
    (
        WALLEYE,
        NORTHERN_PIKE,
        MUSKELLUNGE,
        LARGEMOUTH_BASS,
        SMALLMOUTH_BASS,
        YELLOW_PERCH,
        BLACK_CRAPPIE,
        WHITE_CRAPPIE,
        BLUEGILL,
        PUMPKINSEED_SUNFISH,
        LAKE_TROUT,
        RAINBOW_TROUT,
        BROWN_TROUT,
        BROOK_TROUT,
        CHANNEL_CATFISH,
        FLATHEAD_CATFISH,
        LAKE_STURGEON,
        SAUGER,
        CISCO,
        BURBOT,
    )
)
