"""Rule catalog — baseline widths and per-standard override tables.

All tables are read-only mappings built once at import time.  Widths are in
metres.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class RuleKey(str, Enum):
    """Keys of an effective rule table."""

    SIDEWALK_MIN = "sidewalk_min"
    SIDEWALK_TARGET = "sidewalk_target"
    LANE_MIN = "lane_min"
    LANE_REGULAR = "lane_regular"
    CYCLE_MIN = "cycle_min"
    CYCLE_PROTECTED_MIN = "cycle_protected_min"
    CYCLE_MARKED_MIN = "cycle_marked_min"
    CYCLE_SEPARATED_MIN = "cycle_separated_min"
    PARKING_PARALLEL_MIN = "parking_parallel_min"
    PARKING_ANGLED_MIN = "parking_angled_min"
    PARKING_PERPENDICULAR_MIN = "parking_perpendicular_min"


class Standard(str, Enum):
    """Selectable design standards.

    The letter in each comment is the generic name used by request payloads
    (``usesStandardA`` ...).
    """

    STREET_DESIGN = "street_design"  # A
    CYCLE_TRAFFIC = "cycle_traffic"  # B
    PEDESTRIAN_COMFORT = "pedestrian_comfort"  # C
    TRAFFIC_REGULATION = "traffic_regulation"  # D

    @property
    def label(self) -> str:
        return STANDARD_LABELS[self]

    @property
    def letter(self) -> str:
        return STANDARD_LETTERS[self]


STANDARD_LABELS: Mapping[Standard, str] = MappingProxyType({
    Standard.STREET_DESIGN: "RASt 06",
    Standard.CYCLE_TRAFFIC: "ERA 2010",
    Standard.PEDESTRIAN_COMFORT: "EFA 2002",
    Standard.TRAFFIC_REGULATION: "StVO",
})

STANDARD_LETTERS: Mapping[Standard, str] = MappingProxyType({
    Standard.STREET_DESIGN: "a",
    Standard.CYCLE_TRAFFIC: "b",
    Standard.PEDESTRIAN_COMFORT: "c",
    Standard.TRAFFIC_REGULATION: "d",
})

BASELINE_RULES: Mapping[RuleKey, float] = MappingProxyType({
    RuleKey.SIDEWALK_MIN: 1.5,
    RuleKey.SIDEWALK_TARGET: 1.8,
    RuleKey.LANE_MIN: 2.75,
    RuleKey.LANE_REGULAR: 3.25,
    RuleKey.CYCLE_MIN: 1.5,
    RuleKey.PARKING_PARALLEL_MIN: 2.0,
    RuleKey.PARKING_ANGLED_MIN: 2.5,
    RuleKey.PARKING_PERPENDICULAR_MIN: 5.0,
})

# A: strengthens sidewalks, lanes and parking
STREET_DESIGN_RULES: Mapping[RuleKey, float] = MappingProxyType({
    RuleKey.SIDEWALK_MIN: 1.8,
    RuleKey.LANE_MIN: 2.75,
    RuleKey.LANE_REGULAR: 3.25,
    RuleKey.PARKING_PARALLEL_MIN: 2.0,
    RuleKey.PARKING_ANGLED_MIN: 2.5,
    RuleKey.PARKING_PERPENDICULAR_MIN: 5.0,
})

# B: cycle facilities
CYCLE_TRAFFIC_RULES: Mapping[RuleKey, float] = MappingProxyType({
    RuleKey.CYCLE_PROTECTED_MIN: 1.5,
    RuleKey.CYCLE_MARKED_MIN: 1.85,
    RuleKey.CYCLE_SEPARATED_MIN: 2.0,
})

# C: walking comfort
PEDESTRIAN_COMFORT_RULES: Mapping[RuleKey, float] = MappingProxyType({
    RuleKey.SIDEWALK_MIN: 1.8,
    RuleKey.SIDEWALK_TARGET: 2.5,
})

# D: lane widths, applied as a lower bound only
TRAFFIC_REGULATION_RULES: Mapping[RuleKey, float] = MappingProxyType({
    RuleKey.LANE_MIN: 2.75,
    RuleKey.LANE_REGULAR: 3.25,
})

STANDARD_RULES: Mapping[Standard, Mapping[RuleKey, float]] = MappingProxyType({
    Standard.STREET_DESIGN: STREET_DESIGN_RULES,
    Standard.CYCLE_TRAFFIC: CYCLE_TRAFFIC_RULES,
    Standard.PEDESTRIAN_COMFORT: PEDESTRIAN_COMFORT_RULES,
    Standard.TRAFFIC_REGULATION: TRAFFIC_REGULATION_RULES,
})

CYCLE_KEYS: tuple[RuleKey, ...] = (
    RuleKey.CYCLE_PROTECTED_MIN,
    RuleKey.CYCLE_MARKED_MIN,
    RuleKey.CYCLE_SEPARATED_MIN,
)
