"""Normalize raw request mappings into CrossSection and StandardSelection.

Request payloads come from web forms and JSON clients that disagree on
naming, so every field is looked up under several aliases (snake_case,
camelCase and the legacy form names).  The first alias holding a
non-``None`` value wins.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from streetcheck.geometry.coerce import to_bool, to_enum, to_number
from streetcheck.geometry.schema import (
    CYCLE_SIDES_TOKENS,
    CYCLE_TYPE_TOKENS,
    DEFAULT_CYCLE_SIDES,
    DEFAULT_CYCLE_TYPE,
    DEFAULT_PARKING_TYPE,
    PARKING_TYPE_TOKENS,
    CrossSection,
)
from streetcheck.rules.catalog import Standard
from streetcheck.rules.models import StandardSelection

logger = logging.getLogger(__name__)

FIELD_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "total_width_m": ("totalWidthM", "total_width_m"),
    "sidewalk_left_m": ("sidewalkLeftM", "sidewalk_left_m"),
    "sidewalk_right_m": ("sidewalkRightM", "sidewalk_right_m"),
    "lane_count": ("lanesCount", "lanes_count", "laneCount", "lane_count"),
    "bus_traffic": ("bus", "busTraffic", "bus_traffic"),
    "cycle_needed": ("cycleNeeded", "cycle_needed"),
    "cycle_type": ("cycleType", "cycle_type"),
    "cycle_sides": ("cycleSides", "cycle_sides"),
    "parking_needed": ("parkingNeeded", "parking_needed"),
    "parking_type": ("parkingType", "parking_type"),
})

# Legacy form flag names per standard, checked besides the generic names
_LEGACY_STANDARD_NAMES: Mapping[Standard, tuple[str, ...]] = MappingProxyType({
    Standard.STREET_DESIGN: ("RASt", "rast", "applyRast"),
    Standard.CYCLE_TRAFFIC: ("ERA", "era", "applyEra"),
    Standard.PEDESTRIAN_COMFORT: ("EFA", "efa", "applyEfa"),
    Standard.TRAFFIC_REGULATION: ("StVO", "stvo", "applyStvo"),
})


def standard_aliases(standard: Standard) -> tuple[str, ...]:
    """Return every request key under which *standard* may be selected."""
    letter = standard.letter
    return (
        standard.value,
        f"uses_standard_{letter}",
        f"usesStandard{letter.upper()}",
        f"standard_{letter}",
    ) + _LEGACY_STANDARD_NAMES[standard]


def _pick(raw: Mapping[str, Any], field: str) -> Any:
    """Return the first non-None value stored under one of *field*'s aliases."""
    for alias in FIELD_ALIASES[field]:
        value = raw.get(alias)
        if value is not None:
            return value
    return None


def normalize_cross_section(raw: Mapping[str, Any]) -> CrossSection:
    """Coerce a raw request mapping into a CrossSection.

    Never raises for malformed values: numbers fall back to 0, flags to
    False, and enum fields to their documented defaults.
    """
    section = CrossSection(
        total_width_m=to_number(_pick(raw, "total_width_m")),
        sidewalk_left_m=to_number(_pick(raw, "sidewalk_left_m")),
        sidewalk_right_m=to_number(_pick(raw, "sidewalk_right_m")),
        lane_count=int(to_number(_pick(raw, "lane_count"))),
        bus_traffic=to_bool(_pick(raw, "bus_traffic")),
        cycle_needed=to_bool(_pick(raw, "cycle_needed")),
        cycle_type=to_enum(_pick(raw, "cycle_type"), CYCLE_TYPE_TOKENS, DEFAULT_CYCLE_TYPE),
        cycle_sides=to_enum(_pick(raw, "cycle_sides"), CYCLE_SIDES_TOKENS, DEFAULT_CYCLE_SIDES),
        parking_needed=to_bool(_pick(raw, "parking_needed")),
        parking_type=to_enum(
            _pick(raw, "parking_type"), PARKING_TYPE_TOKENS, DEFAULT_PARKING_TYPE
        ),
    )
    logger.debug("Normalized cross-section: %s", section.to_dict())
    return section


def normalize_standards(raw: Mapping[str, Any]) -> StandardSelection:
    """Read the four standard flags from a raw request mapping.

    A standard is selected if any of its aliases holds a truthy value.
    """
    flags = {
        standard.value: any(to_bool(raw.get(alias)) for alias in standard_aliases(standard))
        for standard in Standard
    }
    return StandardSelection(**flags)
