"""CrossSection — the normalized, fully typed geometry of one street section.

All widths are stored in metres.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


class CycleType(str, Enum):
    """Kind of cycle facility."""

    PROTECTED = "protected"
    MARKED = "marked"
    SEPARATED = "separated"


class CycleSides(str, Enum):
    """Whether cycle facilities run on one or both sides."""

    ONE_SIDED = "one-sided"
    TWO_SIDED = "two-sided"

    @property
    def count(self) -> int:
        return 2 if self is CycleSides.TWO_SIDED else 1


class ParkingType(str, Enum):
    """Parking arrangement along the kerb."""

    PARALLEL = "parallel"
    ANGLED = "angled"
    PERPENDICULAR = "perpendicular"


DEFAULT_CYCLE_TYPE = CycleType.SEPARATED
DEFAULT_CYCLE_SIDES = CycleSides.ONE_SIDED
DEFAULT_PARKING_TYPE = ParkingType.PARALLEL

# Accepted lower-cased tokens per enum, including the German form vocabulary
CYCLE_TYPE_TOKENS: Mapping[str, CycleType] = MappingProxyType({
    "protected": CycleType.PROTECTED,
    "schutzstreifen": CycleType.PROTECTED,
    "marked": CycleType.MARKED,
    "radfahrstreifen": CycleType.MARKED,
    "separated": CycleType.SEPARATED,
    "baulicher_radweg": CycleType.SEPARATED,
})

CYCLE_SIDES_TOKENS: Mapping[str, CycleSides] = MappingProxyType({
    "one-sided": CycleSides.ONE_SIDED,
    "one_sided": CycleSides.ONE_SIDED,
    "einseitig": CycleSides.ONE_SIDED,
    "two-sided": CycleSides.TWO_SIDED,
    "two_sided": CycleSides.TWO_SIDED,
    "beidseitig": CycleSides.TWO_SIDED,
})

PARKING_TYPE_TOKENS: Mapping[str, ParkingType] = MappingProxyType({
    "parallel": ParkingType.PARALLEL,
    "angled": ParkingType.ANGLED,
    "schraeg": ParkingType.ANGLED,
    "perpendicular": ParkingType.PERPENDICULAR,
    "quer": ParkingType.PERPENDICULAR,
})


class CrossSection(BaseModel):
    """A proposed street cross-section after input normalization.

    Widths must be finite; beyond that no range constraints are enforced
    here, and the validator reports out-of-range values as violations.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    total_width_m: float = 0.0
    sidewalk_left_m: float = 0.0
    sidewalk_right_m: float = 0.0
    lane_count: int = 0
    bus_traffic: bool = False

    cycle_needed: bool = False
    cycle_type: CycleType = DEFAULT_CYCLE_TYPE
    cycle_sides: CycleSides = DEFAULT_CYCLE_SIDES

    parking_needed: bool = False
    parking_type: ParkingType = DEFAULT_PARKING_TYPE

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
