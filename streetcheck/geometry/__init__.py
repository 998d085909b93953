"""Geometry normalizer — raw request values to typed cross-sections."""

from streetcheck.geometry.coerce import to_bool, to_enum, to_number
from streetcheck.geometry.normalizer import normalize_cross_section, normalize_standards
from streetcheck.geometry.schema import CrossSection, CycleSides, CycleType, ParkingType

__all__ = [
    "CrossSection",
    "CycleSides",
    "CycleType",
    "ParkingType",
    "normalize_cross_section",
    "normalize_standards",
    "to_bool",
    "to_enum",
    "to_number",
]
