"""Width validator — apply an effective rule table to a cross-section.

Usage::

    from streetcheck.validation import validate

    result = validate(cross_section, rules)

Checks are exhaustive: once the required inputs are present every
applicable violation is collected before returning.
"""

from __future__ import annotations

import logging

from streetcheck.geometry.schema import CrossSection, CycleType, ParkingType
from streetcheck.rules.catalog import RuleKey
from streetcheck.rules.models import RuleSources, RuleTable, StandardSelection
from streetcheck.validation.report import (
    Summary,
    ValidationResult,
    Violation,
    ViolationKind,
    assemble_result,
    format_width as _m,
)

logger = logging.getLogger(__name__)

_CYCLE_RULES: dict[CycleType, RuleKey] = {
    CycleType.PROTECTED: RuleKey.CYCLE_PROTECTED_MIN,
    CycleType.MARKED: RuleKey.CYCLE_MARKED_MIN,
    CycleType.SEPARATED: RuleKey.CYCLE_SEPARATED_MIN,
}

_PARKING_RULES: dict[ParkingType, RuleKey] = {
    ParkingType.PARALLEL: RuleKey.PARKING_PARALLEL_MIN,
    ParkingType.ANGLED: RuleKey.PARKING_ANGLED_MIN,
    ParkingType.PERPENDICULAR: RuleKey.PARKING_PERPENDICULAR_MIN,
}

_SIDES = (("left", "sidewalk_left_m"), ("right", "sidewalk_right_m"))


def check_required_inputs(geometry: CrossSection) -> list[Violation]:
    """Return violations for a missing total width or lane count."""
    violations: list[Violation] = []
    if not geometry.total_width_m:
        violations.append(Violation(
            field="total_width_m",
            kind=ViolationKind.MISSING,
            message="Total street width is missing or 0.",
        ))
    if not geometry.lane_count:
        violations.append(Violation(
            field="lane_count",
            kind=ViolationKind.MISSING,
            message="Number of travel lanes is missing or 0.",
        ))
    return violations


def check_sidewalks(geometry: CrossSection, rules: RuleTable) -> list[Violation]:
    """Flag each sidewalk narrower than ``sidewalk_min`` (equal passes)."""
    minimum = rules.sidewalk_min
    violations: list[Violation] = []
    for side, field in _SIDES:
        width = getattr(geometry, field)
        if width < minimum:
            violations.append(Violation(
                field=field,
                message=(
                    f"{side.capitalize()} sidewalk is {_m(width)} m wide, narrower "
                    f"than the minimum of {_m(minimum)} m."
                ),
            ))
    return violations


def cycle_width_per_side(geometry: CrossSection, rules: RuleTable) -> float:
    """Required width of one cycle facility, 0 if none is requested."""
    if not geometry.cycle_needed:
        return 0.0
    return rules[_CYCLE_RULES[geometry.cycle_type]]


def cycle_total_width(geometry: CrossSection, rules: RuleTable) -> float:
    """Required width of all cycle facilities across the section."""
    if not geometry.cycle_needed:
        return 0.0
    return cycle_width_per_side(geometry, rules) * geometry.cycle_sides.count


def parking_width(geometry: CrossSection, rules: RuleTable) -> float:
    """Required parking strip width, 0 if no parking is requested."""
    if not geometry.parking_needed:
        return 0.0
    return rules[_PARKING_RULES[geometry.parking_type]]


def validate(
    geometry: CrossSection,
    rules: RuleTable,
    *,
    standards: StandardSelection | None = None,
    provenance: RuleSources | None = None,
) -> ValidationResult:
    """Validate *geometry* against *rules*.

    Parameters
    ----------
    geometry:
        Normalized cross-section.
    rules:
        Effective rule table, usually from :func:`merge_rules`.
    standards, provenance:
        Carried into the result unchanged so callers can explain the
        verdict without recomputing the table.

    Returns
    -------
    ValidationResult
        ``ok`` is True only when no violation was found.
    """
    missing = check_required_inputs(geometry)
    if missing:
        logger.debug("Required inputs missing: %s", [v.field for v in missing])
        return assemble_result(missing, None, rules, standards, provenance)

    violations = check_sidewalks(geometry, rules)
    sidewalk_total = geometry.sidewalk_left_m + geometry.sidewalk_right_m

    per_side = cycle_width_per_side(geometry, rules)
    cycle_total = cycle_total_width(geometry, rules)
    parking = parking_width(geometry, rules)

    lanes_min_width = geometry.lane_count * rules.lane_min
    required = sidewalk_total + cycle_total + parking + lanes_min_width
    if required > geometry.total_width_m:
        violations.append(Violation(
            field="required_width_m",
            message=(
                "The requested layout exceeds the available street width. "
                f"Available: {_m(geometry.total_width_m)} m, minimum required "
                f"under the selected standards: {_m(required)} m."
            ),
        ))

    # May go negative when other facilities overconsume the section
    approx_lane = (
        geometry.total_width_m - sidewalk_total - cycle_total - parking
    ) / geometry.lane_count
    if approx_lane < rules.lane_min:
        violations.append(Violation(
            field="lane_width_m",
            message=(
                f"The estimated lane width of about {_m(approx_lane)} m is below "
                f"the minimum of {_m(rules.lane_min)} m."
            ),
        ))

    if geometry.bus_traffic and approx_lane < rules.lane_regular:
        violations.append(Violation(
            field="bus_traffic",
            kind=ViolationKind.ADVISORY,
            message=(
                "Bus routes usually call for a lane width of at least "
                f"{_m(rules.lane_regular)} m; the estimated width of "
                f"{_m(approx_lane)} m is below that."
            ),
        ))

    summary = Summary(
        input=geometry,
        sidewalk_total_m=sidewalk_total,
        cycle_width_per_side_m=per_side,
        cycle_total_m=cycle_total,
        parking_width_m=parking,
        lanes_min_width_m=lanes_min_width,
        required_width_m=required,
        approx_lane_width_m=approx_lane,
    )
    logger.debug(
        "Required %.2f m of %.2f m, approx lane %.2f m, %d violation(s)",
        required, geometry.total_width_m, approx_lane, len(violations),
    )
    return assemble_result(violations, summary, rules, standards, provenance)
