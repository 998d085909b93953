"""Tests for input coercion and the geometry normalizer."""

from __future__ import annotations

import math

import pytest

from streetcheck.geometry import (
    CrossSection,
    CycleSides,
    CycleType,
    ParkingType,
    normalize_cross_section,
    normalize_standards,
    to_bool,
    to_enum,
    to_number,
)
from streetcheck.geometry.normalizer import standard_aliases
from streetcheck.geometry.schema import PARKING_TYPE_TOKENS
from streetcheck.rules import Standard


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------


class TestToNumber:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (3.5, 3.5),
            (2, 2.0),
            ("3.5", 3.5),
            (" 12 ", 12.0),
            ("-1.25", -1.25),
            (True, 1.0),
        ],
    )
    def test_parses(self, raw, expected) -> None:
        assert to_number(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [None, "", "   ", "abc", "1,5", "1_000", "2_5.0", "inf", "-inf", "nan", math.nan, [], {}],
    )
    def test_falls_back_to_zero(self, raw) -> None:
        assert to_number(raw) == 0.0

    def test_custom_fallback(self) -> None:
        assert to_number("wide", fallback=7.5) == 7.5
        assert to_number(float("inf"), fallback=1.0) == 1.0


class TestToBool:
    @pytest.mark.parametrize("raw", [True, "ja", "Ja", " YES ", "true", "On", "1"])
    def test_truthy(self, raw) -> None:
        assert to_bool(raw) is True

    @pytest.mark.parametrize("raw", [False, None, "", "no", "nein", "0", "y", 1, 1.0, []])
    def test_falsy(self, raw) -> None:
        assert to_bool(raw) is False


class TestToEnum:
    def test_lower_cases_and_trims(self) -> None:
        assert to_enum("  Angled ", PARKING_TYPE_TOKENS, ParkingType.PARALLEL) is ParkingType.ANGLED

    def test_unknown_falls_back(self) -> None:
        assert to_enum("diagonal", PARKING_TYPE_TOKENS, ParkingType.PARALLEL) is ParkingType.PARALLEL
        assert to_enum(None, PARKING_TYPE_TOKENS, ParkingType.PARALLEL) is ParkingType.PARALLEL

    def test_accepts_enum_member(self) -> None:
        assert (
            to_enum(ParkingType.PERPENDICULAR, PARKING_TYPE_TOKENS, ParkingType.PARALLEL)
            is ParkingType.PERPENDICULAR
        )


# ---------------------------------------------------------------------------
# Normalizer
# ---------------------------------------------------------------------------


class TestNormalizeCrossSection:
    def test_empty_request_gives_defaults(self) -> None:
        section = normalize_cross_section({})
        assert section == CrossSection()
        assert section.cycle_type is CycleType.SEPARATED
        assert section.cycle_sides is CycleSides.ONE_SIDED
        assert section.parking_type is ParkingType.PARALLEL

    def test_snake_case_request(self) -> None:
        section = normalize_cross_section({
            "total_width_m": "14.5",
            "sidewalk_left_m": "2",
            "sidewalk_right_m": 2.5,
            "lane_count": "2",
            "bus_traffic": "yes",
            "cycle_needed": "on",
            "cycle_type": "MARKED",
            "cycle_sides": "two-sided",
            "parking_needed": True,
            "parking_type": "perpendicular",
        })
        assert section.total_width_m == 14.5
        assert section.sidewalk_left_m == 2.0
        assert section.sidewalk_right_m == 2.5
        assert section.lane_count == 2
        assert section.bus_traffic is True
        assert section.cycle_needed is True
        assert section.cycle_type is CycleType.MARKED
        assert section.cycle_sides is CycleSides.TWO_SIDED
        assert section.parking_needed is True
        assert section.parking_type is ParkingType.PERPENDICULAR

    def test_camel_case_and_form_vocabulary(self) -> None:
        section = normalize_cross_section({
            "totalWidthM": "12",
            "lanesCount": 2,
            "bus": "ja",
            "cycleNeeded": "ja",
            "cycleType": "Schutzstreifen",
            "cycleSides": "beidseitig",
            "parkingNeeded": "ja",
            "parkingType": "quer",
        })
        assert section.total_width_m == 12.0
        assert section.lane_count == 2
        assert section.bus_traffic is True
        assert section.cycle_type is CycleType.PROTECTED
        assert section.cycle_sides is CycleSides.TWO_SIDED
        assert section.parking_type is ParkingType.PERPENDICULAR

    def test_first_non_none_alias_wins(self) -> None:
        section = normalize_cross_section({"totalWidthM": None, "total_width_m": "9"})
        assert section.total_width_m == 9.0

    def test_malformed_values_never_raise(self) -> None:
        section = normalize_cross_section({
            "total_width_m": "wide",
            "lane_count": object(),
            "cycle_type": 42,
            "parking_type": "",
            "bus_traffic": {"a": 1},
        })
        assert section.total_width_m == 0.0
        assert section.lane_count == 0
        assert section.cycle_type is CycleType.SEPARATED
        assert section.parking_type is ParkingType.PARALLEL
        assert section.bus_traffic is False

    def test_fractional_lane_count_truncates(self) -> None:
        assert normalize_cross_section({"lane_count": "2.7"}).lane_count == 2


class TestNormalizeStandards:
    def test_none_selected(self) -> None:
        assert normalize_standards({}).is_empty

    def test_form_flags(self) -> None:
        selection = normalize_standards({"RASt": "ja", "ERA": "nein", "efa": "on", "applyStvo": True})
        assert selection.street_design
        assert not selection.cycle_traffic
        assert selection.pedestrian_comfort
        assert selection.traffic_regulation

    def test_generic_flags(self) -> None:
        selection = normalize_standards({"usesStandardB": True, "uses_standard_d": "1"})
        assert selection.selected() == [Standard.CYCLE_TRAFFIC, Standard.TRAFFIC_REGULATION]

    def test_any_alias_selects(self) -> None:
        selection = normalize_standards({"rast": "no", "applyRast": "yes"})
        assert selection.street_design

    def test_every_standard_reachable_by_its_name(self) -> None:
        for standard in Standard:
            assert standard.value in standard_aliases(standard)
            assert normalize_standards({standard.value: "true"}).selected() == [standard]
