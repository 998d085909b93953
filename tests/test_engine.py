"""Tests for CrossSectionEngine and configuration loading.

End-to-end: raw request dicts in, results and response dicts out.
"""

from __future__ import annotations

import logging

import pytest

from streetcheck import CrossSectionEngine, Standard, __version__
from streetcheck.config import load_config, resolve_log_level


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def engine() -> CrossSectionEngine:
    return CrossSectionEngine({"STREETCHECK_ENV": "testing", "STREETCHECK_LOG_LEVEL": "INFO"})


@pytest.fixture
def fitting_request() -> dict:
    return {
        "total_width_m": "10",
        "sidewalk_left_m": "2",
        "sidewalk_right_m": "2",
        "lane_count": "2",
    }


# ---------------------------------------------------------------------------
# check()
# ---------------------------------------------------------------------------


class TestCheck:
    def test_version(self) -> None:
        assert __version__

    def test_accepts_fitting_section(self, engine, fitting_request) -> None:
        result = engine.check(fitting_request)
        assert result.ok is True
        assert result.standards is not None
        assert result.standards.is_empty
        assert result.summary.approx_lane_width_m == pytest.approx(3.0)

    def test_selected_standards_flow_into_rules(self, engine, fitting_request) -> None:
        request = dict(fitting_request, RASt="ja", ERA="ja")
        result = engine.check(request)
        assert result.standards.selected() == [Standard.STREET_DESIGN, Standard.CYCLE_TRAFFIC]
        assert result.rules.sidewalk_min == 1.8
        assert result.rules.cycle_marked_min == 1.85
        assert result.provenance["sidewalk_min"] == "RASt 06"

    def test_form_payload(self, engine) -> None:
        request = {
            "totalWidthM": "16",
            "sidewalkLeftM": "2.5",
            "sidewalkRightM": "2.5",
            "lanesCount": "2",
            "cycleNeeded": "ja",
            "cycleType": "radfahrstreifen",
            "cycleSides": "beidseitig",
            "parkingNeeded": "ja",
            "parkingType": "parallel",
            "ERA": "ja",
        }
        result = engine.check(request)
        # 5.0 sidewalks + 3.7 cycle + 2.0 parking + 5.5 lanes
        assert result.summary.required_width_m == pytest.approx(16.2)
        assert result.ok is False
        assert [v.field for v in result.violations] == ["required_width_m", "lane_width_m"]

    def test_missing_inputs(self, engine) -> None:
        result = engine.check({"total_width_m": "", "lane_count": "none"})
        assert result.ok is False
        assert [v.field for v in result.violations] == ["total_width_m", "lane_count"]
        assert result.summary is None

    def test_rejects_non_mapping(self, engine) -> None:
        with pytest.raises(TypeError):
            engine.check(["total_width_m", 10])  # type: ignore[arg-type]

    def test_logs_verdict(self, engine, fitting_request, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="streetcheck"):
            engine.check(fitting_request)
        assert any("accepted" in r.getMessage() for r in caplog.records)


# ---------------------------------------------------------------------------
# respond()
# ---------------------------------------------------------------------------


class TestRespond:
    def test_accepted_response(self, engine, fitting_request) -> None:
        response = engine.respond(fitting_request)
        assert response["status"] == "ok"
        assert response["verdict"] == "accepted"
        assert "errors" not in response
        assert response["summary"]["computed"]["required_width_m"] == pytest.approx(9.5)
        assert response["standards_applied"] == {
            "street_design": False,
            "cycle_traffic": False,
            "pedestrian_comfort": False,
            "traffic_regulation": False,
        }

    def test_rejected_response(self, engine, fitting_request) -> None:
        response = engine.respond(dict(fitting_request, lane_count=3, stvo="on"))
        assert response["status"] == "error"
        assert response["verdict"] == "rejected"
        assert response["standards_applied"]["traffic_regulation"] is True
        messages = [e["message"] for e in response["errors"]]
        assert any("12.25" in m and "10.00" in m for m in messages)
        assert response["rules"]["lane_min"] == 2.75

    def test_missing_inputs_response(self, engine) -> None:
        response = engine.respond({})
        assert response["status"] == "error"
        assert response["summary"] is None
        assert {e["kind"] for e in response["errors"]} == {"missing"}


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class TestConfig:
    def test_defaults_use_development_profile(self) -> None:
        config = load_config({})
        assert config["STREETCHECK_ENV"] == "development"
        assert config["STREETCHECK_LOG_LEVEL"] == "DEBUG"

    def test_production_profile(self) -> None:
        config = load_config({"STREETCHECK_ENV": "production"})
        assert config["STREETCHECK_LOG_LEVEL"] == "WARNING"

    def test_environment_overrides_profile(self) -> None:
        config = load_config({"STREETCHECK_ENV": "production", "STREETCHECK_LOG_LEVEL": "ERROR"})
        assert config["STREETCHECK_LOG_LEVEL"] == "ERROR"

    def test_unknown_profile_keeps_defaults(self) -> None:
        config = load_config({"STREETCHECK_ENV": "staging"})
        assert config["STREETCHECK_ENV"] == "staging"
        assert config["STREETCHECK_LOG_LEVEL"] == "INFO"

    @pytest.mark.parametrize(
        ("name", "level"),
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("loud", logging.INFO)],
    )
    def test_resolve_log_level(self, name, level) -> None:
        assert resolve_log_level({"STREETCHECK_LOG_LEVEL": name}) == level

    def test_engine_leaves_logging_configuration_alone(self) -> None:
        package_logger = logging.getLogger("streetcheck")
        before = package_logger.level
        CrossSectionEngine({"STREETCHECK_LOG_LEVEL": "WARNING"})
        CrossSectionEngine(load_config({"STREETCHECK_ENV": "development"}))
        assert package_logger.level == before
        assert package_logger.handlers == []
