"""CrossSectionEngine — main entry point for cross-section checks.

Usage::

    from streetcheck import CrossSectionEngine

    engine = CrossSectionEngine()
    result = engine.check({"total_width_m": "10", "lane_count": 2, "rast": "ja"})
    response = engine.respond({"total_width_m": "9", "lane_count": 3})

The engine is stateless apart from its configuration, so one instance can
serve concurrent requests.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from streetcheck.config import load_config
from streetcheck.geometry.normalizer import normalize_cross_section, normalize_standards
from streetcheck.rules.merger import merge_rules, rule_provenance
from streetcheck.validation.report import ValidationResult
from streetcheck.validation.validator import validate

logger = logging.getLogger(__name__)

ACCEPTED_MESSAGE = (
    "The design meets the simplified minimum requirements of the selected standards."
)
REJECTED_MESSAGE = (
    "The design does not meet all requirements of the selected standards "
    "(simplified check)."
)


class CrossSectionEngine:
    """Validate raw cross-section requests against selectable standards.

    Parameters
    ----------
    config:
        Settings as returned by :func:`streetcheck.config.load_config`.
        Loaded from the environment when omitted.
    """

    def __init__(self, config: Mapping[str, str] | None = None) -> None:
        self.config = dict(config) if config is not None else load_config()

    def check(self, request: Mapping[str, Any]) -> ValidationResult:
        """Normalize *request*, merge the selected rules and validate.

        Raises
        ------
        TypeError
            If *request* is not a mapping.
        """
        if not isinstance(request, Mapping):
            raise TypeError(
                f"request must be a mapping, got {type(request).__name__}"
            )

        logger.info("Cross-section request received with fields: %s", sorted(request))
        logger.debug("Request payload: %r", dict(request))

        geometry = normalize_cross_section(request)
        standards = normalize_standards(request)
        rules = merge_rules(standards)

        result = validate(
            geometry,
            rules,
            standards=standards,
            provenance=rule_provenance(standards),
        )
        logger.info(
            "Cross-section %s with %d violation(s); standards: %s",
            result.verdict,
            len(result.violations),
            [s.value for s in standards.selected()] or "none",
        )
        return result

    def respond(self, request: Mapping[str, Any]) -> dict[str, Any]:
        """Check *request* and shape the response a transport layer returns.

        Returns a dict with ``status`` (``"ok"``/``"error"``), ``verdict``,
        ``message``, ``standards_applied``, ``summary`` and ``rules``; a
        rejected request also carries ``errors``.
        """
        result = self.check(request)
        response: dict[str, Any] = {
            "status": "ok" if result.ok else "error",
            "verdict": result.verdict,
            "message": ACCEPTED_MESSAGE if result.ok else REJECTED_MESSAGE,
            "standards_applied": (
                result.standards.to_dict() if result.standards is not None else {}
            ),
        }
        if not result.ok:
            response["errors"] = [v.to_dict() for v in result.violations]
        response["summary"] = (
            result.summary.to_dict() if result.summary is not None else None
        )
        response["rules"] = result.rules.as_dict()
        return response
