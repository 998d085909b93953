"""Rule merger — combine the baseline with the selected standards.

Overlay order is fixed: street design (A), pedestrian comfort (C), traffic
regulation (D, lane widths by maximum), then the cycle keys from the cycle
standard (B) or from the generic fallbacks.
"""

from __future__ import annotations

import logging

from streetcheck.config import (
    FALLBACK_CYCLE_MARKED_FLOOR_M,
    FALLBACK_CYCLE_SEPARATED_FLOOR_M,
)
from streetcheck.rules.catalog import (
    BASELINE_RULES,
    CYCLE_KEYS,
    STANDARD_RULES,
    RuleKey,
    Standard,
)
from streetcheck.rules.models import RuleSources, RuleTable, StandardSelection

logger = logging.getLogger(__name__)

BASELINE_SOURCE = "baseline"
FALLBACK_SOURCE = "fallback"

# Standards whose tables replace baseline values outright, in overlay order
_OVERLAY_ORDER = (Standard.STREET_DESIGN, Standard.PEDESTRIAN_COMFORT)
_WIDENING_KEYS = (RuleKey.LANE_MIN, RuleKey.LANE_REGULAR)


def _merge(
    selection: StandardSelection,
) -> tuple[dict[RuleKey, float], dict[RuleKey, str]]:
    """Return the merged widths and the source label of every value."""
    rules: dict[RuleKey, float] = dict(BASELINE_RULES)
    sources: dict[RuleKey, str] = {k: BASELINE_SOURCE for k in rules}

    for standard in _OVERLAY_ORDER:
        if selection.is_selected(standard):
            for key, width in STANDARD_RULES[standard].items():
                rules[key] = width
                sources[key] = standard.label

    if selection.is_selected(Standard.TRAFFIC_REGULATION):
        regulation = STANDARD_RULES[Standard.TRAFFIC_REGULATION]
        for key in _WIDENING_KEYS:
            if regulation[key] > rules[key]:
                rules[key] = regulation[key]
                sources[key] = Standard.TRAFFIC_REGULATION.label

    if selection.is_selected(Standard.CYCLE_TRAFFIC):
        cycle = STANDARD_RULES[Standard.CYCLE_TRAFFIC]
        for key in CYCLE_KEYS:
            rules[key] = cycle[key]
            sources[key] = Standard.CYCLE_TRAFFIC.label
    else:
        cycle_min = rules[RuleKey.CYCLE_MIN]
        rules[RuleKey.CYCLE_PROTECTED_MIN] = cycle_min
        rules[RuleKey.CYCLE_MARKED_MIN] = max(cycle_min, FALLBACK_CYCLE_MARKED_FLOOR_M)
        rules[RuleKey.CYCLE_SEPARATED_MIN] = max(cycle_min, FALLBACK_CYCLE_SEPARATED_FLOOR_M)
        for key in CYCLE_KEYS:
            sources[key] = FALLBACK_SOURCE

    return rules, sources


def merge_rules(selection: StandardSelection) -> RuleTable:
    """Build the effective rule table for *selection*.

    Pure function: equal selections always give equal tables.
    """
    rules, _sources = _merge(selection)
    table = RuleTable(**{k.value: v for k, v in rules.items()})
    logger.debug(
        "Merged rules for %s: %s",
        [s.value for s in selection.selected()] or "baseline only",
        table.as_dict(),
    )
    return table


def rule_provenance(selection: StandardSelection) -> RuleSources:
    """Return a RuleSources naming where each effective value came from.

    Sources are ``"baseline"``, ``"fallback"`` (generic cycle widths) or the
    label of a standard, e.g. ``"RASt 06"``.
    """
    _rules, sources = _merge(selection)
    return RuleSources(**{k.value: sources[k] for k in RuleKey})
