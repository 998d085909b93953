"""Rule catalog and merger — effective width tables per standard selection."""

from streetcheck.rules.catalog import RuleKey, Standard
from streetcheck.rules.merger import merge_rules, rule_provenance
from streetcheck.rules.models import RuleSources, RuleTable, StandardSelection

__all__ = [
    "RuleKey",
    "RuleSources",
    "RuleTable",
    "Standard",
    "StandardSelection",
    "merge_rules",
    "rule_provenance",
]
