"""streetcheck — street cross-section validation against selectable design standards."""

__version__ = "1.0.0"

from streetcheck.engine import CrossSectionEngine
from streetcheck.geometry.normalizer import normalize_cross_section, normalize_standards
from streetcheck.geometry.schema import CrossSection, CycleSides, CycleType, ParkingType
from streetcheck.rules.catalog import RuleKey, Standard
from streetcheck.rules.merger import merge_rules, rule_provenance
from streetcheck.rules.models import RuleSources, RuleTable, StandardSelection
from streetcheck.validation.report import ValidationResult, Violation, ViolationKind
from streetcheck.validation.validator import validate

__all__ = [
    "__version__",
    "CrossSection",
    "CrossSectionEngine",
    "CycleSides",
    "CycleType",
    "ParkingType",
    "RuleKey",
    "RuleSources",
    "RuleTable",
    "Standard",
    "StandardSelection",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "merge_rules",
    "normalize_cross_section",
    "normalize_standards",
    "rule_provenance",
    "validate",
]
