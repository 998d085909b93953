"""StandardSelection and RuleTable models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, PositiveFloat

from streetcheck.rules.catalog import RuleKey, Standard


class StandardSelection(BaseModel):
    """Which design standards a caller has selected.

    Each flag is independent; the empty selection is valid and validates
    against the baseline table alone.
    """

    model_config = ConfigDict(frozen=True)

    street_design: bool = False
    """A: sidewalk, lane and parking overrides."""

    cycle_traffic: bool = False
    """B: cycle facility widths."""

    pedestrian_comfort: bool = False
    """C: sidewalk comfort widths."""

    traffic_regulation: bool = False
    """D: lane widths, never lowering a requirement."""

    @classmethod
    def of(cls, *standards: Standard) -> StandardSelection:
        """Build a selection with exactly the given standards switched on."""
        return cls(**{s.value: True for s in standards})

    def is_selected(self, standard: Standard) -> bool:
        return bool(getattr(self, standard.value))

    def selected(self) -> list[Standard]:
        """Return the selected standards in declaration order."""
        return [s for s in Standard if self.is_selected(s)]

    @property
    def is_empty(self) -> bool:
        return not self.selected()

    def to_dict(self) -> dict[str, bool]:
        return {s.value: self.is_selected(s) for s in Standard}


class RuleTable(BaseModel):
    """Effective minimum/target widths in metres, one field per RuleKey."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    sidewalk_min: PositiveFloat
    sidewalk_target: PositiveFloat
    lane_min: PositiveFloat
    lane_regular: PositiveFloat
    cycle_min: PositiveFloat
    cycle_protected_min: PositiveFloat
    cycle_marked_min: PositiveFloat
    cycle_separated_min: PositiveFloat
    parking_parallel_min: PositiveFloat
    parking_angled_min: PositiveFloat
    parking_perpendicular_min: PositiveFloat

    def __getitem__(self, key: RuleKey | str) -> float:
        return getattr(self, RuleKey(key).value)

    def as_dict(self) -> dict[str, float]:
        """Return ``{rule_key: width}`` in RuleKey declaration order."""
        return {k.value: self[k] for k in RuleKey}


class RuleSources(BaseModel):
    """Where each effective width came from, one field per RuleKey.

    Values are ``"baseline"``, ``"fallback"`` or a standard label.
    """

    model_config = ConfigDict(frozen=True)

    sidewalk_min: str
    sidewalk_target: str
    lane_min: str
    lane_regular: str
    cycle_min: str
    cycle_protected_min: str
    cycle_marked_min: str
    cycle_separated_min: str
    parking_parallel_min: str
    parking_angled_min: str
    parking_perpendicular_min: str

    def __getitem__(self, key: RuleKey | str) -> str:
        return getattr(self, RuleKey(key).value)

    def as_dict(self) -> dict[str, str]:
        return {k.value: self[k] for k in RuleKey}
