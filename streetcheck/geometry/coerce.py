"""Total coercion helpers for stringly-typed request values.

None of these functions raise: anything unparsable collapses to a default.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Mapping, TypeVar

from streetcheck.config import TRUTHY_TOKENS

E = TypeVar("E", bound=Enum)


def to_number(value: Any, fallback: float = 0.0) -> float:
    """Parse *value* as a real number, returning *fallback* if not finite.

    ``None`` and blank strings give the fallback; booleans count as 1/0.
    Digit-group underscores (``"1_000"``) are not numbers in form input.
    """
    if value is None:
        return fallback
    if isinstance(value, str):
        value = value.strip()
        if not value or "_" in value:
            return fallback
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return fallback
    return number if math.isfinite(number) else fallback


def to_bool(value: Any) -> bool:
    """Return True for boolean True or a yes-like string, else False.

    Example: ``to_bool(" Ja ")`` and ``to_bool("on")`` are True,
    ``to_bool(1)`` and ``to_bool("no")`` are False.
    """
    if value is True:
        return True
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_TOKENS
    return False


def to_enum(value: Any, tokens: Mapping[str, E], default: E) -> E:
    """Look up the lower-cased *value* in *tokens*, falling back to *default*."""
    if value is None:
        return default
    if isinstance(value, Enum):
        value = value.value
    return tokens.get(str(value).strip().lower(), default)
