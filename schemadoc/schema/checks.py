"""
Check definitions attached to leaf schema nodes.

Each leaf type has its own closed set of check classes. A check carries only
the parameters that belong to it, so the constraint extractor can match on
the class instead of inspecting loose dictionaries.

Check Families:
    StringCheck
    ├── LengthCheck: min / max / length
    ├── FormatCheck: email, url, emoji, uuid, cuid, cuid2, ulid
    ├── RegexCheck: regular expression
    ├── SubstringCheck: includes / startsWith / endsWith
    ├── DatetimeCheck: ISO datetime with offset/precision options
    ├── IpCheck: IP address with optional version
    └── StringTransform: toLowerCase / toUpperCase / trim

    NumericCheck (number and bigint)
    ├── BoundCheck: min / max with inclusiveness
    ├── MultipleOfCheck: divisibility
    ├── IntCheck: number only
    └── FiniteCheck: number only
"""

import re
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class LengthCheck:
    """String length bound. kind is one of min, max, length."""

    kind: str
    value: int


@dataclass(frozen=True)
class FormatCheck:
    """Named string format with no parameter."""

    kind: str


@dataclass(frozen=True)
class RegexCheck:
    regex: "re.Pattern[str]"

    kind = "regex"


@dataclass(frozen=True)
class SubstringCheck:
    """kind is one of includes, startsWith, endsWith."""

    kind: str
    value: str
    position: Optional[int] = None


@dataclass(frozen=True)
class DatetimeCheck:
    offset: bool = False
    precision: Optional[int] = None

    kind = "datetime"


@dataclass(frozen=True)
class IpCheck:
    version: Optional[str] = None

    kind = "ip"


@dataclass(frozen=True)
class StringTransform:
    """Value rewrite applied before validation. Carries no constraint."""

    kind: str


@dataclass(frozen=True)
class BoundCheck:
    """
    Lower (kind="min") or upper (kind="max") bound on a number or bigint.

    Attributes:
        kind: "min" or "max"
        value: Bound value (int for bigint schemas)
        inclusive: True for >= / <=, False for > / <
    """

    kind: str
    value: Union[int, float]
    inclusive: bool = True


@dataclass(frozen=True)
class MultipleOfCheck:
    value: Union[int, float]

    kind = "multipleOf"


@dataclass(frozen=True)
class IntCheck:
    kind = "int"


@dataclass(frozen=True)
class FiniteCheck:
    kind = "finite"


StringCheck = Union[
    LengthCheck,
    FormatCheck,
    RegexCheck,
    SubstringCheck,
    DatetimeCheck,
    IpCheck,
    StringTransform,
]

NumberCheck = Union[BoundCheck, MultipleOfCheck, IntCheck, FiniteCheck]

BigIntCheck = Union[BoundCheck, MultipleOfCheck]
