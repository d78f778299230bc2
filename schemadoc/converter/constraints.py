"""
Constraint extraction for leaf schema types.

Maps the checks declared on string, number, bigint and array schemas to
normalized validation entries. An entry is either a bare tag ("email",
"int") or a (kind, parameter) tuple (("min", 3), ("gte", 0)).

    string:  min/max/length -> (kind, n)
             email/url/emoji/uuid/cuid/cuid2/ulid -> kind
             regex -> ("regex", pattern)
             includes/startsWith/endsWith -> (kind, text)
             datetime -> ("datetime", {"offset", "precision"})
             ip -> ("ip", {"version"})
             toLowerCase/toUpperCase/trim -> dropped
    number:  min -> gte | gt, max -> lte | lt, multipleOf, int, finite
    bigint:  min -> gte | gt, max -> lte | lt, multipleOf
    array:   min_length -> ("min", n), max_length -> ("max", n),
             exact_length -> ("length", n)

Check classes a leaf type does not know are skipped.
"""

import logging
from typing import Iterable, List, Optional

from schemadoc.converter.types import Validation
from schemadoc.schema.checks import (
    BoundCheck,
    DatetimeCheck,
    FiniteCheck,
    FormatCheck,
    IntCheck,
    IpCheck,
    LengthCheck,
    MultipleOfCheck,
    RegexCheck,
    StringTransform,
    SubstringCheck,
)
from schemadoc.schema.nodes import ArrayNode

logger = logging.getLogger(__name__)


def string_validations(checks: Iterable[object]) -> List[Validation]:
    """
    Convert string checks to validation entries.

    Args:
        checks: Checks in declaration order

    Returns:
        List of validations, in the same order, without transforms
    """
    validations: List[Validation] = []
    for check in checks:
        if isinstance(check, LengthCheck):
            validations.append((check.kind, check.value))
        elif isinstance(check, FormatCheck):
            validations.append(check.kind)
        elif isinstance(check, RegexCheck):
            validations.append(("regex", check.regex))
        elif isinstance(check, SubstringCheck):
            validations.append((check.kind, check.value))
        elif isinstance(check, DatetimeCheck):
            validations.append(("datetime", {"offset": check.offset, "precision": check.precision}))
        elif isinstance(check, IpCheck):
            validations.append(("ip", {"version": check.version}))
        elif isinstance(check, StringTransform):
            # Rewrites the value, constrains nothing
            continue
        else:
            logger.debug(f"Skipping unknown string check: {check!r}")
    return validations


def _bound(check: BoundCheck) -> Validation:
    if check.kind == "min":
        return ("gte" if check.inclusive else "gt", check.value)
    return ("lte" if check.inclusive else "lt", check.value)


def number_validations(checks: Iterable[object]) -> List[Validation]:
    """Convert number checks to validation entries."""
    validations: List[Validation] = []
    for check in checks:
        if isinstance(check, BoundCheck):
            validations.append(_bound(check))
        elif isinstance(check, MultipleOfCheck):
            validations.append(("multipleOf", check.value))
        elif isinstance(check, (IntCheck, FiniteCheck)):
            validations.append(check.kind)
        else:
            logger.debug(f"Skipping unknown number check: {check!r}")
    return validations


def bigint_validations(checks: Iterable[object]) -> List[Validation]:
    """Convert bigint checks to validation entries. Values stay Python ints."""
    validations: List[Validation] = []
    for check in checks:
        if isinstance(check, BoundCheck):
            validations.append(_bound(check))
        elif isinstance(check, MultipleOfCheck):
            validations.append(("multipleOf", check.value))
        else:
            logger.debug(f"Skipping unknown bigint check: {check!r}")
    return validations


def array_validations(schema: ArrayNode) -> List[Validation]:
    possible: List[Optional[Validation]] = [
        ("min", schema.min_length) if schema.min_length is not None else None,
        ("max", schema.max_length) if schema.max_length is not None else None,
        ("length", schema.exact_length) if schema.exact_length is not None else None,
    ]
    return [v for v in possible if v is not None]
