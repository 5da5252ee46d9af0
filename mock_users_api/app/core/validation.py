"""
Declarative field validation for query strings and request bodies.

A rule set is an ordered list of :class:`Rule` tuples, each pairing a
field name with a check and the message reported when the check
fails.  ``validate`` evaluates every rule and collects all failures
instead of stopping at the first one, so a client sees every problem
with its request in a single response.

Checks receive the raw value.  Non-string values are converted to
text before length and emptiness checks (``None`` becomes ``""``),
which means a missing required field fails both ``not_empty`` and any
minimum length.
"""

from typing import Any, Callable, Iterable, List, Mapping, NamedTuple, Optional

from mock_users_api.app.schemas.errors import Violation
from mock_users_api.app.core.errors import ValidationFailed


Check = Callable[[Any], bool]


class Rule(NamedTuple):
    """One ``(field, check, message)`` constraint.

    When ``optional`` is true the rule is skipped if the field is
    absent from the source mapping.  A field that is present with a
    ``None`` value is still checked.
    """

    field: str
    check: Check
    message: str
    optional: bool = False


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_as_text(item) for item in value)
    return str(value)


def not_empty(value: Any) -> bool:
    """Return ``True`` when the value has at least one character."""
    return _as_text(value) != ""


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_length(min_length: int = 0, max_length: Optional[int] = None) -> Check:
    """Build a check bounding the text length of a value (inclusive)."""

    def check(value: Any) -> bool:
        length = len(_as_text(value))
        if length < min_length:
            return False
        return max_length is None or length <= max_length

    check.__name__ = f"is_length_{min_length}_{max_length}"
    return check


def validate(rules: Iterable[Rule], source: Mapping[str, Any]) -> List[Violation]:
    """Evaluate ``rules`` against ``source`` and return every violation."""
    violations: List[Violation] = []
    for rule in rules:
        if rule.optional and rule.field not in source:
            continue
        if not rule.check(source.get(rule.field)):
            violations.append(Violation(field=rule.field, message=rule.message))
    return violations


def check_rules(rules: Iterable[Rule], source: Mapping[str, Any]) -> None:
    """Raise :class:`ValidationFailed` if any rule in ``rules`` fails."""
    violations = validate(rules, source)
    if violations:
        raise ValidationFailed(violations)
