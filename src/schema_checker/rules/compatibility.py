"""Backward-compatibility rules applied to the two sides of a hunk."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from ..models import Field, FieldSet, Violation, ViolationKind

Rule = Callable[[Field, Optional[Field]], bool]


def optional_to_required(before: Field, after: Optional[Field]) -> bool:
    return before.optional is not None and after is not None and after.required is not None


def type_changed(before: Field, after: Optional[Field]) -> bool:
    return before.type is not None and after is not None and after.type is not None


def became_force_new(before: Field, after: Optional[Field]) -> bool:
    # Any ForceNew line on the new side is flagged, including a re-statement.
    return after is not None and after.force_new is not None


def enum_shrunk(before: Field, after: Optional[Field]) -> bool:
    if after is None or before.enumerated_values is None or after.enumerated_values is None:
        return False
    return len(after.enumerated_values) < len(before.enumerated_values)


DEFAULT_RULES: Sequence[Tuple[ViolationKind, Rule]] = (
    (ViolationKind.OPTIONAL_TO_REQUIRED, optional_to_required),
    (ViolationKind.TYPE_CHANGED, type_changed),
    (ViolationKind.BECAME_FORCE_NEW, became_force_new),
    (ViolationKind.ENUM_SHRUNK, enum_shrunk),
)


class CompatibilityRuleEngine:
    """Report every backward-incompatible change between two field sets."""

    def __init__(self, rules: Sequence[Tuple[ViolationKind, Rule]] | None = None) -> None:
        self._rules = tuple(rules) if rules is not None else tuple(DEFAULT_RULES)

    def evaluate(self, before: FieldSet, after: FieldSet, context: str) -> List[Violation]:
        """Return the violations found for fields present on the ``before`` side."""

        violations: List[Violation] = []
        for name, previous in before.items():
            current = after.get(name)
            for kind, rule in self._rules:
                if rule(previous, current):
                    violations.append(Violation(kind=kind, field=name, context=context))
        return violations


__all__ = [
    "CompatibilityRuleEngine",
    "DEFAULT_RULES",
    "Rule",
    "became_force_new",
    "enum_shrunk",
    "optional_to_required",
    "type_changed",
]
