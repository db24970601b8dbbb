"""Compare a resource's documented fields against its schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..models import FieldSet, Violation, ViolationKind

IMPLICIT_ID = "id"

_FLAG_KINDS = (
    ("optional", ViolationKind.WRONG_OPTIONAL_FLAG),
    ("required", ViolationKind.WRONG_REQUIRED_FLAG),
    ("force_new", ViolationKind.WRONG_FORCE_NEW_FLAG),
)


def merge_field_sets(*field_sets: FieldSet) -> FieldSet:
    """Merge field sets; the first set declaring a name wins."""

    merged: FieldSet = {}
    for field_set in field_sets:
        for name, value in field_set.items():
            merged.setdefault(name, value)
    return merged


@dataclass(slots=True)
class ConsistencyResult:
    violations: List[Violation] = field(default_factory=list)
    cardinality_mismatch: bool = False

    @property
    def inconsistent(self) -> bool:
        return self.cardinality_mismatch or bool(self.violations)


class SchemaDocConsistencyChecker:
    """Check that a documentation page mirrors the schema it describes.

    The schema never lists the implicit ``id`` attribute, so a consistent
    page documents exactly one field more than the schema defines. Flags are
    compared one way only: a flag the page claims must be set in the schema,
    while a flag the page omits is never reported.
    """

    def check(self, doc_fields: FieldSet, schema_fields: FieldSet, context: str) -> ConsistencyResult:
        result = ConsistencyResult()
        result.violations.extend(self._membership(doc_fields, schema_fields, context))

        if len(schema_fields) + 1 != len(doc_fields):
            result.cardinality_mismatch = True
            return result

        for name, documented in doc_fields.items():
            defined = schema_fields.get(name)
            if defined is None:
                continue
            for flag, kind in _FLAG_KINDS:
                if documented.declares(flag) and not defined.declares(flag):
                    result.violations.append(Violation(kind=kind, field=name, context=context))

        return result

    # ------------------------------------------------------------------
    def _membership(
        self, doc_fields: FieldSet, schema_fields: FieldSet, context: str
    ) -> List[Violation]:
        violations = [
            Violation(kind=ViolationKind.EXTRA_DOC_FIELD, field=name, context=context)
            for name in doc_fields
            if name != IMPLICIT_ID and name not in schema_fields
        ]
        violations.extend(
            Violation(kind=ViolationKind.MISSING_DOC_FIELD, field=name, context=context)
            for name in schema_fields
            if name not in doc_fields
        )
        if IMPLICIT_ID not in doc_fields and IMPLICIT_ID not in schema_fields:
            violations.append(
                Violation(kind=ViolationKind.MISSING_DOC_FIELD, field=IMPLICIT_ID, context=context)
            )
        return violations


__all__ = ["ConsistencyResult", "IMPLICIT_ID", "SchemaDocConsistencyChecker", "merge_field_sets"]
