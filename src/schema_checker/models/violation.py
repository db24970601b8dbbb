"""Violation models shared across rule engines and reporting layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ViolationKind(str, Enum):
    """Kinds of problems reported by the compatibility and documentation checks."""

    OPTIONAL_TO_REQUIRED = "OptionalToRequired"
    TYPE_CHANGED = "TypeChanged"
    BECAME_FORCE_NEW = "BecameForceNew"
    ENUM_SHRUNK = "EnumShrunk"
    MISSING_DOC_FIELD = "MissingDocField"
    EXTRA_DOC_FIELD = "ExtraDocField"
    WRONG_OPTIONAL_FLAG = "WrongOptionalFlag"
    WRONG_REQUIRED_FLAG = "WrongRequiredFlag"
    WRONG_FORCE_NEW_FLAG = "WrongForceNewFlag"


COMPATIBILITY_KINDS = frozenset(
    {
        ViolationKind.OPTIONAL_TO_REQUIRED,
        ViolationKind.TYPE_CHANGED,
        ViolationKind.BECAME_FORCE_NEW,
        ViolationKind.ENUM_SHRUNK,
    }
)

_DESCRIPTIONS = {
    ViolationKind.OPTIONAL_TO_REQUIRED: "attribute must not change from optional to required",
    ViolationKind.TYPE_CHANGED: "attribute type must not be changed",
    ViolationKind.BECAME_FORCE_NEW: "attribute must not change to ForceNew",
    ViolationKind.ENUM_SHRUNK: "enumerated values must not be fewer than before",
    ViolationKind.MISSING_DOC_FIELD: "attribute is defined in the schema but not documented",
    ViolationKind.EXTRA_DOC_FIELD: "attribute is documented but not defined in the schema",
    ViolationKind.WRONG_OPTIONAL_FLAG: "attribute is documented as Optional but the schema disagrees",
    ViolationKind.WRONG_REQUIRED_FLAG: "attribute is documented as Required but the schema disagrees",
    ViolationKind.WRONG_FORCE_NEW_FLAG: "attribute is documented as ForceNew but the schema disagrees",
}


@dataclass(frozen=True, slots=True)
class Violation:
    """A single rule violation that can be reported to users."""

    kind: ViolationKind
    field: str
    context: str

    @property
    def category(self) -> str:
        if self.kind in COMPATIBILITY_KINDS:
            return "compatibility"
        return "documentation"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self.kind]

    @property
    def diagnostic(self) -> str:
        """Human readable one-line diagnostic."""

        tag = "Incompatible Change" if self.category == "compatibility" else "Inconsistent Document"
        return f"[{tag}]: {self.description} for {self.field} in {self.context}"
