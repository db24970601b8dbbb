"""Field models shared by the patch and documentation extractors."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

FLAG_ATTRIBUTES = ("optional", "required", "force_new")

_TRUE_LITERALS = frozenset({"1", "t", "T", "true", "TRUE", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "false", "FALSE", "False"})


def parse_bool(value: str) -> bool:
    """Parse a Go boolean literal; anything unrecognised counts as ``False``."""

    if value in _TRUE_LITERALS:
        return True
    if value not in _FALSE_LITERALS:
        logger.debug("Treating malformed boolean literal %r as false", value)
    return False


@dataclass(slots=True)
class Field:
    """A single schema field as seen by one side of a comparison.

    Flags are tri-state: ``None`` means the attribute was never declared,
    while ``True``/``False`` carry the declared value.
    """

    name: str
    type: Optional[str] = None
    optional: Optional[bool] = None
    required: Optional[bool] = None
    force_new: Optional[bool] = None
    computed: Optional[bool] = None
    enumerated_values: Optional[List[str]] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Field name must not be empty")

    def attribute_count(self) -> int:
        """Return the number of attributes that are present on the field."""

        values = (
            self.type,
            self.optional,
            self.required,
            self.force_new,
            self.computed,
            self.enumerated_values,
        )
        return sum(1 for value in values if value is not None)

    def declares(self, flag: str) -> bool:
        """Return ``True`` when ``flag`` is present and set to true."""

        if flag not in FLAG_ATTRIBUTES:
            raise ValueError(f"Unknown flag attribute: {flag}")
        return getattr(self, flag) is True

    def merge(self, other: "Field") -> None:
        """Overlay attributes present on ``other`` onto this field."""

        for attribute in (
            "type",
            "optional",
            "required",
            "force_new",
            "computed",
            "enumerated_values",
            "description",
        ):
            value = getattr(other, attribute)
            if value is not None:
                setattr(self, attribute, value)


FieldSet = Dict[str, Field]


@dataclass(slots=True)
class Resource:
    """Documentation view of a provider resource."""

    name: str
    arguments: FieldSet = field(default_factory=dict)
    attributes: FieldSet = field(default_factory=dict)
