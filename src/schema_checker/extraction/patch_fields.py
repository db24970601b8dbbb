"""Extract per-field schema attributes from one side of a diff hunk."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..adapters.patch_loader import DiffLine, LineMode
from ..models import Field, FieldSet, parse_bool

logger = logging.getLogger(__name__)


class LineMatcher(ABC):
    """Recognise one schema attribute keyword on a declaration line."""

    attribute: str
    pattern: re.Pattern[str]

    def match(self, content: str) -> Optional[Any]:
        found = self.pattern.match(content)
        if found is None:
            return None
        return self.convert(found.group(1))

    @abstractmethod
    def convert(self, raw: str) -> Any:
        """Turn the captured text into the attribute value."""


class TypeMatcher(LineMatcher):
    attribute = "type"
    pattern = re.compile(r"^\s*Type:\s*(?:schema\.)?([A-Za-z]+)")

    def convert(self, raw: str) -> str:
        return raw


class FlagMatcher(LineMatcher):
    def __init__(self, keyword: str, attribute: str) -> None:
        self.attribute = attribute
        self.pattern = re.compile(rf"^\s*{keyword}:\s*([A-Za-z0-9]*),")

    def convert(self, raw: str) -> bool:
        return parse_bool(raw)


class StringInSliceMatcher(LineMatcher):
    attribute = "enumerated_values"
    pattern = re.compile(
        r"^\s*ValidateFunc:\s*validation\.StringInSlice\(\[\]string\{([A-Za-z0-9\-_,\"\s]*)"
    )

    def convert(self, raw: str) -> List[str]:
        values = [item.strip().strip('"') for item in raw.split(",")]
        return [value for value in values if value]


class FieldNameMatcher:
    """Recognise the quoted key that opens a field declaration."""

    pattern = re.compile(r'^\s*"([A-Za-z0-9_]+)"\s*:')

    def match(self, content: str) -> Optional[str]:
        found = self.pattern.match(content)
        return found.group(1) if found else None


ATTRIBUTE_MATCHERS: Sequence[LineMatcher] = (
    TypeMatcher(),
    FlagMatcher("Optional", "optional"),
    FlagMatcher("Required", "required"),
    FlagMatcher("ForceNew", "force_new"),
    StringInSliceMatcher(),
)


@dataclass(slots=True)
class _Accumulator:
    """State of the extractor: no field yet, or accumulating ``name``."""

    result: FieldSet = field(default_factory=dict)
    name: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    def open(self, name: str) -> None:
        if self.name is not None and self.name != name:
            self.commit()
        self.name = name

    def record(self, attribute: str, value: Any) -> None:
        if self.name is None:
            logger.debug("Ignoring %s outside of any field declaration", attribute)
            return
        self.attributes[attribute] = value

    def commit(self) -> None:
        if self.name is None:
            return
        incoming = Field(name=self.name, **self.attributes)
        existing = self.result.get(self.name)
        if existing is None:
            self.result[self.name] = incoming
        else:
            existing.merge(incoming)
        self.attributes = {}

    def finish(self) -> FieldSet:
        if self.name is not None and self.attributes:
            self.commit()
        return self.result


class FieldAttributeExtractor:
    """Build a :class:`FieldSet` from the lines of one hunk side.

    Only lines that are part of the edit, or that open a field declaration,
    are inspected, so fields the hunk merely shows as context never pick up
    attributes.
    """

    def __init__(
        self,
        matchers: Sequence[LineMatcher] | None = None,
        name_matcher: FieldNameMatcher | None = None,
    ) -> None:
        self._matchers = tuple(matchers) if matchers is not None else tuple(ATTRIBUTE_MATCHERS)
        self._name_matcher = name_matcher or FieldNameMatcher()

    def extract(self, lines: Iterable[DiffLine]) -> FieldSet:
        state = _Accumulator()
        for line in lines:
            name = self._name_matcher.match(line.content)
            if name is not None:
                state.open(name)
            elif line.mode == LineMode.UNCHANGED:
                continue

            for matcher in self._matchers:
                value = matcher.match(line.content)
                if value is not None:
                    state.record(matcher.attribute, value)

        return state.finish()


__all__ = [
    "ATTRIBUTE_MATCHERS",
    "FieldAttributeExtractor",
    "FieldNameMatcher",
    "FlagMatcher",
    "LineMatcher",
    "StringInSliceMatcher",
    "TypeMatcher",
    "parse_bool",
]
