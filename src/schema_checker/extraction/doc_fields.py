"""Extract documented arguments and attributes from a resource's markdown page."""

from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import PurePath
from typing import Optional

from ..models import Field, Resource

logger = logging.getLogger(__name__)

ARGUMENTS_HEADING = "## Argument Reference"
ATTRIBUTES_HEADING = "## Attributes Reference"

_HEADING = re.compile(r"^(#+)")
_ARGUMENT_LINE = re.compile(r"^[*-] `([A-Za-z0-9_]*)`\s*-?\s?\(([^)]*)\)\s?(.*)")
_PLAIN_LINE = re.compile(r"^[*-] `([A-Za-z0-9_]*)`\s*-?\s?(.*)")
_RESOURCE_STEM = re.compile(r"[A-Za-z_]*")


class _Section(Enum):
    NONE = "none"
    ARGUMENTS = "arguments"
    ATTRIBUTES = "attributes"


def _heading_level(heading: str) -> int:
    return len(heading) - len(heading.lstrip("#"))


class DocumentationExtractor:
    """Turn a documentation page into a :class:`Resource`."""

    def __init__(self, provider: str = "alicloud") -> None:
        self.provider = provider

    def resource_name(self, source_name: str) -> str:
        """Derive ``<provider>_<type>`` from the page's file name."""

        base = PurePath(source_name).name
        stem = _RESOURCE_STEM.match(base)
        return f"{self.provider}_{stem.group(0) if stem else ''}"

    def extract(self, text: str, source_name: str) -> Resource:
        resource = Resource(name=self.resource_name(source_name))
        logger.debug("Parsing documentation for %s", resource.name)

        section = _Section.NONE
        section_level = 0
        in_fence = False
        for raw in text.splitlines():
            line = raw.rstrip()

            if line.lstrip().startswith("```"):
                in_fence = not in_fence
                continue
            if in_fence:
                continue

            if line == ARGUMENTS_HEADING:
                section, section_level = _Section.ARGUMENTS, _heading_level(line)
                continue
            if line == ATTRIBUTES_HEADING:
                section, section_level = _Section.ATTRIBUTES, _heading_level(line)
                continue

            heading = _HEADING.match(line)
            if heading and section is not _Section.NONE:
                if len(heading.group(1)) <= section_level:
                    section = _Section.NONE
                continue

            if section is _Section.ARGUMENTS:
                parsed = self._parse_argument(line)
                if parsed is not None:
                    resource.arguments[parsed.name] = parsed
            elif section is _Section.ATTRIBUTES:
                parsed = self._parse_attribute(line)
                if parsed is not None:
                    resource.attributes[parsed.name] = parsed

        return resource

    # ------------------------------------------------------------------
    def _parse_argument(self, line: str) -> Optional[Field]:
        matched = _ARGUMENT_LINE.match(line)
        if matched is None:
            # Arguments documented without a modifier are still documented.
            return self._parse_attribute(line)

        name, modifiers, description = matched.groups()
        if not name:
            return None

        return Field(
            name=name,
            optional=True if "Optional" in modifiers else None,
            required=True if "Required" in modifiers else None,
            force_new=True if "ForceNew" in modifiers else None,
            description=description.strip(),
        )

    def _parse_attribute(self, line: str) -> Optional[Field]:
        matched = _PLAIN_LINE.match(line)
        if matched is None or not matched.group(1):
            return None
        return Field(name=matched.group(1), description=matched.group(2).strip())


__all__ = [
    "ARGUMENTS_HEADING",
    "ATTRIBUTES_HEADING",
    "DocumentationExtractor",
]
