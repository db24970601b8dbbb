"""Text extractors turning patch hunks and markdown pages into field sets."""

from .doc_fields import ARGUMENTS_HEADING, ATTRIBUTES_HEADING, DocumentationExtractor
from .patch_fields import FieldAttributeExtractor, LineMatcher, parse_bool

__all__ = [
    "ARGUMENTS_HEADING",
    "ATTRIBUTES_HEADING",
    "DocumentationExtractor",
    "FieldAttributeExtractor",
    "LineMatcher",
    "parse_bool",
]
