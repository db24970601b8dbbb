"""Data models for schema fields, documented resources and violations."""

from .field import FLAG_ATTRIBUTES, Field, FieldSet, Resource, parse_bool
from .violation import COMPATIBILITY_KINDS, Violation, ViolationKind

__all__ = [
    "COMPATIBILITY_KINDS",
    "FLAG_ATTRIBUTES",
    "Field",
    "FieldSet",
    "Resource",
    "Violation",
    "ViolationKind",
    "parse_bool",
]
