"""Adapter layer for reading patches, documentation pages and schema exports."""

from .document_loader import DocumentLoader, DocumentLoaderError, ResourceNameError
from .patch_loader import DiffLine, Hunk, LineMode, PatchFile, PatchLoader, PatchLoaderError
from .schema_loader import SchemaLoader, SchemaLoaderError, build_field_set

__all__ = [
    "DiffLine",
    "DocumentLoader",
    "DocumentLoaderError",
    "Hunk",
    "LineMode",
    "PatchFile",
    "PatchLoader",
    "PatchLoaderError",
    "ResourceNameError",
    "SchemaLoader",
    "SchemaLoaderError",
    "build_field_set",
]
