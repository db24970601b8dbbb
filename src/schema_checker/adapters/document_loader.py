"""Resolve and read the markdown documentation page of a resource."""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import CheckerSettings

logger = logging.getLogger(__name__)


class DocumentLoaderError(RuntimeError):
    """Raised when a documentation page cannot be located or read."""


class ResourceNameError(DocumentLoaderError):
    """Raised when a resource name does not carry the provider prefix."""


class DocumentLoader:
    """Locate documentation pages inside a provider repository checkout."""

    def __init__(self, root: Path | str = ".", *, settings: CheckerSettings | None = None) -> None:
        self.root = Path(root)
        self.settings = settings or CheckerSettings()

    def resolve_path(self, resource_name: str) -> Path:
        """Return the documentation path for ``resource_name``."""

        segments = resource_name.split(self.settings.resource_prefix, 1)
        if len(segments) < 2 or not segments[1]:
            raise ResourceNameError("the resource name parsed failed")

        filename = f"{segments[1]}{self.settings.doc_suffix}"
        return self.root / self.settings.docs_dir / filename

    def read(self, resource_name: str) -> tuple[Path, str]:
        """Return the resolved path and text of the resource's documentation."""

        path = self.resolve_path(resource_name)
        if not path.exists():
            raise DocumentLoaderError(f"Documentation page not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoaderError(f"Cannot open documentation page {path}") from exc

        logger.debug("Loaded documentation for %s from %s", resource_name, path)
        return path, text


__all__ = ["DocumentLoader", "DocumentLoaderError", "ResourceNameError"]
