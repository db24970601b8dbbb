"""Parse unified diff text into files, hunks and tagged lines."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

_HUNK_HEADER = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
_DEV_NULL = "/dev/null"


class PatchLoaderError(RuntimeError):
    """Raised when a patch cannot be read or parsed."""


class LineMode(str, Enum):
    """Role of a line inside a hunk."""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


@dataclass(slots=True)
class DiffLine:
    mode: LineMode
    content: str


@dataclass(slots=True)
class Hunk:
    """A contiguous block of changes with both of its sides."""

    orig_start: int
    orig_length: int
    new_start: int
    new_length: int
    lines: List[DiffLine] = field(default_factory=list)
    before_seen: int = field(default=0, repr=False)
    after_seen: int = field(default=0, repr=False)

    @property
    def complete(self) -> bool:
        """True once both sides hold as many lines as the header announced."""

        return self.before_seen >= self.orig_length and self.after_seen >= self.new_length

    def append(self, line: DiffLine) -> None:
        self.lines.append(line)
        if line.mode != LineMode.ADDED:
            self.before_seen += 1
        if line.mode != LineMode.REMOVED:
            self.after_seen += 1

    @property
    def before_lines(self) -> List[DiffLine]:
        return [line for line in self.lines if line.mode != LineMode.ADDED]

    @property
    def after_lines(self) -> List[DiffLine]:
        return [line for line in self.lines if line.mode != LineMode.REMOVED]


@dataclass(slots=True)
class PatchFile:
    orig_name: Optional[str] = None
    new_name: Optional[str] = None
    hunks: List[Hunk] = field(default_factory=list)

    @property
    def name(self) -> str:
        """Return the most relevant path, preferring the new revision."""

        return self.new_name or self.orig_name or ""


class PatchLoader:
    """Load unified diffs from disk or from text."""

    def load(self, path: Path) -> List[PatchFile]:
        if not path.exists():
            raise PatchLoaderError(f"Patch file not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PatchLoaderError(f"Failed to read patch file {path}") from exc

        return self.parse(content)

    # ------------------------------------------------------------------
    def parse(self, text: str) -> List[PatchFile]:
        """Split ``text`` into :class:`PatchFile` objects."""

        files: List[PatchFile] = []
        current: PatchFile | None = None
        hunk: Hunk | None = None

        for raw in text.splitlines():
            if raw.startswith("diff --git "):
                current = PatchFile()
                files.append(current)
                hunk = None
                parts = raw.split(" ")
                if len(parts) >= 4:
                    current.orig_name = self._strip_prefix(parts[2])
                    current.new_name = self._strip_prefix(parts[3])
                continue

            if hunk is not None and not hunk.complete:
                if self._append_line(hunk, raw):
                    continue

            if raw.startswith("--- "):
                if current is None or current.hunks:
                    current = PatchFile()
                    files.append(current)
                current.orig_name = self._strip_prefix(self._path_token(raw[4:]))
                hunk = None
                continue

            if raw.startswith("+++ "):
                if current is None:
                    current = PatchFile()
                    files.append(current)
                current.new_name = self._strip_prefix(self._path_token(raw[4:]))
                hunk = None
                continue

            if raw.startswith("@@"):
                if current is None:
                    raise PatchLoaderError("Hunk header found before any file header")
                hunk = self._parse_header(raw)
                current.hunks.append(hunk)
                continue

        return files

    # ------------------------------------------------------------------
    def _parse_header(self, line: str) -> Hunk:
        match = _HUNK_HEADER.match(line)
        if not match:
            raise PatchLoaderError(f"Malformed hunk header: {line}")

        orig_start, orig_length, new_start, new_length = match.groups()
        return Hunk(
            orig_start=int(orig_start),
            orig_length=int(orig_length) if orig_length is not None else 1,
            new_start=int(new_start),
            new_length=int(new_length) if new_length is not None else 1,
        )

    def _append_line(self, hunk: Hunk, raw: str) -> bool:
        if raw.startswith("\\"):
            # "\ No newline at end of file"
            return True
        if raw.startswith("+"):
            hunk.append(DiffLine(LineMode.ADDED, raw[1:]))
        elif raw.startswith("-"):
            hunk.append(DiffLine(LineMode.REMOVED, raw[1:]))
        elif raw.startswith(" ") or raw == "":
            hunk.append(DiffLine(LineMode.UNCHANGED, raw[1:]))
        else:
            return False
        return True

    def _path_token(self, value: str) -> str:
        # Timestamps follow the path after a tab in classic diff output.
        return value.split("\t", 1)[0].strip()

    def _strip_prefix(self, path: str) -> str | None:
        if path == _DEV_NULL:
            return None
        if path.startswith(("a/", "b/")):
            return path[2:]
        return path


__all__ = ["DiffLine", "Hunk", "LineMode", "PatchFile", "PatchLoader", "PatchLoaderError"]
