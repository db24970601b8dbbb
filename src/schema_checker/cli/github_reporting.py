"""Helpers for publishing schema check reports to GitHub Actions surfaces."""

from __future__ import annotations

import argparse
import json
import os
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from ..models import ViolationKind

# Force-replace findings are review candidates rather than hard breakages.
ANNOTATION_LEVELS = {kind.value: "error" for kind in ViolationKind}
ANNOTATION_LEVELS[ViolationKind.BECAME_FORCE_NEW.value] = "warning"


def format_summary(report: Mapping[str, object]) -> str:
    """Render a Markdown job summary for the provided report."""

    summary: Mapping[str, object] = report.get("summary") or {}
    metadata: Mapping[str, object] = report.get("metadata") or {}
    violations: Sequence[Mapping[str, object]] = report.get("violations") or []

    total = int(summary.get("total_violations", 0))
    passed = bool(summary.get("passed", total == 0))
    counts: Mapping[str, object] = summary.get("counts") or {}

    lines: list[str] = [
        "# Provider Schema Check Report",
        "",
        f"**Result:** {'passed' if passed else 'failed'}",
        f"**Total violations:** {total}",
        "",
        "| Kind | Violations |",
        "| --- | ---: |",
    ]

    for kind in ViolationKind:
        lines.append(f"| {kind.value} | {int(counts.get(kind.value, 0))} |")

    if metadata:
        lines.extend(["", "## Metadata", ""])
        for key in sorted(metadata):
            lines.append(f"- **{key}:** {metadata[key]}")

    if violations:
        lines.extend(["", "## Violations", ""])
        display_limit = 20
        for violation in violations[:display_limit]:
            kind = str(violation.get("kind", "")).strip()
            field = str(violation.get("field", "")).strip()
            context = str(violation.get("context", "")).strip()
            lines.append(f"- **{kind}** `{field}` _(in `{context}`)_")

        remaining = len(violations) - display_limit
        if remaining > 0:
            lines.append(f"- ...and {remaining} more violations.")

    lines.append("")
    return "\n".join(lines)


def iter_annotations(report: Mapping[str, object]) -> Iterable[str]:
    """Generate GitHub Actions workflow command annotations for the violations."""

    violations: Sequence[Mapping[str, object]] = report.get("violations") or []
    for violation in violations:
        kind = str(violation.get("kind", "")).strip()
        level = ANNOTATION_LEVELS.get(kind, "error")
        message = str(violation.get("message", "")).strip() or "Schema check violation."
        body = message.replace("%", "%25").replace("\r", "").replace("\n", "%0A")

        attributes: list[str] = []
        # Compatibility contexts are repository paths; documentation contexts are resource names.
        if violation.get("category") == "compatibility":
            context = str(violation.get("context", "")).strip()
            if context:
                attributes.append(f"file={context}")
        if kind:
            attributes.append(f"title={kind}")

        attribute_segment = ""
        if attributes:
            attribute_segment = " " + ",".join(attributes)

        yield f"::{level}{attribute_segment}::{body}"


def _load_report(path: Path) -> Mapping[str, object]:
    raw = path.read_text(encoding="utf-8-sig")
    if not raw.strip():
        return {}

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Failed to parse report JSON from '{path}': {exc.msg}.") from exc

    if not isinstance(data, Mapping):
        raise ValueError("Report JSON must be an object.")
    return data


def _write_summary(report: Mapping[str, object], destination: Path | None) -> None:
    if destination is None:
        return

    content = format_summary(report)
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("a", encoding="utf-8") as handle:
        handle.write(content)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Publish schema check results as GitHub job summary and annotations."
    )
    parser.add_argument("report", type=Path, help="Path to the schema check report JSON file.")
    parser.add_argument(
        "--summary-path",
        type=Path,
        default=None,
        help="Optional explicit path for the GitHub job summary output.",
    )

    args = parser.parse_args(argv)

    summary_path = args.summary_path
    if summary_path is None:
        summary_env = os.getenv("GITHUB_STEP_SUMMARY")
        if summary_env:
            summary_path = Path(summary_env)

    report = _load_report(args.report)

    _write_summary(report, summary_path)

    for command in iter_annotations(report):
        print(command)

    return 0


def run() -> None:  # pragma: no cover - wrapper for console entry point
    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
