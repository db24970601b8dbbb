"""Command-line interface implementation for the schema checks."""

from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence

from ..adapters import DocumentLoaderError, PatchLoaderError, SchemaLoader, SchemaLoaderError
from ..config import CheckerSettings, ConfigError, load_settings
from ..diagnostics import configure_logging
from ..models import Violation, ViolationKind
from ..service import CheckResult, SchemaCheckService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CheckReport:
    """Collection of violations plus contextual metadata."""

    violations: Sequence[Violation]
    metadata: Mapping[str, Any]
    passed: bool

    def counts_by_kind(self) -> dict[str, int]:
        counts = Counter(violation.kind for violation in self.violations)
        return {kind.value: counts.get(kind, 0) for kind in ViolationKind}

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": dict(self.metadata),
            "summary": {
                "passed": self.passed,
                "total_violations": len(self.violations),
                "counts": self.counts_by_kind(),
            },
            "violations": [_serialize_violation(violation) for violation in self.violations],
        }


def _serialize_violation(violation: Violation) -> dict[str, Any]:
    return {
        "kind": violation.kind.value,
        "category": violation.category,
        "field": violation.field,
        "context": violation.context,
        "message": violation.diagnostic,
    }


def render_table(report: CheckReport) -> str:
    """Render violations as a simple text table for terminal output."""

    if not report.violations:
        return "No violations detected." if report.passed else "Check failed without field-level violations."

    headers = ("Kind", "Field", "Context")
    rows = [headers]
    for violation in report.violations:
        rows.append((violation.kind.value, violation.field, violation.context))

    widths = [max(len(str(row[idx])) for row in rows) for idx in range(len(headers))]

    def format_row(values: tuple[str, str, str]) -> str:
        return "  ".join(value.ljust(width) for value, width in zip(values, widths, strict=True))

    lines = [format_row(headers)]
    lines.append("  ".join("=" * width for width in widths))
    for row in rows[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML/JSON file overriding provider naming and documentation layout.",
    )
    parser.add_argument(
        "--provider",
        default=None,
        help="Provider namespace prefixed to resource names (default: alicloud).",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format for check results.",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Also write the JSON report to this path.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="schema-checker",
        description="Provider schema compatibility and documentation checks",
    )
    subparsers = parser.add_subparsers(dest="command")

    compat_parser = subparsers.add_parser(
        "compat", help="Detect backward-incompatible schema changes in a unified diff."
    )
    compat_parser.add_argument("diff_file", type=Path, help="Path to the unified diff to inspect.")
    _add_common_arguments(compat_parser)

    docs_parser = subparsers.add_parser(
        "docs", help="Check a resource's documentation page against its schema."
    )
    docs_parser.add_argument(
        "--resource",
        required=True,
        help="Terraform resource name, e.g. alicloud_vpc.",
    )
    docs_parser.add_argument(
        "--schema",
        type=Path,
        required=True,
        help="YAML/JSON schema export mapping resource names to their fields.",
    )
    docs_parser.add_argument(
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Root of the provider repository checkout.",
    )
    docs_parser.add_argument(
        "--docs-dir",
        default=None,
        help="Documentation directory relative to the root (default: website/docs/r).",
    )
    _add_common_arguments(docs_parser)

    return parser


def _resolve_settings(args: argparse.Namespace) -> CheckerSettings:
    settings = load_settings(args.config)
    return settings.with_overrides(
        provider=args.provider,
        docs_dir=getattr(args, "docs_dir", None),
    )


def _emit(result: CheckResult, args: argparse.Namespace) -> int:
    report = CheckReport(violations=result.violations, metadata=result.metadata, passed=result.passed)

    if args.report is not None:
        args.report.parent.mkdir(parents=True, exist_ok=True)
        args.report.write_text(json.dumps(report.to_dict(), indent=2), encoding="utf-8")

    if args.format == "json":
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(render_table(report))

    return 0 if report.passed else 1


def _handle_compat(args: argparse.Namespace) -> int:
    settings = _resolve_settings(args)
    service = SchemaCheckService(settings=settings)
    result = service.check_compatibility(args.diff_file)
    return _emit(result, args)


def _handle_docs(args: argparse.Namespace) -> int:
    if not args.resource:
        logger.warning("The resource name is empty, nothing to check")
        return 0

    settings = _resolve_settings(args)
    service = SchemaCheckService(settings=settings, root=args.root)
    # An unprefixed name never appears in a schema export.
    service.document_path(args.resource)
    schema_fields = SchemaLoader(args.schema).load_resource(args.resource)
    result = service.check_documentation(args.resource, schema_fields)
    return _emit(result, args)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by tests and the ``python -m`` invocation."""

    parser = build_parser()
    args = parser.parse_args(argv)

    handlers = {"compat": _handle_compat, "docs": _handle_docs}
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 0

    configure_logging(args.log_level)
    try:
        return handler(args)
    except (ConfigError, DocumentLoaderError, PatchLoaderError, SchemaLoaderError) as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}")
        return 2


def run() -> None:  # pragma: no cover - thin wrapper for module execution
    """Execute the CLI and exit with the produced status code."""

    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
