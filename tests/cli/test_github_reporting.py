"""Tests for GitHub Actions reporting helpers."""

from __future__ import annotations

import json
from pathlib import Path

from schema_checker.cli import github_reporting
from schema_checker.cli.github_reporting import format_summary, iter_annotations


def _build_report() -> dict[str, object]:
    return {
        "metadata": {"check": "compatibility", "source": "pr.patch"},
        "summary": {
            "passed": False,
            "total_violations": 2,
            "counts": {"OptionalToRequired": 1, "BecameForceNew": 1},
        },
        "violations": [
            {
                "kind": "OptionalToRequired",
                "category": "compatibility",
                "field": "region",
                "context": "alicloud/resource_alicloud_vpc.go",
                "message": "[Incompatible Change]: attribute must not change from optional "
                "to required for region in alicloud/resource_alicloud_vpc.go",
            },
            {
                "kind": "BecameForceNew",
                "category": "compatibility",
                "field": "zone_id",
                "context": "alicloud/resource_alicloud_vpc.go",
                "message": "[Incompatible Change]: attribute must not change to ForceNew "
                "for zone_id in alicloud/resource_alicloud_vpc.go",
            },
        ],
    }


def test_format_summary_includes_key_sections() -> None:
    """Rendered summaries should include metadata, counts, and violations."""

    summary = format_summary(_build_report())

    assert "# Provider Schema Check Report" in summary
    assert "**Result:** failed" in summary
    assert "**Total violations:** 2" in summary
    assert "| OptionalToRequired | 1 |" in summary
    assert "| EnumShrunk | 0 |" in summary
    assert "- **source:** pr.patch" in summary
    assert "- **OptionalToRequired** `region` _(in `alicloud/resource_alicloud_vpc.go`)_" in summary


def test_iter_annotations_maps_kinds_to_levels() -> None:
    """Force-replace findings surface as warnings, the rest as errors."""

    annotations = list(iter_annotations(_build_report()))

    assert annotations[0].startswith(
        "::error file=alicloud/resource_alicloud_vpc.go,title=OptionalToRequired::"
    )
    assert annotations[1].startswith("::warning")
    assert "zone_id" in annotations[1]


def test_documentation_annotations_have_no_file() -> None:
    report = {
        "violations": [
            {
                "kind": "MissingDocField",
                "category": "documentation",
                "field": "tags",
                "context": "alicloud_vpc",
                "message": "100% missing\nsecond line",
            }
        ]
    }

    [annotation] = iter_annotations(report)

    assert annotation == "::error title=MissingDocField::100%25 missing%0Asecond line"


def test_main_writes_summary_and_prints_annotations(tmp_path: Path, capsys) -> None:
    report_path = tmp_path / "report.json"
    report_path.write_text(json.dumps(_build_report()), encoding="utf-8")
    summary_path = tmp_path / "summary.md"

    exit_code = github_reporting.main([str(report_path), "--summary-path", str(summary_path)])

    assert exit_code == 0
    assert "# Provider Schema Check Report" in summary_path.read_text(encoding="utf-8")
    assert capsys.readouterr().out.count("::") == 4
