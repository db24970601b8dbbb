from __future__ import annotations

from pathlib import Path

import pytest

from schema_checker.adapters import DocumentLoaderError, PatchLoader, SchemaLoader
from schema_checker.config import CheckerSettings
from schema_checker.diagnostics import CollectingDiagnosticSink
from schema_checker.models import Field, ViolationKind
from schema_checker.service import CheckResult, ResourceNameError, SchemaCheckService

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def _service(sink: CollectingDiagnosticSink) -> SchemaCheckService:
    return SchemaCheckService(
        settings=CheckerSettings(docs_dir="docs"),
        root=FIXTURES,
        sink=sink,
    )


def test_compatibility_check_reports_every_hunk() -> None:
    sink = CollectingDiagnosticSink()

    result = _service(sink).check_compatibility(FIXTURES / "vpc.patch")

    assert isinstance(result, CheckResult)
    assert result.passed is False
    assert [(v.kind, v.field) for v in result.violations] == [
        (ViolationKind.OPTIONAL_TO_REQUIRED, "cidr_block"),
        (ViolationKind.TYPE_CHANGED, "vpc_name"),
        (ViolationKind.BECAME_FORCE_NEW, "instance_charge_type"),
        (ViolationKind.ENUM_SHRUNK, "instance_charge_type"),
    ]
    assert {v.context for v in result.violations} == {"alicloud/resource_alicloud_vpc.go"}
    assert sink.violations == result.violations
    assert result.metadata["files"] == ["alicloud/resource_alicloud_vpc.go"]
    assert result.metadata["hunk_count"] == 2


def test_patch_without_resource_files_passes() -> None:
    text = "\n".join(
        [
            "--- a/alicloud/common.go",
            "+++ b/alicloud/common.go",
            "@@ -1,2 +1,2 @@",
            ' "name": {',
            "-Optional: true,",
            "+Required: true,",
        ]
    )
    sink = CollectingDiagnosticSink()

    result = _service(sink).check_patch_files(PatchLoader().parse(text))

    assert result.passed is True
    assert sink.violations == []


def test_documentation_check_passes_for_matching_schema() -> None:
    sink = CollectingDiagnosticSink()
    schema = SchemaLoader(FIXTURES / "schema.yaml").load_resource("alicloud_vpc")

    result = _service(sink).check_documentation("alicloud_vpc", schema)

    assert result.passed is True
    assert result.metadata["resource"] == "alicloud_vpc"
    assert result.metadata["documented_fields"] == 5
    assert result.metadata["schema_fields"] == 4


def test_documentation_check_reports_wrong_flag() -> None:
    sink = CollectingDiagnosticSink()
    schema = {
        "cidr_block": Field(name="cidr_block", required=True),
        "vpc_name": Field(name="vpc_name", optional=True),
        "description": Field(name="description", optional=True),
        "status": Field(name="status", computed=True),
    }

    result = _service(sink).check_documentation("alicloud_vpc", schema)

    assert result.passed is False
    assert [(v.kind, v.field) for v in sink.violations] == [
        (ViolationKind.WRONG_FORCE_NEW_FLAG, "cidr_block")
    ]


def test_documentation_check_requires_provider_prefix() -> None:
    with pytest.raises(ResourceNameError):
        _service(CollectingDiagnosticSink()).check_documentation("vpc", {})


def test_documentation_check_requires_page() -> None:
    with pytest.raises(DocumentLoaderError):
        _service(CollectingDiagnosticSink()).check_documentation("alicloud_eip", {})


def test_document_path_resolves_without_reading() -> None:
    service = _service(CollectingDiagnosticSink())

    assert service.document_path("alicloud_eip") == FIXTURES / "docs" / "eip.html.markdown"
    with pytest.raises(ResourceNameError):
        service.document_path("vpc")
