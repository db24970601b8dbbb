"""Orchestration layer used by the CLI to run the schema checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

from .adapters import (
    DocumentLoader,
    DocumentLoaderError,
    PatchFile,
    PatchLoader,
    PatchLoaderError,
    ResourceNameError,
    SchemaLoaderError,
)
from .config import CheckerSettings
from .diagnostics import DiagnosticSink, LoggingDiagnosticSink
from .extraction import DocumentationExtractor, FieldAttributeExtractor
from .models import FieldSet, Violation
from .rules import CompatibilityRuleEngine, SchemaDocConsistencyChecker, merge_field_sets

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CheckResult:
    """Result returned by :class:`SchemaCheckService` runs."""

    violations: List[Violation]
    metadata: Dict[str, Any] = field(default_factory=dict)
    inconsistent: bool = False

    @property
    def passed(self) -> bool:
        return not self.violations and not self.inconsistent


class SchemaCheckService:
    """High level service running the compatibility and documentation checks."""

    def __init__(
        self,
        *,
        settings: CheckerSettings | None = None,
        root: Path | str = ".",
        sink: DiagnosticSink | None = None,
        patch_loader: PatchLoader | None = None,
        document_loader: DocumentLoader | None = None,
        field_extractor: FieldAttributeExtractor | None = None,
        rule_engine: CompatibilityRuleEngine | None = None,
        consistency_checker: SchemaDocConsistencyChecker | None = None,
    ) -> None:
        self.settings = settings or CheckerSettings()
        self._sink = sink or LoggingDiagnosticSink()
        self._patch_loader = patch_loader or PatchLoader()
        self._document_loader = document_loader or DocumentLoader(root, settings=self.settings)
        self._field_extractor = field_extractor or FieldAttributeExtractor()
        self._rule_engine = rule_engine or CompatibilityRuleEngine()
        self._doc_extractor = DocumentationExtractor(self.settings.provider)
        self._consistency_checker = consistency_checker or SchemaDocConsistencyChecker()

    # ------------------------------------------------------------------
    def check_compatibility(self, patch_path: Path) -> CheckResult:
        """Inspect a patch file for backward-incompatible schema changes."""

        files = self._patch_loader.load(patch_path)
        return self.check_patch_files(files, source=str(patch_path))

    def check_patch_files(self, files: Sequence[PatchFile], *, source: str = "<patch>") -> CheckResult:
        violations: List[Violation] = []
        checked: List[str] = []
        hunk_count = 0

        for patch_file in self._resource_files(files):
            checked.append(patch_file.name)
            for hunk in patch_file.hunks:
                hunk_count += 1
                before = self._field_extractor.extract(hunk.before_lines)
                after = self._field_extractor.extract(hunk.after_lines)
                violations.extend(self._rule_engine.evaluate(before, after, patch_file.name))

        self._publish(violations)
        logger.info(
            "Checked %d hunk(s) in %d resource file(s): %d incompatible change(s)",
            hunk_count,
            len(checked),
            len(violations),
        )

        return CheckResult(
            violations=violations,
            metadata={
                "check": "compatibility",
                "source": source,
                "files": checked,
                "hunk_count": hunk_count,
            },
        )

    # ------------------------------------------------------------------
    def document_path(self, resource_name: str) -> Path:
        """Resolve the documentation page of ``resource_name`` without reading it."""

        return self._document_loader.resolve_path(resource_name)

    # ------------------------------------------------------------------
    def check_documentation(self, resource_name: str, schema_fields: FieldSet) -> CheckResult:
        """Compare the documentation page of ``resource_name`` against its schema."""

        path, text = self._document_loader.read(resource_name)
        resource = self._doc_extractor.extract(text, path.name)
        logger.info("Checking documentation of %s against its schema", resource.name)

        doc_fields = merge_field_sets(resource.attributes, resource.arguments)
        result = self._consistency_checker.check(doc_fields, schema_fields, resource.name)
        self._publish(result.violations)
        if result.cardinality_mismatch:
            logger.error(
                "%s documents %d field(s) but its schema defines %d plus the implicit id",
                resource.name,
                len(doc_fields),
                len(schema_fields),
            )

        return CheckResult(
            violations=list(result.violations),
            inconsistent=result.inconsistent,
            metadata={
                "check": "documentation",
                "resource": resource.name,
                "document": str(path),
                "documented_fields": len(doc_fields),
                "schema_fields": len(schema_fields),
            },
        )

    # ------------------------------------------------------------------
    def _resource_files(self, files: Iterable[PatchFile]) -> Iterable[PatchFile]:
        resource_regex = self.settings.resource_file_regex
        test_regex = self.settings.test_file_regex
        for patch_file in files:
            if patch_file.new_name is None:
                # Deleted files have no new revision to judge.
                continue
            if not resource_regex.search(patch_file.new_name):
                continue
            if test_regex.search(patch_file.new_name):
                continue
            yield patch_file

    def _publish(self, violations: Iterable[Violation]) -> None:
        for violation in violations:
            self._sink.emit(violation)


__all__ = [
    "CheckResult",
    "DocumentLoaderError",
    "PatchLoaderError",
    "ResourceNameError",
    "SchemaCheckService",
    "SchemaLoaderError",
]
