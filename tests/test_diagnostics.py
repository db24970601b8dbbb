import io
import logging

from schema_checker.diagnostics import (
    CollectingDiagnosticSink,
    LoggingDiagnosticSink,
    configure_logging,
)
from schema_checker.models import Violation, ViolationKind


def _violation() -> Violation:
    return Violation(kind=ViolationKind.TYPE_CHANGED, field="tags", context="alicloud/resource_alicloud_vpc.go")


def test_collecting_sink_keeps_order():
    sink = CollectingDiagnosticSink()
    first = _violation()
    second = Violation(kind=ViolationKind.ENUM_SHRUNK, field="mode", context="x.go")

    sink.emit(first)
    sink.emit(second)

    assert sink.violations == [first, second]


def test_logging_sink_writes_diagnostic(caplog):
    sink = LoggingDiagnosticSink(logging.getLogger("schema_checker.tests"))

    with caplog.at_level(logging.ERROR, logger="schema_checker.tests"):
        sink.emit(_violation())

    assert "[Incompatible Change]: attribute type must not be changed for tags" in caplog.text


def test_configure_logging_uses_timestamped_format():
    stream = io.StringIO()
    logger = configure_logging("debug", stream=stream)

    logging.getLogger("schema_checker.example").debug("hello")

    assert len(logger.handlers) == 1
    line = stream.getvalue().strip()
    assert line.endswith("DEBUG schema_checker.example hello")
    # "YYYY-MM-DD HH:MM:SS" prefix
    assert line[4] == "-" and line[10] == " "
