"""Rule execution pipeline and scans."""

from flowlint.engine.context import ScanInput, build_scan_input
from flowlint.engine.runner import RuleRunner
from flowlint.engine.scan import (
    ElementScanResult,
    PageScanResult,
    Scanner,
    watch_selection,
)
from flowlint.engine.third_party import is_third_party, library_for, split_third_party

__all__ = [
    "RuleRunner",
    "Scanner",
    "ScanInput",
    "build_scan_input",
    "PageScanResult",
    "ElementScanResult",
    "watch_selection",
    "is_third_party",
    "library_for",
    "split_third_party",
]
