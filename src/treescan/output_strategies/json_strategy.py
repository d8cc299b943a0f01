"""JSON output strategy for scan reports.

This module provides a strategy for rendering a ScanReport as a single compact JSON
object followed by a newline.
"""

import json

from treescan.exceptions import OutputEncodingError
from treescan.tree_scanner.file_entry import ScanReport

from .base_strategy import ReportStrategy


class JSONReportStrategy(ReportStrategy):
    """Output strategy that formats a report as one JSON object.

    The document has the following structure, written on a single line:
    {
        "root": "/absolute/path/to/root",
        "files": [
            {"path": "relative/path", "size": 123, "ext": ".py"}
        ]
    }

    Non-ASCII characters are emitted as-is, so the caller must write the result as
    UTF-8. File names that cannot be encoded as UTF-8 (undecodable bytes surfaced by
    the OS as surrogate escapes) are rejected with OutputEncodingError.

    Attributes:
        encoder: JSON encoder instance used for consistent output.

    Example:
        >>> from treescan.tree_scanner.file_entry import FileEntry
        >>> strategy = JSONReportStrategy()
        >>> report = ScanReport("/src", (FileEntry("a.txt", 10, ".txt"),))
        >>> strategy.format_report(report)
        '{"root":"/src","files":[{"path":"a.txt","size":10,"ext":".txt"}]}\\n'
    """

    def __init__(self) -> None:
        self.encoder = json.JSONEncoder(ensure_ascii=False, separators=(",", ":"))

    def format_report(self, report: ScanReport) -> str:
        try:
            text = self.encoder.encode(report.to_dict()) + "\n"
            # Surface unencodable names now instead of while writing
            text.encode("utf-8")
        except (TypeError, ValueError) as e:
            raise OutputEncodingError(str(e)) from e
        return text
