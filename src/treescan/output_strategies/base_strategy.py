"""Report strategy base class defining the interface for report serialization."""

from abc import ABC, abstractmethod

from treescan.tree_scanner.file_entry import ScanReport


class ReportStrategy(ABC):
    """Abstract base class for turning a finished ScanReport into output text.

    A strategy formats the whole report in one call. Callers write nothing until
    format_report() has returned, so a formatting failure never leaves partial output
    behind.

    Example:
        >>> class PathsOnlyStrategy(ReportStrategy):
        ...     def format_report(self, report: ScanReport) -> str:
        ...         return "".join(entry.path + "\\n" for entry in report)
    """

    @abstractmethod
    def format_report(self, report: ScanReport) -> str:
        """Format a complete report.

        Args:
            report: The report to format.

        Returns:
            The complete output text, including any trailing newline.

        Raises:
            OutputEncodingError: If the report cannot be represented in this format.
        """
        pass