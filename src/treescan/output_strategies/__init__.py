"""Serializers for scan reports."""

from .base_strategy import ReportStrategy
from .json_strategy import JSONReportStrategy

__all__ = ["JSONReportStrategy", "ReportStrategy"]
