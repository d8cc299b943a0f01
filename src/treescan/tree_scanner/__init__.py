"""Depth-first directory scanning with name and ignore-pattern exclusion.

This package provides the TreeScanner class and the scan() helper for producing a
ScanReport of the files below a root directory.
"""

from .file_entry import FileEntry, ScanReport, extension_of
from .scan_action import ScanAction
from .tree_scanner import TreeScanner, scan

__all__ = [
    "FileEntry",
    "ScanAction",
    "ScanReport",
    "TreeScanner",
    "extension_of",
    "scan",
]
