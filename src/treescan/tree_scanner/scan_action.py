"""Per-entry decision taken by the tree scanner during traversal."""

from enum import Enum


class ScanAction(str, Enum):
    """Action the scanner takes for a single directory entry.

    Values:
        DESCEND: Directory survived filtering; visit its children
        EMIT: File survived filtering; add it to the report
        SKIP: File is excluded; continue with its siblings
        PRUNE: Directory is excluded together with everything below it
    """

    DESCEND = "descend"
    EMIT = "emit"
    SKIP = "skip"
    PRUNE = "prune"
