class ScanError(Exception):
    """
    Base class for all fatal errors raised while producing a scan report.

    Catching this exception is enough to handle every failure that should abort an
    invocation. Ignore-file problems are never reported through this hierarchy because
    they only disable pattern-based filtering.
    """

    pass


class RootResolutionError(ScanError):
    """
    Exception raised when the absolute path of the scan root cannot be computed.

    Attributes:
        root (str): The root path as it was given.

    Example:
        >>> error = RootResolutionError("some/dir")
        >>> str(error)
        'Cannot resolve absolute path of some/dir'
    """

    def __init__(self, root: str, reason: str = "") -> None:
        """
        Initialize the exception with the unresolved root.

        Args:
            root (str): The root path as it was given.
            reason (str, optional): Underlying cause, appended to the message when given.
        """
        self.root = root
        message = f"Cannot resolve absolute path of {root}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TraversalError(ScanError):
    """
    Exception raised when a directory cannot be listed or an entry cannot be stat-ed.

    A traversal error aborts the whole scan. No partial report is produced.

    Attributes:
        path (str): Filesystem path that could not be read.

    Example:
        >>> error = TraversalError("/srv/project/private", "Permission denied")
        >>> str(error)
        'Error walking tree at /srv/project/private: Permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception with the unreadable path.

        Args:
            path (str): Filesystem path that could not be read.
            reason (str): Description of the underlying I/O failure.
        """
        self.path = path
        super().__init__(f"Error walking tree at {path}: {reason}")


class OutputEncodingError(ScanError):
    """
    Exception raised when a finished report cannot be encoded for output.

    This typically happens when a file name is not valid UTF-8 and therefore cannot
    be represented in the JSON document.

    Example:
        >>> error = OutputEncodingError("invalid file name")
        >>> str(error)
        'Error encoding report: invalid file name'
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Error encoding report: {reason}")
