"""Directory inventory utilities.

This package provides tools for enumerating the files of a project tree while
filtering out build artifacts, version-control metadata, and paths excluded by
the project's .gitignore, producing a clean listing for indexing tools.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("treescan")
except PackageNotFoundError:
    __version__ = "unknown"
