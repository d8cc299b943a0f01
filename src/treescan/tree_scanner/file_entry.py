"""Report records produced by the tree scanner."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Tuple


def extension_of(name: str) -> str:
    """Return the extension of the final path segment, including the leading dot.

    The extension starts at the last dot of the name. A name without a dot has no
    extension, while a leading-dot name such as ``.bashrc`` is its own extension.

    Args:
        name: A file name or a slash-separated path.

    Returns:
        The extension, or an empty string if the name contains no dot.

    Example:
        >>> extension_of("archive.tar.gz")
        '.gz'
        >>> extension_of("README")
        ''
        >>> extension_of("src/v1.2/Makefile")
        ''
    """
    base = name.rsplit("/", 1)[-1]
    index = base.rfind(".")
    if index < 0:
        return ""
    return base[index:]


@dataclass(frozen=True)
class FileEntry:
    """A single file that survived filtering.

    Attributes:
        path (str): Path relative to the scan root, separated by forward slashes.
        size (int): Size in bytes, as reported by lstat.
        ext (str): Extension including the leading dot, empty if none.

    Example:
        >>> entry = FileEntry("src/main.py", 120, ".py")
        >>> entry.to_dict()
        {'path': 'src/main.py', 'size': 120, 'ext': '.py'}
    """

    path: str
    size: int
    ext: str

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "size": self.size, "ext": self.ext}


@dataclass(frozen=True)
class ScanReport:
    """The complete result of one scan.

    Attributes:
        root (str): Absolute path of the scanned directory.
        files (Tuple[FileEntry, ...]): Entries in pre-order traversal order, with the
            children of each directory sorted by name.
    """

    root: str
    files: Tuple[FileEntry, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self.files)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the report into plain Python data.

        Returns:
            A mapping with ``root`` and ``files`` keys, ready for serialization.
        """
        return {"root": self.root, "files": [entry.to_dict() for entry in self.files]}
