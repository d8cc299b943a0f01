"""Base-name denylist for build, tooling and version-control entries."""

from typing import AbstractSet, Iterable, Optional

from .base_rules import PathMatcher

# Names excluded wherever they appear in the tree
DEFAULT_DENYLIST: AbstractSet[str] = frozenset(
    [
        ".git",
        "node_modules",
        "Pods",
        "build",
        "DerivedData",
        ".idea",
        ".vscode",
        "__pycache__",
        ".DS_Store",
        "venv",
        ".env",
        ".pytest_cache",
        "dist",
        ".next",
        ".nuxt",
        "target",
    ]
)


class NameDenylist(PathMatcher):
    """Matcher that excludes entries by their base name only.

    A name in the denylist matches at any depth: ``build``, ``src/build`` and
    ``a/b/build/`` all match when ``build`` is denied. The comparison is exact and
    case-sensitive; the rest of the path is never inspected.

    Attributes:
        names (frozenset[str]): The denied base names.

    Example:
        >>> denylist = NameDenylist()
        >>> denylist.matches("node_modules")
        True
        >>> denylist.matches("app/build/")
        True
        >>> denylist.matches("build.gradle")
        False
    """

    def __init__(self, names: Optional[Iterable[str]] = None) -> None:
        """Initialize the denylist.

        Args:
            names: Base names to deny. Defaults to DEFAULT_DENYLIST.
        """
        self.names = frozenset(DEFAULT_DENYLIST if names is None else names)

    def matches(self, path: str) -> bool:
        return self.name_denied(path.rstrip("/").rsplit("/", 1)[-1])

    def name_denied(self, name: str) -> bool:
        """Check a bare entry name against the denylist.

        Args:
            name: The base name of a file or directory.

        Returns:
            True if the name is denied.
        """
        return name in self.names
