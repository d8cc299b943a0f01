"""Directory traversal with name-denylist and ignore-pattern exclusion.

This module provides the main TreeScanner class, which walks a directory tree depth
first and collects the files that survive filtering into a ScanReport.
"""

import os
from typing import Iterator, Optional

from treescan.exceptions import RootResolutionError, TraversalError
from treescan.exclusion_rules.base_rules import PathMatcher
from treescan.exclusion_rules.git_rules import load_ignore_file
from treescan.exclusion_rules.name_rules import NameDenylist
from treescan.tree_scanner.file_entry import FileEntry, ScanReport, extension_of
from treescan.tree_scanner.scan_action import ScanAction
from treescan.types import PathType


class TreeScanner:
    """A depth-first scanner producing a flat inventory of files below a root.

    Every entry below the root is checked in a fixed order. First its base name is
    looked up in the denylist, then its relative path is matched against the ignore
    matcher, if one is loaded. An excluded directory is pruned (nothing below it is
    visited) and an excluded file is skipped. Surviving directories are descended into
    and never reported themselves; surviving files become FileEntry records.

    Children of every directory are visited in name order, so the report order is
    deterministic. The root directory itself is never filtered.

    Symbolic Link Behavior:
        Symbolic links are never followed. A link, even one pointing at a directory,
        is treated as a file and reported with the size of the link itself.

    Error Handling:
        Any OSError while listing a directory or reading an entry's metadata aborts
        the scan with a TraversalError. A missing or broken ignore file is not an
        error; it simply leaves pattern-based filtering disabled.

    Attributes:
        root_path (PathType): The root directory as given.
        root (str): Absolute path of the root directory, computed on construction.
        denylist (PathMatcher): Matcher consulted with entry names.
        ignore_matcher (Optional[PathMatcher]): Matcher consulted with relative paths.

    Example:
        >>> scanner = TreeScanner("project")  # doctest: +SKIP
        >>> report = scanner.scan()  # doctest: +SKIP
        >>> [entry.path for entry in report]  # doctest: +SKIP
        ['README.md', 'src/main.py']
    """

    def __init__(
        self,
        root_path: PathType = ".",
        denylist: Optional[NameDenylist] = None,
        ignore_matcher: Optional[PathMatcher] = None,
        use_ignore_file: bool = True,
    ) -> None:
        """Initialize a TreeScanner.

        Args:
            root_path: Directory to scan. Defaults to the current directory.
            denylist: Base-name denylist. Defaults to NameDenylist() with the
                built-in names.
            ignore_matcher: Pattern matcher for relative paths. When None and
                use_ignore_file is True, the .gitignore at the root is loaded.
            use_ignore_file: Whether to load the root's .gitignore when no
                ignore_matcher is given. Defaults to True.

        Raises:
            RootResolutionError: If the absolute path of root_path cannot be computed.
        """
        self.root_path = root_path
        self.root = self._resolve_root(root_path)
        self.denylist = denylist if denylist is not None else NameDenylist()
        if ignore_matcher is None and use_ignore_file:
            ignore_matcher = load_ignore_file(self.root)
        self.ignore_matcher = ignore_matcher

    @staticmethod
    def _resolve_root(root_path: PathType) -> str:
        try:
            return os.path.abspath(os.fspath(root_path))
        except (OSError, ValueError) as e:
            raise RootResolutionError(str(root_path), str(e)) from e

    def decide(self, name: str, relative_path: str, is_dir: bool) -> ScanAction:
        """Decide what to do with a single entry.

        Args:
            name: Base name of the entry.
            relative_path: Path of the entry relative to the root, using forward slashes.
            is_dir: Whether the entry is a (non-symlink) directory.

        Returns:
            PRUNE or SKIP if the entry is excluded, DESCEND or EMIT otherwise.

        Example:
            >>> scanner = TreeScanner("/tmp", use_ignore_file=False)
            >>> scanner.decide("build", "app/build", is_dir=True)
            <ScanAction.PRUNE: 'prune'>
            >>> scanner.decide("main.py", "app/main.py", is_dir=False)
            <ScanAction.EMIT: 'emit'>
        """
        excluded = ScanAction.PRUNE if is_dir else ScanAction.SKIP

        if self.denylist.name_denied(name):
            return excluded

        if self.ignore_matcher is not None:
            # The trailing slash marks the query as a directory
            query = relative_path + "/" if is_dir else relative_path
            if self.ignore_matcher.matches(query):
                return excluded

        return ScanAction.DESCEND if is_dir else ScanAction.EMIT

    def iter_entries(self) -> Iterator[FileEntry]:
        """Yield surviving files in traversal order.

        Yields:
            FileEntry records, one per surviving file.

        Raises:
            TraversalError: If the root or any directory below it cannot be listed,
                or an entry's metadata cannot be read.
        """
        yield from self._walk(self.root, "")

    def scan(self) -> ScanReport:
        """Scan the whole tree and return the finished report.

        Returns:
            The ScanReport for the root.

        Raises:
            TraversalError: If any part of the traversal fails. No partial report is
                returned in that case.
        """
        return ScanReport(root=self.root, files=tuple(self.iter_entries()))

    def _walk(self, directory: str, relative_dir: str) -> Iterator[FileEntry]:
        """Recursively yield entries below a directory."""
        try:
            # The directory handle is released before any child is processed
            with os.scandir(directory) as it:
                children = sorted(it, key=lambda entry: entry.name)
        except (OSError, ValueError) as e:
            raise TraversalError(directory, _reason(e)) from e

        for child in children:
            relative_path = f"{relative_dir}/{child.name}" if relative_dir else child.name

            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError as e:
                raise TraversalError(child.path, _reason(e)) from e

            action = self.decide(child.name, relative_path, is_dir)

            if action is ScanAction.DESCEND:
                yield from self._walk(child.path, relative_path)
            elif action is ScanAction.EMIT:
                try:
                    size = child.stat(follow_symlinks=False).st_size
                except OSError as e:
                    raise TraversalError(child.path, _reason(e)) from e
                yield FileEntry(relative_path, size, extension_of(child.name))


def _reason(error: Exception) -> str:
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)


def scan(root_path: PathType = ".", use_ignore_file: bool = True) -> ScanReport:
    """Scan a directory with the built-in denylist and the root's .gitignore.

    Args:
        root_path: Directory to scan. Defaults to the current directory.
        use_ignore_file: Whether to honor the .gitignore at the root. Defaults to True.

    Returns:
        The finished ScanReport.

    Raises:
        RootResolutionError: If the absolute path of root_path cannot be computed.
        TraversalError: If the traversal fails.
    """
    return TreeScanner(root_path, use_ignore_file=use_ignore_file).scan()
