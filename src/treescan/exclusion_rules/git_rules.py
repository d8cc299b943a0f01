"""Implementation of path matching using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from pathspec import GitIgnoreSpec

from treescan.types import PathType

from .base_rules import PathMatcher

# Name of the ignore file looked up at the scan root
IGNORE_FILE_NAME = ".gitignore"


def _split_directory_rule(line: str) -> Tuple[str, str]:
    """Split one ignore-file line into its file form and its directory form.

    A rule ending in a slash only applies to directories, and Git compares it with the
    slash removed. Such a rule is blanked in the file form and loses its trailing slash
    in the directory form. Every other line is used unchanged in both forms, so the
    two compiled specs keep the same pattern order.

    Example:
        >>> _split_directory_rule("logs/")
        ('', 'logs')
        >>> _split_directory_rule("!foo/**/")
        ('', '!foo/**')
        >>> _split_directory_rule("*.log")
        ('*.log', '*.log')
    """
    text = line.rstrip()
    if line.startswith("#") or not text.endswith("/") or text.endswith("\\/"):
        return line, line

    directory_form = text[:-1]
    if directory_form in ("", "!"):
        directory_form = ""
    return "", directory_form


class GitIgnoreMatcher(PathMatcher):
    """Path matcher using .gitignore pattern syntax.

    This class implements the PathMatcher interface using standard .gitignore pattern
    matching rules. It uses the pathspec library to match file paths against patterns in
    the same way that Git does.

    The rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    Rules from several files, and individual rules added with add_rule(), are combined
    in the order they are added, with later rules overriding earlier ones (particularly
    for negation patterns with !).

    A path is matched the way ``git check-ignore`` decides it. A path is excluded if
    any of its parent directories is excluded; otherwise the last rule matching the
    path itself decides. Paths ending in a slash are treated as directories. Directory
    rules are compared with their trailing slash removed, and only against
    directories. So ``foo/**`` excludes everything inside ``foo`` but not ``foo``
    itself, and ``foo/**/`` excludes only the directories below ``foo``.

    Attributes:
        spec (GitIgnoreSpec): Compiled rules applied to file paths.

    Example:
        >>> import tempfile
        >>> import os
        >>> with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
        ...     _ = f.write('node_modules/\\n')
        >>> rules = GitIgnoreMatcher(f.name)
        >>> rules.matches("node_modules/package.json")
        True
        >>> rules.add_rule("*.log")
        >>> rules.matches("app.log")
        True
        >>> os.unlink(f.name)

    Note:
        Paths given to matches() must use forward slashes (/) as separators, even on
        Windows, and directories must carry a trailing slash so that directory-only
        rules apply to them.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreMatcher with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            UnicodeDecodeError: If a rules file is not valid UTF-8.
            ValueError: If a pattern is invalid.
        """
        self._lines: List[str] = []
        self._compile(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def _compile(self, lines: List[str]) -> None:
        # Compile both forms before assigning so a bad rule leaves the matcher unchanged
        forms = [_split_directory_rule(line) for line in lines]
        spec = GitIgnoreSpec.from_lines([file_form for file_form, _ in forms])
        directory_spec = GitIgnoreSpec.from_lines([directory_form for _, directory_form in forms])
        self.spec = spec
        self._directory_spec = directory_spec
        self._lines = lines

    def matches(self, path: str) -> bool:
        """Check if a path is excluded by the loaded .gitignore patterns.

        Args:
            path: The relative path to check. A trailing slash marks a directory.

        Returns:
            bool: True if a parent directory is excluded, or if the last rule matching
                the path itself is a non-negated one.

        Example:
            >>> rules = GitIgnoreMatcher()
            >>> rules.add_rule("foo/**")
            >>> rules.add_rule("!foo/keep.txt")
            >>> rules.matches("foo/")
            False
            >>> rules.matches("foo/drop.py")
            True
            >>> rules.matches("foo/keep.txt")
            False
        """
        is_dir = path.endswith("/")
        parts = path.rstrip("/").split("/")

        for depth in range(1, len(parts)):
            if self._directory_spec.match_file("/".join(parts[:depth])):
                return True

        if is_dir:
            return bool(self._directory_spec.match_file("/".join(parts)))
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        lines = list(self._lines)
        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                lines.extend(f.read().splitlines())

        self._compile(lines)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single .gitignore pattern (e.g., "*.pyc", "node_modules/", "!keep.txt").

        Example:
            >>> rules = GitIgnoreMatcher()
            >>> rules.add_rule("build/")
            >>> rules.matches("build/output.txt")
            True
            >>> rules.matches("build")
            False
        """
        self._compile(self._lines + [rule])

    def has_rules(self) -> bool:
        """Check whether any effective (non-comment, non-blank) pattern is loaded.

        Returns:
            True if at least one pattern can affect matching.
        """
        return any(pattern.include is not None for pattern in self._directory_spec.patterns)


def load_ignore_file(root: PathType, name: str = IGNORE_FILE_NAME) -> Optional[GitIgnoreMatcher]:
    """Load the ignore file located directly at a scan root.

    A missing, unreadable or unparsable ignore file is not an error: it only disables
    pattern-based filtering, so None is returned in all of those cases. A file holding
    only comments and blank lines is treated the same way.

    Args:
        root: The scan root directory.
        name: File name of the ignore file inside root. Defaults to ".gitignore".

    Returns:
        A compiled matcher, or None if no usable ignore file exists.
    """
    path = Path(root) / name
    if not path.is_file():
        return None

    try:
        matcher = GitIgnoreMatcher(path)
    except (OSError, ValueError):
        # ValueError covers both undecodable content and invalid patterns
        return None

    return matcher if matcher.has_rules() else None
