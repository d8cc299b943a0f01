from abc import ABC, abstractmethod
from typing import Sequence, Union

from treescan.types import PathType


class PathMatcher(ABC):
    """
    Abstract base class defining the interface for path exclusion matchers.

    A matcher answers one question: does a given relative path match its rules? The
    tree scanner uses the answer to decide whether a directory is pruned or a file is
    skipped. Any glob or ignore-pattern implementation that provides ``matches`` can be
    plugged into the scanner. File loading and individual rule addition are optional
    capabilities that depend on the matcher type.

    Example:
        >>> # Example of a pattern-based matcher
        >>> from treescan.exclusion_rules.git_rules import GitIgnoreMatcher
        >>> git_rules = GitIgnoreMatcher()
        >>> git_rules.add_rule('*.pyc')
        >>> git_rules.matches('test.pyc')
        True
        >>> git_rules.matches('test.py')
        False
        >>>
        >>> # Example of a fixed matcher
        >>> from treescan.exclusion_rules.name_rules import NameDenylist
        >>> denylist = NameDenylist()
        >>> denylist.matches('src/node_modules')
        True
        >>> # denylist.add_rule('vendor')  # Would raise NotImplementedError
    """

    @abstractmethod
    def matches(self, path: str) -> bool:
        """
        Determine if a given path matches the rules of this matcher.

        Args:
            path (str): The file or directory path to check, relative to the scan root
                and using forward slashes. Directories may be passed with a trailing
                slash so that directory-only rules can apply.

        Returns:
            bool: True if the path matches (and should be excluded), False otherwise.

        Example:
            >>> class TmpMatcher(PathMatcher):
            ...     def matches(self, path: str) -> bool:
            ...         return path.endswith('.tmp')
            >>> TmpMatcher().matches("build/temp.tmp")
            True
            >>> TmpMatcher().matches("main.py")
            False
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse rules from one or more files.

        Matchers that don't support file operations use this default implementation,
        which raises NotImplementedError.

        Args:
            rules_files: Path to a file or sequence of paths containing rules.

        Raises:
            NotImplementedError: If this matcher doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single rule directly.

        Matchers with a fixed rule set use this default implementation, which raises
        NotImplementedError.

        Args:
            rule (str): The rule to add. The format depends on the implementation.

        Raises:
            NotImplementedError: If this matcher doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
