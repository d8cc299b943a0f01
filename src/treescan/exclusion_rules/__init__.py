"""Matchers for excluding files and directories from a scan."""

from .base_rules import PathMatcher
from .git_rules import IGNORE_FILE_NAME, GitIgnoreMatcher, load_ignore_file
from .name_rules import DEFAULT_DENYLIST, NameDenylist

__all__ = [
    "DEFAULT_DENYLIST",
    "GitIgnoreMatcher",
    "IGNORE_FILE_NAME",
    "NameDenylist",
    "PathMatcher",
    "load_ignore_file",
]
