import pytest

from treescan.exclusion_rules.base_rules import PathMatcher
from treescan.exclusion_rules.name_rules import DEFAULT_DENYLIST, NameDenylist


def test_default_denylist_contents():
    assert DEFAULT_DENYLIST == {
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
    }


def test_default_denylist_is_immutable():
    assert isinstance(DEFAULT_DENYLIST, frozenset)


@pytest.mark.parametrize(
    "path,expected",
    [
        ("node_modules", True),
        ("web/node_modules", True),
        ("a/b/c/__pycache__/", True),
        (".DS_Store", True),
        ("photos/.DS_Store", True),
        ("build.gradle", False),
        ("builder", False),
        ("Build", False),
        ("src/build/output.o", False),
        ("venv.txt", False),
        (".env.local", False),
    ],
)
def test_name_denylist_matches_base_name_only(path, expected):
    assert NameDenylist().matches(path) == expected, f"Failed for path: {path}"


def test_name_denied():
    denylist = NameDenylist()
    assert denylist.name_denied("target")
    assert not denylist.name_denied("targets")


def test_custom_names():
    denylist = NameDenylist(["vendor"])
    assert denylist.matches("lib/vendor")
    assert not denylist.matches("node_modules")


def test_name_denylist_is_a_path_matcher():
    assert isinstance(NameDenylist(), PathMatcher)


def test_name_denylist_rejects_rule_changes():
    denylist = NameDenylist()
    with pytest.raises(NotImplementedError):
        denylist.add_rule("vendor")
    with pytest.raises(NotImplementedError):
        denylist.load_rules("rules.txt")
