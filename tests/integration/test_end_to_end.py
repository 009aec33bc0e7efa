"""End-to-end integration tests for the global variable usage ranker."""

from pathlib import Path

import pytest

from global_usage_ranker.analyzer import analyze_directory, analyze_files
from global_usage_ranker.errors import FilesystemError, SourceParseError
from tests.helpers.factories import make_usage_record
from tests.helpers.temp_files import temp_source_tree


def test_declared_but_never_referenced() -> None:
    """A single file with ``x = 1`` and nothing else ranks x at zero."""
    with temp_source_tree({"main.py": "x = 1\n"}) as root:
        result = analyze_directory(root)

    assert result.records == (make_usage_record("x", 0),)


def test_references_inside_function() -> None:
    """A global read twice inside a function ranks at two."""
    source = """
y = 1

def f():
    return y + y
"""
    with temp_source_tree({"main.py": source}) as root:
        result = analyze_directory(root)

    assert result.records == (make_usage_record("y", 2),)


def test_references_counted_across_files() -> None:
    """Uses in one file count toward a global declared in another."""
    files = {
        "a.py": "z = 0\n",
        "b.py": "z = z + 1\nz = z + 1\nz = z + 1\n",
    }
    with temp_source_tree(files) as root:
        result = analyze_directory(root)

    # b.py re-declares z three times, each its own row
    assert [d.name for d in result.declarations] == ["z", "z", "z", "z"]
    assert result.records == (make_usage_record("z", 3),) * 4


def test_directory_without_source_files() -> None:
    """No .py files means no declarations, no records and no error."""
    with temp_source_tree({"notes.txt": "z = 0"}) as root:
        result = analyze_directory(root)

    assert result.files == ()
    assert result.declarations == ()
    assert result.records == ()


def test_files_without_globals() -> None:
    """Files that declare no module-level variables produce an empty ranking."""
    files = {
        "funcs.py": "def helper():\n    value = 1\n    return value\n",
        "types.py": "class Model:\n    field = 1\n",
    }
    with temp_source_tree(files) as root:
        result = analyze_directory(root)

    assert len(result.files) == 2
    assert result.records == ()


def test_ranking_order_and_length() -> None:
    """Rows are sorted most-used first and there is one per declaration."""
    files = {
        "settings.py": "DEBUG = False\ntimeout = 30\nregistry = {}\nregistry = dict()\n",
        "app.py": """
from settings import DEBUG, registry

def handle(request):
    if DEBUG:
        print(registry)
    registry[request] = True
    return DEBUG
""",
    }
    with temp_source_tree(files) as root:
        result = analyze_directory(root)

    assert len(result.records) == len(result.declarations) == 4
    counts = [r.count for r in result.records]
    assert counts == sorted(counts, reverse=True)
    by_name = {r.variable: r.count for r in result.records}
    assert by_name == {"DEBUG": 3, "registry": 3, "timeout": 0}
    assert result.records[-1] == make_usage_record("timeout", 0)


def test_declarations_follow_file_order() -> None:
    """Declarations are collected file by file in enumeration order."""
    files = {
        "b.py": "second = 2\n",
        "a.py": "first = 1\n",
        "c/d.py": "third = 3\n",
    }
    with temp_source_tree(files) as root:
        result = analyze_directory(root)
        relative = [d.file_path.relative_to(root).as_posix() for d in result.declarations]

    assert [d.name for d in result.declarations] == ["first", "second", "third"]
    assert relative == ["a.py", "b.py", "c/d.py"]


def test_idempotent() -> None:
    """Two runs over an unchanged tree give identical results."""
    files = {
        "a.py": "alpha = 1\nbeta = alpha\n",
        "b.py": "from a import alpha, beta\nprint(alpha + beta)\n",
    }
    with temp_source_tree(files) as root:
        first = analyze_directory(root)
        second = analyze_directory(root)

    assert first == second


def test_syntax_error_aborts_run() -> None:
    """One unparseable file aborts the whole analysis."""
    files = {
        "good.py": "x = 1\n",
        "bad.py": "def broken(:\n",
    }
    with temp_source_tree(files) as root:
        with pytest.raises(SourceParseError) as exc_info:
            analyze_directory(root)

        assert exc_info.value.file_path == root / "bad.py"


def test_missing_directory() -> None:
    """A missing root aborts with FilesystemError."""
    with pytest.raises(FilesystemError):
        analyze_directory(Path("/nonexistent/source/tree"))


def test_analyze_files_accepts_explicit_file_set() -> None:
    """analyze_files works on an explicit tuple of paths."""
    with temp_source_tree({"a.py": "x = 1\nprint(x)\n", "b.py": "print(x)\n"}) as root:
        result = analyze_files((root / "a.py",))

    assert result.records == (make_usage_record("x", 1),)
