"""Test helper utilities."""

from .console import assert_console_contains, capture_console_output
from .factories import make_occurrence, make_result, make_usage_record
from .temp_files import temp_python_file, temp_source_tree

__all__ = [
    "assert_console_contains",
    "capture_console_output",
    "make_occurrence",
    "make_result",
    "make_usage_record",
    "temp_python_file",
    "temp_source_tree",
]
