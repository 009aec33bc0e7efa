"""Aggregation of per-file usage counts into a ranking of global variables.

Ranking is a pure reduction: each file's tree is tallied once, each declared
name's count is the sum of its tallies over every file, and the records are
sorted by count, highest first. The result is the same as counting every
(name, file) pair separately with count_usages.
"""

import ast
import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from pathlib import Path

from global_usage_ranker.ast_visitors.parse_ast import parse_ast_from_file
from global_usage_ranker.models import UsageRecord
from global_usage_ranker.usage_counter import tally_references

logger = logging.getLogger(__name__)


class TreeCache:
    """Parsed trees keyed by file path, each file parsed at most once per run.

    Trees handed out by the cache are shared and must not be modified.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._trees: dict[Path, ast.Module] = {}

    def __len__(self) -> int:
        """Return the number of files parsed so far."""
        return len(self._trees)

    def get(self, file_path: Path) -> ast.Module:
        """Return the tree for file_path, parsing it on first request.

        Raises:
            SourceParseError: If the file cannot be read or parsed
        """
        tree = self._trees.get(file_path)
        if tree is None:
            tree = parse_ast_from_file(file_path)
            self._trees[file_path] = tree
        return tree


def sort_by_usage(records: Iterable[UsageRecord]) -> tuple[UsageRecord, ...]:
    """Sort records by count, most-used first. Ties have no defined order."""
    return tuple(sorted(records, key=lambda record: record.count, reverse=True))


def rank(
    declared_names: Sequence[str], files: Sequence[Path], cache: TreeCache | None = None
) -> tuple[UsageRecord, ...]:
    """Rank declared variables by how often they are used across a set of files.

    Args:
        declared_names: Variable names in collection order; duplicates each get a record
        files: Every file whose references are counted
        cache: Trees already parsed during this run (default: a fresh cache)

    Returns:
        One UsageRecord per declared name, sorted by count descending

    Raises:
        SourceParseError: If any file cannot be read or parsed
    """
    if cache is None:
        cache = TreeCache()

    tallies: list[Counter[str]] = []
    for file_path in files:
        tallies.append(tally_references(cache.get(file_path)))

    records = [UsageRecord(variable=name, count=sum(tally[name] for tally in tallies)) for name in declared_names]
    logger.debug("Ranked %d declaration(s) across %d file(s)", len(records), len(files))
    return sort_by_usage(records)
