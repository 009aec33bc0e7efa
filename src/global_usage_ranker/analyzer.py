"""Main analysis orchestrator for global variable usage ranking."""

import logging
from pathlib import Path

from global_usage_ranker.ast_visitors.global_variable_discovery import collect_declarations
from global_usage_ranker.file_discovery import DEFAULT_PATTERN, find_source_files
from global_usage_ranker.models import AnalysisResult, DeclarationRecord
from global_usage_ranker.ranking import TreeCache, rank

logger = logging.getLogger(__name__)


def analyze_files(files: tuple[Path, ...]) -> AnalysisResult:
    """Complete analysis pipeline for a fixed set of source files.

    Each file is parsed once; the trees are reused for both the declaration
    pass and the counting pass.

    Args:
        files: Files to analyse, in the order their declarations are collected

    Returns:
        AnalysisResult with one usage record per declaration, most-used first

    Raises:
        SourceParseError: If any file cannot be read or parsed
    """
    cache = TreeCache()

    # 1. Collect every module-level declaration, in file order
    declarations: list[DeclarationRecord] = []
    for file_path in files:
        file_declarations = collect_declarations(cache.get(file_path), file_path)
        logger.debug("%s declares %d global variable(s)", file_path, len(file_declarations))
        declarations.extend(file_declarations)

    # 2. Count usages across the whole file set and sort
    records = rank([declaration.name for declaration in declarations], files, cache)

    return AnalysisResult(files=files, declarations=tuple(declarations), records=records)


def analyze_directory(root: Path, pattern: str = DEFAULT_PATTERN) -> AnalysisResult:
    """Complete analysis pipeline for every source file under a directory.

    Raises:
        FilesystemError: If the directory cannot be enumerated
        SourceParseError: If any file cannot be read or parsed
    """
    files = find_source_files(root, pattern)
    return analyze_files(files)
