"""Common AST parsing utilities for file analysis.

This module provides centralized file parsing so that every tree in a run is
produced the same way. Failures are not recoverable: an unreadable file or a
file with invalid syntax raises SourceParseError, which aborts the whole run.
"""

import ast
import logging
from pathlib import Path

from global_usage_ranker.errors import SourceParseError

logger = logging.getLogger(__name__)


def parse_ast_from_source(source: str | bytes, filename: str) -> ast.Module:
    """Parse Python source code into an AST.

    Raw bytes are decoded the way the interpreter decodes a source file,
    honouring a UTF-8 BOM or a coding declaration.

    Args:
        source: Python source code as text or undecoded bytes
        filename: Filename to use in error messages and tracebacks.

    Returns:
        The parsed AST module

    Raises:
        SourceParseError: If the source is not valid Python
    """
    try:
        return ast.parse(source, filename=filename)
    except SyntaxError as e:
        raise SourceParseError(filename, e.msg, e.lineno) from e
    except ValueError as e:
        # undecodable bytes or an unknown coding declaration
        raise SourceParseError(filename, str(e)) from e


def parse_ast_from_file(file_path: Path) -> ast.Module:
    """Read and parse a Python file into an AST.

    Raises:
        SourceParseError: If the file cannot be read, cannot be decoded, or is not valid Python
    """
    logger.debug("Parsing %s", file_path)
    try:
        source_bytes = file_path.read_bytes()
    except OSError as e:
        raise SourceParseError(file_path, e.strerror or str(e)) from e

    return parse_ast_from_source(source_bytes, str(file_path))
