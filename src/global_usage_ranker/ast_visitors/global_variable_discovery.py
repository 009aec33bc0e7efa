"""Discovery of module-level variable declarations.

Only the statements directly in a module's body are inspected. A variable is
declared by a plain assignment (including tuple and starred unpacking) or by an
annotated assignment. Names annotated with ``Final`` are constants and are not
collected. Functions, classes, type aliases, imports and augmented assignments
are not variable declarations.

Duplicates are kept: a name assigned twice at module level yields two
declarations.
"""

import ast
import logging
from collections.abc import Iterator
from pathlib import Path

from global_usage_ranker.models import DeclarationRecord

logger = logging.getLogger(__name__)


def is_final_annotation(annotation: ast.expr) -> bool:
    """Check whether an annotation marks a constant (Final, typing.Final, Final[int])."""
    if isinstance(annotation, ast.Subscript):
        annotation = annotation.value
    if isinstance(annotation, ast.Name):
        return annotation.id == "Final"
    if isinstance(annotation, ast.Attribute):
        return annotation.attr == "Final"
    return False


def iter_target_names(target: ast.expr) -> Iterator[ast.Name]:
    """Yield the names bound by an assignment target, in source order.

    Attribute and subscript targets bind no names and are skipped.

    Example:
        ``a, (b, *c) = ...`` yields the Name nodes for a, b and c.
    """
    match target:
        case ast.Name():
            yield target
        case ast.Tuple(elts=elts) | ast.List(elts=elts):
            for element in elts:
                yield from iter_target_names(element)
        case ast.Starred(value=value):
            yield from iter_target_names(value)
        case _:
            pass


def _iter_declared_names(tree: ast.Module) -> Iterator[ast.Name]:
    for statement in tree.body:
        if isinstance(statement, ast.Assign):
            for target in statement.targets:
                yield from iter_target_names(target)
        elif isinstance(statement, ast.AnnAssign):
            if not isinstance(statement.target, ast.Name):
                continue
            if is_final_annotation(statement.annotation):
                logger.debug("Skipping constant '%s' at line %d", statement.target.id, statement.lineno)
                continue
            yield statement.target


def collect_global_variables(tree: ast.Module) -> tuple[str, ...]:
    """Collect the names of all module-level variables, in declaration order.

    Args:
        tree: Parsed AST of a Python module

    Returns:
        One name per declaration; the same name may appear more than once
    """
    return tuple(name.id for name in _iter_declared_names(tree))


def collect_declarations(tree: ast.Module, file_path: Path) -> tuple[DeclarationRecord, ...]:
    """Collect module-level variable declarations with their source locations."""
    return tuple(
        DeclarationRecord(name=name.id, file_path=file_path, line_number=name.lineno)
        for name in _iter_declared_names(tree)
    )
