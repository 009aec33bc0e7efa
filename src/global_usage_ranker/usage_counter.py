"""Counting of identifier references in a syntax tree.

Every identifier occurrence in the tree is visited once. Occurrences that are
the subject of a declaration are skipped; all others are counted under their
textual name. No attempt is made to check that a matching identifier refers to
the same binding as the variable being counted.
"""

import ast
from collections import Counter

from global_usage_ranker.ast_visitors.identifier_collector import collect_identifiers
from global_usage_ranker.declaration_sites import is_declaration_subject


def tally_references(tree: ast.AST) -> Counter[str]:
    """Count references to every name in a tree in a single pass.

    Args:
        tree: Parsed AST to walk

    Returns:
        Counter mapping each referenced name to its number of non-declaration occurrences
    """
    return Counter(
        occurrence.name for occurrence in collect_identifiers(tree) if not is_declaration_subject(occurrence)
    )


def count_usages(tree: ast.AST, variable_name: str) -> int:
    """Count the identifiers in a tree that use variable_name without declaring it."""
    return sum(
        1
        for occurrence in collect_identifiers(tree)
        if occurrence.name == variable_name and not is_declaration_subject(occurrence)
    )
