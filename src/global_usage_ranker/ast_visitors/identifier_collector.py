"""Single-pass collector of every identifier occurrence in the AST.

The collector resolves, for each identifier it meets, whether that occurrence
introduces a name (a variable, type or function binding) or uses one. Python's
AST does not carry resolved bindings, so the classification is done here from
the syntactic position of the identifier plus the kind of scope it sits in.

Identifiers include more than ast.Name nodes: function and class names,
parameters, keyword argument names, attribute names, imported names,
``global``/``nonlocal`` names, ``except ... as`` names and match captures are
all reported.

Matching downstream is purely textual. The collector does not try to work out
which binding a reference resolves to.
"""

import ast
from typing import override

from global_usage_ranker.ast_visitors.global_variable_discovery import is_final_annotation
from global_usage_ranker.models import BindingKind, IdentifierOccurrence, Scope, ScopeKind
from global_usage_ranker.scope_tracker import (
    add_scope,
    create_initial_stack,
    current_scope_kind,
    drop_last_scope,
)

type LocatedNode = (
    ast.stmt | ast.expr | ast.arg | ast.keyword | ast.alias | ast.excepthandler | ast.pattern | ast.type_param
)


class IdentifierCollector(ast.NodeVisitor):
    """AST visitor that records every identifier occurrence with its binding kind.

    Usage:
        collector = IdentifierCollector()
        collector.visit(tree)
        occurrences = collector.occurrences
    """

    def __init__(self) -> None:
        """Initialize the collector with no occurrences and module scope."""
        super().__init__()
        self.occurrences: list[IdentifierOccurrence] = []
        self.scope_stack = create_initial_stack()

    def _record(self, name: str, kind: BindingKind, node: LocatedNode) -> None:
        self.occurrences.append(
            IdentifierOccurrence(name=name, kind=kind, line_number=node.lineno, column=node.col_offset)
        )

    def _store_kind(self) -> BindingKind:
        """Kind of a name bound in the current scope: class bodies declare members."""
        if current_scope_kind(self.scope_stack) == ScopeKind.CLASS:
            return BindingKind.MEMBER
        return BindingKind.VARIABLE

    def _visit_in_scope(self, node: ast.AST, scope: Scope) -> None:
        self.scope_stack = add_scope(self.scope_stack, scope)
        self.generic_visit(node)
        self.scope_stack = drop_last_scope(self.scope_stack)

    @override
    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        """Record the function name as a declaration and walk its body."""
        self._record(node.name, BindingKind.FUNCTION, node)
        self._visit_in_scope(node, Scope(ScopeKind.FUNCTION, node.name))

    @override
    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:
        """Record the async function name as a declaration and walk its body."""
        self.visit_FunctionDef(node)  # pyright: ignore[reportArgumentType]

    @override
    def visit_Lambda(self, node: ast.Lambda) -> None:
        """Walk a lambda in its own function scope."""
        self._visit_in_scope(node, Scope(ScopeKind.FUNCTION, "<lambda>"))

    @override
    def visit_ListComp(self, node: ast.ListComp) -> None:
        """Comprehension targets live in their own scope, even inside a class body."""
        self._visit_in_scope(node, Scope(ScopeKind.FUNCTION, "<listcomp>"))

    @override
    def visit_SetComp(self, node: ast.SetComp) -> None:
        """Walk a set comprehension in its own scope."""
        self._visit_in_scope(node, Scope(ScopeKind.FUNCTION, "<setcomp>"))

    @override
    def visit_DictComp(self, node: ast.DictComp) -> None:
        """Walk a dict comprehension in its own scope."""
        self._visit_in_scope(node, Scope(ScopeKind.FUNCTION, "<dictcomp>"))

    @override
    def visit_GeneratorExp(self, node: ast.GeneratorExp) -> None:
        """Walk a generator expression in its own scope."""
        self._visit_in_scope(node, Scope(ScopeKind.FUNCTION, "<genexpr>"))

    @override
    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        """Record the class name as a type declaration and walk its body."""
        self._record(node.name, BindingKind.TYPE, node)
        self._visit_in_scope(node, Scope(ScopeKind.CLASS, node.name))

    @override
    def visit_TypeAlias(self, node: ast.TypeAlias) -> None:
        """Handle ``type Alias = ...`` statements."""
        if isinstance(node.name, ast.Name):
            self._record(node.name.id, BindingKind.TYPE, node.name)
        for type_param in node.type_params:
            self.visit(type_param)
        self.visit(node.value)

    @override
    def visit_TypeVar(self, node: ast.TypeVar) -> None:
        """Record a type parameter like ``T`` in ``def f[T]()``."""
        self._record(node.name, BindingKind.TYPE, node)
        self.generic_visit(node)

    @override
    def visit_ParamSpec(self, node: ast.ParamSpec) -> None:
        """Record a ``**P`` type parameter."""
        self._record(node.name, BindingKind.TYPE, node)
        self.generic_visit(node)

    @override
    def visit_TypeVarTuple(self, node: ast.TypeVarTuple) -> None:
        """Record a ``*Ts`` type parameter."""
        self._record(node.name, BindingKind.TYPE, node)
        self.generic_visit(node)

    @override
    def visit_Name(self, node: ast.Name) -> None:
        """Classify a plain name by its expression context."""
        if isinstance(node.ctx, ast.Store):
            self._record(node.id, self._store_kind(), node)
        else:
            self._record(node.id, BindingKind.REFERENCE, node)

    @override
    def visit_AnnAssign(self, node: ast.AnnAssign) -> None:
        """Handle annotated assignments; ``Final`` annotations declare constants."""
        if isinstance(node.target, ast.Name):
            kind = BindingKind.CONSTANT if is_final_annotation(node.annotation) else self._store_kind()
            self._record(node.target.id, kind, node.target)
        else:
            self.visit(node.target)
        self.visit(node.annotation)
        if node.value is not None:
            self.visit(node.value)

    @override
    def visit_AugAssign(self, node: ast.AugAssign) -> None:
        """An augmented assignment reads its target, so the target is a use."""
        if isinstance(node.target, ast.Name):
            self._record(node.target.id, BindingKind.REFERENCE, node.target)
        else:
            self.visit(node.target)
        self.visit(node.value)

    @override
    def visit_arg(self, node: ast.arg) -> None:
        """Record a function parameter."""
        self._record(node.arg, BindingKind.PARAMETER, node)
        self.generic_visit(node)

    @override
    def visit_keyword(self, node: ast.keyword) -> None:
        """Record the name of a keyword argument (``**kwargs`` has none)."""
        if node.arg is not None:
            self._record(node.arg, BindingKind.PARAMETER, node)
        self.generic_visit(node)

    @override
    def visit_Attribute(self, node: ast.Attribute) -> None:
        """Record the attribute name of ``obj.attr`` as a member access."""
        self._record(node.attr, BindingKind.MEMBER, node)
        self.generic_visit(node)

    @override
    def visit_Import(self, node: ast.Import) -> None:
        """Track imports like 'import os.path' or 'import numpy as np'."""
        for alias in node.names:
            self._record(alias.name.partition(".")[0], BindingKind.IMPORT, alias)
            if alias.asname:
                self._record(alias.asname, BindingKind.IMPORT, alias)

    @override
    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        """Track from imports like 'from config import settings as s'."""
        for alias in node.names:
            if alias.name == "*":
                continue
            self._record(alias.name, BindingKind.IMPORT, alias)
            if alias.asname:
                self._record(alias.asname, BindingKind.IMPORT, alias)

    @override
    def visit_Global(self, node: ast.Global) -> None:
        """A ``global`` statement refers to existing module-level names."""
        for name in node.names:
            self._record(name, BindingKind.REFERENCE, node)

    @override
    def visit_Nonlocal(self, node: ast.Nonlocal) -> None:
        """A ``nonlocal`` statement refers to names of an enclosing function."""
        for name in node.names:
            self._record(name, BindingKind.REFERENCE, node)

    @override
    def visit_ExceptHandler(self, node: ast.ExceptHandler) -> None:
        """Record the ``as`` name of an except clause."""
        if node.name:
            self._record(node.name, self._store_kind(), node)
        self.generic_visit(node)

    @override
    def visit_MatchAs(self, node: ast.MatchAs) -> None:
        """Record a capture pattern like ``case x`` or ``case [_, *_] as x``."""
        if node.name:
            self._record(node.name, self._store_kind(), node)
        self.generic_visit(node)

    @override
    def visit_MatchStar(self, node: ast.MatchStar) -> None:
        """Record ``*rest`` in a sequence pattern."""
        if node.name:
            self._record(node.name, self._store_kind(), node)

    @override
    def visit_MatchMapping(self, node: ast.MatchMapping) -> None:
        """Record ``**rest`` in a mapping pattern."""
        if node.rest:
            self._record(node.rest, self._store_kind(), node)
        self.generic_visit(node)

    @override
    def visit_MatchClass(self, node: ast.MatchClass) -> None:
        """Keyword attributes in a class pattern are member names."""
        for attr in node.kwd_attrs:
            self._record(attr, BindingKind.MEMBER, node)
        self.generic_visit(node)


def collect_identifiers(tree: ast.AST) -> tuple[IdentifierOccurrence, ...]:
    """Collect every identifier occurrence in a tree with its binding kind.

    Args:
        tree: Parsed AST to walk

    Returns:
        All occurrences in traversal order; each identifier appears exactly once
    """
    collector = IdentifierCollector()
    collector.visit(tree)
    return tuple(collector.occurrences)
