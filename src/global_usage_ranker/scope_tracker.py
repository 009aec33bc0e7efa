"""Scope tracking utilities for AST traversal.

This module provides utilities for tracking scope context while walking a
syntax tree. The binding resolver uses it to tell assignments made directly in
a class body (members) apart from assignments made at module or function level
(variables). All functions are pure and work with immutable data structures.
"""

from global_usage_ranker.models import Scope, ScopeKind, ScopeStack


def create_initial_stack() -> ScopeStack:
    """Create an initial scope stack with just the module scope.

    Returns:
        Initial stack containing only the module scope
    """
    return (Scope(kind=ScopeKind.MODULE, name="__module__"),)


def add_scope(stack: ScopeStack, scope: Scope) -> ScopeStack:
    """Add a new scope onto the scope stack.

    This is a pure function that returns a new stack rather than
    modifying the input stack.

    Args:
        stack: Current scope stack (not modified)
        scope: The scope to add (class or function)

    Returns:
        New stack with the scope appended
    """
    return (*stack, scope)


def drop_last_scope(stack: ScopeStack) -> ScopeStack:
    """Return a new stack without the last scope.

    Raises:
        AssertionError: If attempting to remove the root module scope
    """
    assert len(stack) > 1, "Cannot pop module scope"
    return stack[:-1]


def current_scope_kind(stack: ScopeStack) -> ScopeKind:
    """Return the kind of the innermost scope."""
    return stack[-1].kind
