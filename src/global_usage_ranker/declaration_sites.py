"""Classification of identifier occurrences as declaration sites.

An occurrence is the subject of a declaration when it introduces a variable,
type or function binding. Constants, parameters, members and imports never
are: an occurrence of those kinds whose text matches a variable name counts
as a use of that name.
"""

from global_usage_ranker.models import BindingKind, IdentifierOccurrence

DECLARATION_SUBJECT_KINDS = frozenset({BindingKind.VARIABLE, BindingKind.TYPE, BindingKind.FUNCTION})


def is_declaration_subject(occurrence: IdentifierOccurrence) -> bool:
    """Check whether an identifier occurrence introduces the name it spells."""
    return occurrence.kind in DECLARATION_SUBJECT_KINDS
