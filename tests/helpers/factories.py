"""Factory functions for creating test model objects."""

from pathlib import Path

from global_usage_ranker.models import (
    AnalysisResult,
    BindingKind,
    DeclarationRecord,
    IdentifierOccurrence,
    UsageRecord,
)


def make_usage_record(variable: str = "value", count: int = 0) -> UsageRecord:
    """Create a UsageRecord with sensible defaults."""
    return UsageRecord(variable=variable, count=count)


def make_occurrence(
    name: str = "value",
    kind: BindingKind = BindingKind.REFERENCE,
    *,
    line_number: int = 1,
    column: int = 0,
) -> IdentifierOccurrence:
    """Create an IdentifierOccurrence with sensible defaults."""
    return IdentifierOccurrence(name=name, kind=kind, line_number=line_number, column=column)


def make_result(*records: UsageRecord, file_count: int = 1) -> AnalysisResult:
    """Create an AnalysisResult whose declarations mirror the given records.

    Args:
        records: Usage records, already in ranked order
        file_count: Number of placeholder files to report as scanned

    Returns:
        AnalysisResult with one declaration per record
    """
    files = tuple(Path(f"module_{i}.py") for i in range(file_count))
    declarations = tuple(
        DeclarationRecord(name=record.variable, file_path=Path("module_0.py"), line_number=i + 1)
        for i, record in enumerate(records)
    )
    return AnalysisResult(files=files, declarations=declarations, records=tuple(records))
