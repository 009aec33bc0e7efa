"""Core data models for the global variable usage ranker."""

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path


class ScopeKind(Enum):
    """Type of scope in Python code."""

    MODULE = auto()
    CLASS = auto()
    FUNCTION = auto()


@dataclass(frozen=True)
class Scope:
    """A single scope entered while walking a syntax tree."""

    kind: ScopeKind
    name: str


type ScopeStack = tuple[Scope, ...]


class BindingKind(Enum):
    """How an identifier occurrence relates to the name it spells.

    VARIABLE, TYPE and FUNCTION occurrences introduce a name. Every other
    kind is treated as a use of an existing name when counting.
    """

    VARIABLE = auto()  # x = 1, for x in ..., with ... as x
    TYPE = auto()  # class Foo, type Alias = ..., def f[T]()
    FUNCTION = auto()  # def foo(), async def foo()
    CONSTANT = auto()  # X: Final = 1
    PARAMETER = auto()  # def foo(x), foo(x=1)
    MEMBER = auto()  # obj.x, assignments directly in a class body
    IMPORT = auto()  # import x, from m import x
    REFERENCE = auto()  # any other occurrence


@dataclass(frozen=True)
class IdentifierOccurrence:
    """A single identifier occurrence found in a syntax tree."""

    name: str
    kind: BindingKind
    line_number: int
    column: int


@dataclass(frozen=True)
class DeclarationRecord:
    """A module-level variable declaration."""

    name: str
    file_path: Path
    line_number: int


@dataclass(frozen=True)
class UsageRecord:
    """Total usage count for one declared variable."""

    variable: str
    count: int


@dataclass(frozen=True)
class AnalysisResult:
    """Complete result of ranking a directory of source files.

    Attributes:
        files: Source files analysed, in enumeration order
        declarations: Every module-level variable declaration, in collection order
        records: One usage record per declaration, most-used first
    """

    files: tuple[Path, ...]
    declarations: tuple[DeclarationRecord, ...]
    records: tuple[UsageRecord, ...]
