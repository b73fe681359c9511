"""Syntax node model consumed by the analyzer.

The analyzer never touches a parser directly. Host adapters (see
``go_parser``) lower their trees into these small immutable records,
keeping only the shapes the checks look at.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

ANONYMOUS_FUNCTION = "anonymous function"
TEST_FILE_SUFFIX = "_test.go"


@dataclass(frozen=True)
class Position:
    """Source location of a node (1-based line and column)."""

    file_path: str
    line: int
    column: int = 1

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}"


# Expressions


@dataclass(frozen=True)
class Ident:
    name: str


@dataclass(frozen=True)
class Selector:
    """``operand.field`` - a qualified name or a field/method access."""

    operand: "Expr"
    field: str


@dataclass(frozen=True)
class Star:
    """Pointer type ``*elem``."""

    elem: "Expr"


@dataclass(frozen=True)
class CallExpr:
    func: "Expr"
    args: Tuple["Expr", ...] = ()
    position: Optional[Position] = None


@dataclass(frozen=True)
class OtherExpr:
    """Any expression shape the analyzer does not inspect."""

    kind: str = ""


Expr = Union[Ident, Selector, Star, CallExpr, OtherExpr]


def qualified_name(expr: Expr) -> Optional[str]:
    """Return ``pkg.Name`` for a two-part selector on an identifier.

    Anything else (plain identifiers, chained selectors, calls) yields None.
    """
    if isinstance(expr, Selector) and isinstance(expr.operand, Ident):
        return f"{expr.operand.name}.{expr.field}"
    return None


# Statements


@dataclass(frozen=True)
class ExprStmt:
    expr: Expr


@dataclass(frozen=True)
class DeferStmt:
    call: Expr


@dataclass(frozen=True)
class AssignStmt:
    """Assignment or short variable declaration (``=``, ``:=``, ``+=``...)."""

    lhs: Tuple[Expr, ...] = ()
    rhs: Tuple[Expr, ...] = ()


@dataclass(frozen=True)
class IfStmt:
    init: Optional["Stmt"] = None


@dataclass(frozen=True)
class ForStmt:
    body: Tuple["Stmt", ...] = ()


@dataclass(frozen=True)
class OtherStmt:
    kind: str = ""


Stmt = Union[ExprStmt, DeferStmt, AssignStmt, IfStmt, ForStmt, OtherStmt]


# Declarations


@dataclass(frozen=True)
class Parameter:
    """One parameter declaration.

    ``name`` is the first declared identifier, or None when the parameter
    is unnamed or blank (``_``).
    """

    name: Optional[str]
    type: Expr


@dataclass(frozen=True)
class FunctionUnit:
    """A function declaration or function literal."""

    name: Optional[str]
    params: Tuple[Parameter, ...] = ()
    body: Optional[Tuple[Stmt, ...]] = None
    file_path: str = ""
    position: Optional[Position] = field(default=None, compare=False)

    @property
    def display_name(self) -> str:
        return self.name if self.name else ANONYMOUS_FUNCTION

    @property
    def is_test_file(self) -> bool:
        return self.file_path.endswith(TEST_FILE_SUFFIX)
