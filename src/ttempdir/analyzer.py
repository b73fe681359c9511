"""Detects os.MkdirTemp, ioutil.TempDir and os.TempDir in Go test code.

Since Go 1.17 ``testing.T``, ``testing.B`` and ``testing.F`` (and the
``testing.TB`` interface) offer ``TempDir()``, which creates a directory
removed automatically when the test ends. Functions that already receive
such a handle should use it instead of the deprecated constructors.
"""

from typing import Iterable, Optional, Sequence, Tuple

from .config import AnalyzerConfig
from .logging import logger
from .model import (
    AssignStmt,
    CallExpr,
    DeferStmt,
    ExprStmt,
    ForStmt,
    FunctionUnit,
    IfStmt,
    Parameter,
    Selector,
    Star,
    Stmt,
    qualified_name,
)
from .reporter import ReportFunc, ReporterBuilder

NAME = "ttempdir"
DOC = (
    "ttempdir is analyzer that detects using os.MkdirTemp, ioutil.TempDir "
    "or os.TempDir instead of t.TempDir since Go1.17"
)

TARGET_NAMES = frozenset({"ioutil.TempDir", "os.MkdirTemp", "os.TempDir"})
POINTER_HANDLE_TYPES = frozenset({"testing.T", "testing.B", "testing.F"})
INTERFACE_HANDLE_TYPE = "testing.TB"


def is_handle_type(typ) -> bool:
    """Check for ``*testing.T``/``*testing.B``/``*testing.F`` or ``testing.TB``."""
    if isinstance(typ, Star):
        return qualified_name(typ.elem) in POINTER_HANDLE_TYPES
    if isinstance(typ, Selector):
        return qualified_name(typ) == INTERFACE_HANDLE_TYPE
    return False


class TempDirAnalyzer:
    """Runs the ttempdir check over function units.

    Args:
        config: Analyzer settings (default: AnalyzerConfig())
    """

    name = NAME
    doc = DOC

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()

    def run(self, units: Iterable[FunctionUnit], report: ReportFunc) -> None:
        """Check every unit, sending each diagnostic to ``report``."""
        for unit in units:
            self.check_function(unit, report)

    def check_function(self, unit: FunctionUnit, report: ReportFunc) -> None:
        if unit.body is None:
            return

        receiver, ok = self.classify(unit.params, unit.is_test_file)
        if not ok:
            logger.debug(f"skipping {unit.display_name}: no testing handle")
            return

        builder = ReporterBuilder(report, receiver, unit.display_name)
        self.check_stmts(unit.body, builder)

    def classify(
        self, params: Sequence[Parameter], is_test_file: bool
    ) -> Tuple[str, bool]:
        """Decide whether a signature exposes a testing handle.

        Args:
            params: Parameters in declaration order
            is_test_file: Whether the enclosing file is a ``_test.go`` file

        Returns:
            (receiver name, eligible). The receiver is empty when the
            function is only eligible through the ``all`` option.
        """
        for param in params:
            if is_handle_type(param.type):
                # First match decides, even without a usable name.
                if not param.name:
                    return "", False
                return param.name, True

        if self.config.all_functions and is_test_file:
            return "", True
        return "", False

    def check_stmts(self, stmts: Sequence[Stmt], builder: ReporterBuilder) -> None:
        for stmt in stmts:
            if isinstance(stmt, ExprStmt):
                self._check_expr(stmt.expr, builder)
            elif isinstance(stmt, DeferStmt):
                self._check_expr(stmt.call, builder)
            elif isinstance(stmt, IfStmt):
                if isinstance(stmt.init, AssignStmt):
                    self._check_assign(stmt.init, builder)
            elif isinstance(stmt, AssignStmt):
                self._check_assign(stmt, builder)
            elif isinstance(stmt, ForStmt):
                self.check_stmts(stmt.body, builder)

    def _check_assign(self, stmt: AssignStmt, builder: ReporterBuilder) -> None:
        if stmt.rhs:
            self._check_expr(stmt.rhs[0], builder)

    def _check_expr(self, expr, builder: ReporterBuilder) -> None:
        if isinstance(expr, CallExpr):
            self.check_call(expr, builder, self.config.max_recursion_level)

    def check_call(
        self, call: CallExpr, builder: ReporterBuilder, recursion_level: int
    ) -> None:
        """Report ``call`` and target calls nested in its arguments.

        Arguments are visited first, each one level deeper, until
        ``recursion_level`` runs out.
        """
        if recursion_level <= 0:
            return

        for arg in call.args:
            if isinstance(arg, CallExpr):
                self.check_call(arg, builder, recursion_level - 1)

        target_name = qualified_name(call.func)
        if target_name in TARGET_NAMES:
            logger.debug(f"{target_name} found in {builder.function_name}")
            builder.build(call.position).report(target_name)
