"""Go source adapter: tree-sitter trees lowered to the analyzer node model."""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, List, Optional, Tuple, Union

from tree_sitter_language_pack import get_parser

from .model import (
    AssignStmt,
    CallExpr,
    DeferStmt,
    Expr,
    ExprStmt,
    ForStmt,
    FunctionUnit,
    Ident,
    IfStmt,
    OtherExpr,
    OtherStmt,
    Parameter,
    Position,
    Selector,
    Star,
    Stmt,
)

FUNCTION_NODE_TYPES = ("function_declaration", "method_declaration", "func_literal")
BLANK_IDENTIFIER = "_"

_IDENT_TYPES = ("identifier", "type_identifier", "package_identifier", "field_identifier")
_ASSIGN_TYPES = ("assignment_statement", "short_var_declaration")


@dataclass(frozen=True)
class ParsedFile:
    """Function units of one Go file plus a parse health flag."""

    file_path: str
    units: Tuple[FunctionUnit, ...]
    has_errors: bool = False


@lru_cache(maxsize=1)
def _go_parser():
    return get_parser("go")


def _node_text(node: Any) -> str:
    if node is None:
        return ""
    return node.text.decode("utf-8", errors="ignore")


def _position(node: Any, file_path: str) -> Position:
    row, column = node.start_point[0], node.start_point[1]
    return Position(file_path=file_path, line=row + 1, column=column + 1)


def _first_named_child(node: Any) -> Optional[Any]:
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def parse_go_source(source: Union[str, bytes], file_path: str = "") -> ParsedFile:
    """Parse Go source and collect every function-shaped node.

    Args:
        source: Go source text
        file_path: Reported file path, also used for the ``_test.go`` check

    Returns:
        ParsedFile with units in source pre-order
    """
    if isinstance(source, str):
        source = source.encode("utf-8")

    tree = _go_parser().parse(source)
    root = tree.root_node

    units: List[FunctionUnit] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in FUNCTION_NODE_TYPES:
            units.append(_convert_function(node, file_path))
        stack.extend(reversed(node.children))

    return ParsedFile(file_path=file_path, units=tuple(units), has_errors=root.has_error)


def _convert_function(node: Any, file_path: str) -> FunctionUnit:
    name = None
    if node.type != "func_literal":
        name = _node_text(node.child_by_field_name("name")) or None

    params_node = node.child_by_field_name("parameters")
    body_node = node.child_by_field_name("body")

    return FunctionUnit(
        name=name,
        params=_convert_params(params_node),
        body=_convert_block(body_node, file_path) if body_node is not None else None,
        file_path=file_path,
        position=_position(node, file_path),
    )


def _convert_params(params_node: Any) -> Tuple[Parameter, ...]:
    if params_node is None:
        return ()

    params = []
    for decl in params_node.named_children:
        if decl.type == "parameter_declaration":
            names = decl.children_by_field_name("name")
            name = _node_text(names[0]) if names else None
            if name == BLANK_IDENTIFIER:
                name = None
            params.append(
                Parameter(name=name, type=_convert_type(decl.child_by_field_name("type")))
            )
        elif decl.type == "variadic_parameter_declaration":
            # ...T is never a handle type
            name = _node_text(decl.child_by_field_name("name")) or None
            params.append(Parameter(name=name, type=OtherExpr(decl.type)))
    return tuple(params)


def _convert_type(node: Any) -> Expr:
    if node is None:
        return OtherExpr()
    if node.type == "pointer_type":
        elem = _first_named_child(node)
        return Star(_convert_type(elem))
    if node.type == "qualified_type":
        package = node.child_by_field_name("package")
        name = node.child_by_field_name("name")
        if package is None or name is None:
            return OtherExpr(node.type)
        return Selector(Ident(_node_text(package)), _node_text(name))
    if node.type in _IDENT_TYPES:
        return Ident(_node_text(node))
    return OtherExpr(node.type)


def _block_statements(block: Any) -> List[Any]:
    # Newer grammars wrap block contents in a statement_list node.
    statements = []
    for child in block.named_children:
        if child.type == "statement_list":
            statements.extend(_block_statements(child))
        elif child.type != "comment":
            statements.append(child)
    return statements


def _convert_block(block: Any, file_path: str) -> Tuple[Stmt, ...]:
    return tuple(_convert_stmt(s, file_path) for s in _block_statements(block))


def _convert_stmt(node: Any, file_path: str) -> Stmt:
    if node.type == "expression_statement":
        return ExprStmt(_convert_expr(_first_named_child(node), file_path))

    if node.type == "defer_statement":
        return DeferStmt(_convert_expr(_first_named_child(node), file_path))

    if node.type in _ASSIGN_TYPES:
        return AssignStmt(
            lhs=_convert_expr_list(node.child_by_field_name("left"), file_path),
            rhs=_convert_expr_list(node.child_by_field_name("right"), file_path),
        )

    if node.type == "if_statement":
        init = node.child_by_field_name("initializer")
        return IfStmt(init=_convert_stmt(init, file_path) if init is not None else None)

    if node.type == "for_statement":
        body = node.child_by_field_name("body")
        return ForStmt(body=_convert_block(body, file_path) if body is not None else ())

    return OtherStmt(node.type)


def _convert_expr_list(node: Any, file_path: str) -> Tuple[Expr, ...]:
    if node is None:
        return ()
    if node.type != "expression_list":
        return (_convert_expr(node, file_path),)
    return tuple(
        _convert_expr(child, file_path)
        for child in node.named_children
        if child.type != "comment"
    )


def _convert_expr(node: Optional[Any], file_path: str) -> Expr:
    if node is None:
        return OtherExpr()

    if node.type == "call_expression":
        func = _convert_expr(node.child_by_field_name("function"), file_path)
        args_node = node.child_by_field_name("arguments")
        args: Tuple[Expr, ...] = ()
        if args_node is not None:
            args = tuple(
                _convert_expr(arg, file_path)
                for arg in args_node.named_children
                if arg.type != "comment"
            )
        return CallExpr(func=func, args=args, position=_position(node, file_path))

    if node.type == "selector_expression":
        operand = _convert_expr(node.child_by_field_name("operand"), file_path)
        return Selector(operand, _node_text(node.child_by_field_name("field")))

    if node.type in _IDENT_TYPES:
        return Ident(_node_text(node))

    return OtherExpr(node.type)
