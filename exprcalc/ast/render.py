from __future__ import annotations

from .nodes import (
    AssignNode,
    BinaryNode,
    ConstNode,
    Node,
    Operand,
    UnaryNode,
    VarNode,
    ensure_node,
    node_depth,
    node_size,
)
from .registry import OperatorRegistry, build_default_registry
from .symbols import SymbolTable


def render_const(value: float, constant_format: str = "g") -> str:
    return format(value, constant_format)


def render_expression(
    root: Operand,
    symbols: SymbolTable,
    *,
    constant_format: str = "g",
    registry: OperatorRegistry | None = None,
) -> str:
    """Render a tree as flat infix text.

    Operands are emitted left, operator symbol, right with no parentheses, so
    ``mul(add(a, b), c)`` renders as ``a+b*c``. Only a name lookup outside the
    symbol table can fail, raising ``OutOfRangeError``.
    """

    reg = registry or build_default_registry()
    node = ensure_node(root)

    def _render(node_: Node, path: str) -> str:
        if isinstance(node_, ConstNode):
            return render_const(node_.value, constant_format)
        if isinstance(node_, VarNode):
            return symbols.name_of(node_.variable, path)
        if isinstance(node_, UnaryNode):
            symbol = reg.unary(node_.op).symbol
            return symbol + _render(node_.operand, f"{path}.operand")
        if isinstance(node_, BinaryNode):
            symbol = reg.binary(node_.op).symbol
            left = _render(node_.left, f"{path}.left")
            return left + symbol + _render(node_.right, f"{path}.right")
        if isinstance(node_, AssignNode):
            symbol = reg.assign(node_.op).symbol
            target = symbols.name_of(node_.target, f"{path}.target")
            return target + symbol + _render(node_.value, f"{path}.value")
        raise TypeError(f"{path}: unsupported node {type(node_)!r}")

    return _render(node, "root")


def ast_summary(root: Operand, symbols: SymbolTable, max_len: int = 180) -> str:
    node = ensure_node(root)
    expr = render_expression(node, symbols)
    if len(expr) > max_len:
        expr = expr[: max_len - 3] + "..."
    return f"{expr} [nodes={node_size(node)}, depth={node_depth(node)}]"
