"""Named constructors that compose expression trees.

Each builder returns a new node and performs no evaluation. Numeric literals
are promoted to ``ConstNode`` and ``Variable`` handles to ``VarNode``; the
assignment builders accept only a ``Variable`` as their target.

Typical usage::

    table = SymbolTable()
    a = table.declare("a", 2.0)
    c = table.declare("c", 0.0)
    tree = add_assign(c, sub(a, mul(a, c)))
"""

from __future__ import annotations

from .nodes import (
    AssignNode,
    AssignOp,
    BinaryNode,
    BinaryOp,
    ConstNode,
    Operand,
    UnaryNode,
    UnaryOp,
    Variable,
    VarNode,
    ensure_node,
)


def add(left: Operand, right: Operand) -> BinaryNode:
    return BinaryNode(BinaryOp.PLUS, ensure_node(left), ensure_node(right))


def sub(left: Operand, right: Operand) -> BinaryNode:
    return BinaryNode(BinaryOp.MINUS, ensure_node(left), ensure_node(right))


def mul(left: Operand, right: Operand) -> BinaryNode:
    return BinaryNode(BinaryOp.MUL, ensure_node(left), ensure_node(right))


def div(left: Operand, right: Operand) -> BinaryNode:
    return BinaryNode(BinaryOp.DIV, ensure_node(left), ensure_node(right))


def pos(operand: Operand) -> UnaryNode:
    return UnaryNode(UnaryOp.PLUS, ensure_node(operand))


def negate(operand: Operand) -> UnaryNode:
    return UnaryNode(UnaryOp.MINUS, ensure_node(operand))


def _assignment(op: AssignOp, target: Variable, value: Operand) -> AssignNode:
    if not isinstance(target, Variable):
        raise TypeError(f"assignment target must be a Variable, got {type(target).__name__}")
    return AssignNode(op, target, ensure_node(value))


def assign(target: Variable, value: Operand) -> AssignNode:
    return _assignment(AssignOp.ASSIGN, target, value)


def add_assign(target: Variable, value: Operand) -> AssignNode:
    return _assignment(AssignOp.PLUS, target, value)


def sub_assign(target: Variable, value: Operand) -> AssignNode:
    return _assignment(AssignOp.MINUS, target, value)


def mul_assign(target: Variable, value: Operand) -> AssignNode:
    return _assignment(AssignOp.MUL, target, value)


def div_assign(target: Variable, value: Operand) -> AssignNode:
    return _assignment(AssignOp.DIV, target, value)


def const(value: float) -> ConstNode:
    node = ensure_node(value)
    if not isinstance(node, ConstNode):
        raise TypeError(f"const expects a number, got {type(value)!r}")
    return node


def var(variable: Variable) -> VarNode:
    if not isinstance(variable, Variable):
        raise TypeError(f"var expects a Variable, got {type(variable)!r}")
    return VarNode(variable)
