from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

import numpy as np


class UnaryOp(str, Enum):
    PLUS = "plus"
    MINUS = "minus"


class BinaryOp(str, Enum):
    PLUS = "plus"
    MINUS = "minus"
    MUL = "mul"
    DIV = "div"


class AssignOp(str, Enum):
    ASSIGN = "assign"
    PLUS = "plus"
    MINUS = "minus"
    MUL = "mul"
    DIV = "div"


class _Composable:
    """Infix composition: ``(a + b) * c`` and ``-a`` build trees, never values.

    In-place operators are not overloaded, since ``a += b`` would rebind the
    name; use the ``*_assign`` builders for assignment nodes.
    """

    __slots__ = ()

    def _binary(self, op: BinaryOp, left: object, right: object) -> BinaryNode:
        return BinaryNode(op, ensure_node(left), ensure_node(right))

    def __add__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self._binary(BinaryOp.PLUS, self, other)

    def __radd__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self._binary(BinaryOp.PLUS, other, self)

    def __sub__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self._binary(BinaryOp.MINUS, self, other)

    def __rsub__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self._binary(BinaryOp.MINUS, other, self)

    def __mul__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self._binary(BinaryOp.MUL, self, other)

    def __rmul__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self._binary(BinaryOp.MUL, other, self)

    def __truediv__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self._binary(BinaryOp.DIV, self, other)

    def __rtruediv__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self._binary(BinaryOp.DIV, other, self)

    def __neg__(self) -> UnaryNode:
        return UnaryNode(UnaryOp.MINUS, ensure_node(self))

    def __pos__(self) -> UnaryNode:
        return UnaryNode(UnaryOp.PLUS, ensure_node(self))


@dataclass(frozen=True, slots=True)
class Variable(_Composable):
    """Handle to one slot of a state buffer.

    Two handles are the same variable iff their indices are equal. A handle
    never caches a value; reads and writes go through the buffer passed to
    the interpreter.
    """

    index: int


@dataclass(frozen=True, slots=True)
class ConstNode(_Composable):
    value: float


@dataclass(frozen=True, slots=True)
class VarNode(_Composable):
    variable: Variable


@dataclass(frozen=True, slots=True)
class UnaryNode(_Composable):
    op: UnaryOp
    operand: Node


@dataclass(frozen=True, slots=True)
class BinaryNode(_Composable):
    op: BinaryOp
    left: Node
    right: Node


@dataclass(frozen=True, slots=True)
class AssignNode(_Composable):
    op: AssignOp
    target: Variable
    value: Node

    def __post_init__(self) -> None:
        if not isinstance(self.target, Variable):
            raise TypeError(
                f"assignment target must be a Variable, got {type(self.target).__name__}"
            )


Node = ConstNode | VarNode | UnaryNode | BinaryNode | AssignNode
Operand = Node | Variable | int | float

NODE_TYPES = (ConstNode, VarNode, UnaryNode, BinaryNode, AssignNode)


def _is_operand(value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (*NODE_TYPES, Variable, int, float, np.integer, np.floating))


def ensure_node(operand: Operand) -> Node:
    if isinstance(operand, NODE_TYPES):
        return operand
    if isinstance(operand, Variable):
        return VarNode(operand)
    # bool is an int subclass; a truth value is not a number here
    if isinstance(operand, (bool, np.bool_)):
        raise TypeError("boolean operands are not numeric expressions")
    if isinstance(operand, (int, float, np.integer, np.floating)):
        return ConstNode(float(operand))
    raise TypeError(f"Expression operand must be Node, Variable or number, got {type(operand)!r}")


def children(node: Node) -> tuple[Node, ...]:
    if isinstance(node, UnaryNode):
        return (node.operand,)
    if isinstance(node, BinaryNode):
        return (node.left, node.right)
    if isinstance(node, AssignNode):
        return (node.value,)
    return ()


def node_size(node: Node) -> int:
    if isinstance(node, AssignNode):
        return 2 + node_size(node.value)
    return 1 + sum(node_size(child) for child in children(node))


def node_depth(node: Node) -> int:
    kids = children(node)
    if kids:
        return 1 + max(node_depth(child) for child in kids)
    return 1


def iter_variables(node: Node) -> Iterator[Variable]:
    """Yield every referenced variable, assignment targets included, left to right."""

    if isinstance(node, VarNode):
        yield node.variable
    elif isinstance(node, AssignNode):
        yield node.target
        yield from iter_variables(node.value)
    else:
        for child in children(node):
            yield from iter_variables(child)


def is_pure(node: Node) -> bool:
    if isinstance(node, AssignNode):
        return False
    return all(is_pure(child) for child in children(node))
