from __future__ import annotations

import logging
from collections.abc import MutableSequence
from dataclasses import dataclass

import numpy as np

from .nodes import (
    AssignNode,
    BinaryNode,
    BinaryOp,
    ConstNode,
    Node,
    Operand,
    UnaryNode,
    VarNode,
    ensure_node,
)
from .registry import OperatorRegistry, build_default_registry
from .symbols import check_index
from .validate import ValidationLimits, validate_expression

logger = logging.getLogger(__name__)

StateBuffer = MutableSequence[float] | np.ndarray


@dataclass(slots=True)
class DivisionByZeroError(ZeroDivisionError):
    path: str
    message: str = "division by zero"

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class ASTInterpreter:
    """Reduce expression trees to floats against a caller-owned state buffer.

    Only ``AssignNode`` writes to the buffer. Operands are evaluated left to
    right, an assignment's value before its target is read. Nothing is
    memoized, so a tree evaluated twice sees any change made to the buffer in
    between.
    """

    def __init__(
        self,
        registry: OperatorRegistry | None = None,
        limits: ValidationLimits | None = None,
    ):
        self.registry = registry or build_default_registry()
        self.limits = limits

    def _read(self, state: StateBuffer, index: int, path: str) -> float:
        check_index(index, len(state), "state buffer", path)
        return float(state[index])

    def _binary(self, node: BinaryNode, state: StateBuffer, path: str) -> float:
        spec = self.registry.binary(node.op)
        left = self._eval(node.left, state, f"{path}.left")
        right = self._eval(node.right, state, f"{path}.right")
        if node.op == BinaryOp.DIV and right == 0:
            raise DivisionByZeroError(path)
        return float(spec.fn(left, right))

    def _assign(self, node: AssignNode, state: StateBuffer, path: str) -> float:
        spec = self.registry.assign(node.op)
        value = self._eval(node.value, state, f"{path}.value")
        current = self._read(state, node.target.index, f"{path}.target")
        result = float(spec.fn(current, value))
        state[node.target.index] = result
        logger.debug("%s: slot %d %s %r -> %r", path, node.target.index, spec.symbol, value, result)
        return result

    def _eval(self, node: Node, state: StateBuffer, path: str) -> float:
        if isinstance(node, ConstNode):
            return float(node.value)
        if isinstance(node, VarNode):
            return self._read(state, node.variable.index, path)
        if isinstance(node, UnaryNode):
            spec = self.registry.unary(node.op)
            return float(spec.fn(self._eval(node.operand, state, f"{path}.operand")))
        if isinstance(node, BinaryNode):
            return self._binary(node, state, path)
        if isinstance(node, AssignNode):
            return self._assign(node, state, path)
        raise TypeError(f"{path}: unsupported node {type(node)!r}")

    def evaluate(self, node: Operand, state: StateBuffer) -> float:
        root = ensure_node(node)
        if self.limits is not None:
            validate_expression(root, self.limits)
        return self._eval(root, state, "root")
