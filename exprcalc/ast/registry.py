from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from .nodes import AssignOp, BinaryOp, UnaryOp


@dataclass(frozen=True, slots=True)
class OperatorSpec:
    """Immutable descriptor for one operator tag.

    Attributes:
        op: The enum tag stored on the node.
        symbol: Text emitted by the renderer between (or before) operands.
        fn: Arithmetic applied by the interpreter. Unary operators take one
            float, binary and assignment operators take two.
    """

    op: UnaryOp | BinaryOp | AssignOp
    symbol: str
    fn: Callable[..., float]


def _ieee_divide(lhs: float, rhs: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(lhs), np.float64(rhs)))


def _replace(_current: float, value: float) -> float:
    return value


class OperatorRegistry:
    """Lookup of symbol and arithmetic for every unary, binary and assignment tag.

    Typical usage::

        registry = build_default_registry()
        registry.binary(BinaryOp.MUL).symbol    # "*"
        registry.assign(AssignOp.ASSIGN).symbol # "<<="
    """

    def __init__(
        self,
        unary: dict[UnaryOp, OperatorSpec],
        binary: dict[BinaryOp, OperatorSpec],
        assign: dict[AssignOp, OperatorSpec],
    ):
        self._unary = unary
        self._binary = binary
        self._assign = assign

    @staticmethod
    def _lookup(table: dict, op: object, kind: str) -> OperatorSpec:
        try:
            return table[op]
        except KeyError:
            raise KeyError(f"Unknown {kind} operator: {op!r}") from None

    def unary(self, op: UnaryOp) -> OperatorSpec:
        return self._lookup(self._unary, op, "unary")

    def binary(self, op: BinaryOp) -> OperatorSpec:
        return self._lookup(self._binary, op, "binary")

    def assign(self, op: AssignOp) -> OperatorSpec:
        return self._lookup(self._assign, op, "assignment")

    def symbols(self) -> list[str]:
        specs = [*self._unary.values(), *self._binary.values(), *self._assign.values()]
        return [spec.symbol for spec in specs]


@lru_cache(maxsize=1)
def build_default_registry() -> OperatorRegistry:
    unary = {
        UnaryOp.PLUS: OperatorSpec(UnaryOp.PLUS, "", operator.pos),
        UnaryOp.MINUS: OperatorSpec(UnaryOp.MINUS, "-", operator.neg),
    }
    binary = {
        BinaryOp.PLUS: OperatorSpec(BinaryOp.PLUS, "+", operator.add),
        BinaryOp.MINUS: OperatorSpec(BinaryOp.MINUS, "-", operator.sub),
        BinaryOp.MUL: OperatorSpec(BinaryOp.MUL, "*", operator.mul),
        BinaryOp.DIV: OperatorSpec(BinaryOp.DIV, "/", operator.truediv),
    }
    # "<<=" marks plain assignment so it never reads as an equality test
    assign = {
        AssignOp.ASSIGN: OperatorSpec(AssignOp.ASSIGN, "<<=", _replace),
        AssignOp.PLUS: OperatorSpec(AssignOp.PLUS, "+=", operator.add),
        AssignOp.MINUS: OperatorSpec(AssignOp.MINUS, "-=", operator.sub),
        AssignOp.MUL: OperatorSpec(AssignOp.MUL, "*=", operator.mul),
        AssignOp.DIV: OperatorSpec(AssignOp.DIV, "/=", _ieee_divide),
    }
    return OperatorRegistry(unary=unary, binary=binary, assign=assign)
