from __future__ import annotations

import logging
from dataclasses import dataclass

from .nodes import NODE_TYPES, AssignNode, BinaryNode, Node, UnaryNode, Variable, VarNode

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ValidationError(ValueError):
    """Raised when an expression tree breaks a structural limit.

    Attributes:
        code: Short machine-readable error code (``"max_depth"``,
            ``"max_nodes"``, ``"unknown_variable"`` or ``"invalid_node"``).
        path: Dot-separated path to the offending node
            (e.g. ``"root.left.operand"``).
        message: Human-readable description of the violation.
    """

    code: str
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.code} at {self.path}: {self.message}"


@dataclass(slots=True)
class ValidationLimits:
    """Structural constraints checked by :func:`validate_expression`.

    Attributes:
        max_depth: Maximum nesting depth (root counts as depth 1). Traversals
            recurse once per level, so this keeps them clear of the
            interpreter's recursion limit. Default: 256.
        max_nodes: Maximum node count, or ``None`` for no cap; an assignment
            target counts as one node. Default: ``None``.
        state_size: If set, every referenced variable index must be below it.
    """

    max_depth: int = 256
    max_nodes: int | None = None
    state_size: int | None = None


def validate_expression(node: Node, limits: ValidationLimits | None = None) -> Node:
    lim = limits or ValidationLimits()
    counter = {"n": 0}

    def _check_variable(variable: Variable, path: str) -> None:
        counter["n"] += 1
        if lim.state_size is not None and not 0 <= variable.index < lim.state_size:
            raise ValidationError(
                "unknown_variable",
                path,
                f"variable index {variable.index} is outside a state of size {lim.state_size}",
            )

    def _walk(node_: Node, path: str, depth: int) -> None:
        if depth > lim.max_depth:
            raise ValidationError("max_depth", path, f"depth {depth} exceeds {lim.max_depth}")
        if not isinstance(node_, NODE_TYPES):
            raise ValidationError("invalid_node", path, f"unsupported node {type(node_)!r}")

        if isinstance(node_, VarNode):
            _check_variable(node_.variable, path)
        else:
            counter["n"] += 1
        if lim.max_nodes is not None and counter["n"] > lim.max_nodes:
            raise ValidationError("max_nodes", path, f"node count exceeds {lim.max_nodes}")

        if isinstance(node_, UnaryNode):
            _walk(node_.operand, f"{path}.operand", depth + 1)
        elif isinstance(node_, BinaryNode):
            _walk(node_.left, f"{path}.left", depth + 1)
            _walk(node_.right, f"{path}.right", depth + 1)
        elif isinstance(node_, AssignNode):
            _check_variable(node_.target, f"{path}.target")
            _walk(node_.value, f"{path}.value", depth + 1)

    _walk(node, "root", 1)
    logger.debug("Validated expression: %d nodes", counter["n"])
    return node
