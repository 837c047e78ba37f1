from .builders import (
    add,
    add_assign,
    assign,
    const,
    div,
    div_assign,
    mul,
    mul_assign,
    negate,
    pos,
    sub,
    sub_assign,
    var,
)
from .interpreter import ASTInterpreter, DivisionByZeroError, StateBuffer
from .nodes import (
    AssignNode,
    AssignOp,
    BinaryNode,
    BinaryOp,
    ConstNode,
    Node,
    Operand,
    UnaryNode,
    UnaryOp,
    Variable,
    VarNode,
    ensure_node,
    is_pure,
    iter_variables,
    node_depth,
    node_size,
)
from .registry import OperatorRegistry, OperatorSpec, build_default_registry
from .render import ast_summary, render_const, render_expression
from .symbols import OutOfRangeError, SymbolTable
from .validate import ValidationError, ValidationLimits, validate_expression

__all__ = [
    "ASTInterpreter",
    "AssignNode",
    "AssignOp",
    "BinaryNode",
    "BinaryOp",
    "ConstNode",
    "DivisionByZeroError",
    "Node",
    "Operand",
    "OperatorRegistry",
    "OperatorSpec",
    "OutOfRangeError",
    "StateBuffer",
    "SymbolTable",
    "UnaryNode",
    "UnaryOp",
    "ValidationError",
    "ValidationLimits",
    "VarNode",
    "Variable",
    "add",
    "add_assign",
    "assign",
    "ast_summary",
    "build_default_registry",
    "const",
    "div",
    "div_assign",
    "ensure_node",
    "is_pure",
    "iter_variables",
    "mul",
    "mul_assign",
    "negate",
    "node_depth",
    "node_size",
    "pos",
    "render_const",
    "render_expression",
    "sub",
    "sub_assign",
    "validate_expression",
    "var",
]
