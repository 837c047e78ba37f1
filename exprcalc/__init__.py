"""Public package API for exprcalc."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("exprcalc")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

from .ast import (
    AssignNode,
    AssignOp,
    BinaryNode,
    BinaryOp,
    ConstNode,
    DivisionByZeroError,
    Node,
    OutOfRangeError,
    SymbolTable,
    UnaryNode,
    UnaryOp,
    ValidationError,
    Variable,
    VarNode,
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
from .config import EngineConfig
from .engine import ExpressionEngine, evaluate, render
from .models import VariableDeclaration

__all__ = [
    "__version__",
    "AssignNode",
    "AssignOp",
    "BinaryNode",
    "BinaryOp",
    "ConstNode",
    "DivisionByZeroError",
    "EngineConfig",
    "ExpressionEngine",
    "Node",
    "OutOfRangeError",
    "SymbolTable",
    "UnaryNode",
    "UnaryOp",
    "ValidationError",
    "VarNode",
    "Variable",
    "VariableDeclaration",
    "add",
    "add_assign",
    "assign",
    "const",
    "div",
    "div_assign",
    "evaluate",
    "mul",
    "mul_assign",
    "negate",
    "pos",
    "render",
    "sub",
    "sub_assign",
    "var",
]
