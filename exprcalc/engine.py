"""Evaluation and rendering entry points built on the AST package."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .ast.interpreter import ASTInterpreter, StateBuffer
from .ast.nodes import Operand, Variable, ensure_node
from .ast.registry import OperatorRegistry, build_default_registry
from .ast.render import render_expression
from .ast.symbols import SymbolTable, check_index
from .ast.validate import ValidationLimits, validate_expression
from .config import EngineConfig
from .models import VariableDeclaration

logger = logging.getLogger(__name__)


def _limits(config: EngineConfig) -> ValidationLimits:
    return ValidationLimits(max_depth=config.max_ast_depth, max_nodes=config.max_ast_nodes)


def evaluate(
    node: Operand, state: StateBuffer, config: EngineConfig | None = None
) -> float:
    """Evaluate ``node`` against ``state``, writing through any assignment nodes."""

    interpreter = ASTInterpreter(limits=_limits(config or EngineConfig()))
    return interpreter.evaluate(node, state)


def render(node: Operand, symbols: SymbolTable, config: EngineConfig | None = None) -> str:
    """Render ``node`` as flat infix text using names from ``symbols``."""

    cfg = config or EngineConfig()
    root = validate_expression(ensure_node(node), _limits(cfg))
    return render_expression(root, symbols, constant_format=cfg.constant_format)


@dataclass
class ExpressionEngine:
    """A symbol table paired with the one state buffer it seeds.

    Attributes:
        config: Depth/node limits and constant formatting.
        registry: Operator table shared by evaluation and rendering.
        symbols: Names of every declared variable, in index order.
        state: Current variable values; grows by one slot per declaration.
            A declaration replaces the array, so re-read ``engine.state`` after
            declaring rather than holding an older reference. ``reset`` and
            evaluation update it in place.

    Invariants:
        - ``len(state) == len(symbols)`` after every public call.
        - Evaluation is serialized by the caller; the engine holds no lock.

    Typical usage:
        >>> engine = ExpressionEngine()
        >>> a = engine.declare("a", 2.0)
        >>> c = engine.declare("c", 0.0)
        >>> engine.evaluate(assign(c, add(a, 1)))
        3.0
        >>> engine.render(assign(c, add(a, 1)))
        'c<<=a+1'
    """

    config: EngineConfig = field(default_factory=EngineConfig)
    registry: OperatorRegistry = field(default_factory=build_default_registry)
    symbols: SymbolTable = field(default_factory=SymbolTable)
    state: np.ndarray = field(init=False)
    interpreter: ASTInterpreter = field(init=False)

    def __post_init__(self) -> None:
        self.state = self.symbols.initial_state()
        self.interpreter = ASTInterpreter(self.registry, limits=_limits(self.config))

    def declare(self, name: str, initial: float = 0.0) -> Variable:
        variable = self.symbols.declare(name, initial)
        self.state = np.append(self.state, np.float64(initial))
        return variable

    def declare_all(
        self, declarations: Iterable[VariableDeclaration | Mapping[str, Any]]
    ) -> list[Variable]:
        variables = self.symbols.declare_all(declarations)
        self.state = np.concatenate(
            [self.state, self.symbols.initial_state()[len(self.state) :]]
        )
        return variables

    def evaluate(self, node: Operand) -> float:
        return self.interpreter.evaluate(node, self.state)

    def render(self, node: Operand) -> str:
        root = validate_expression(ensure_node(node), _limits(self.config))
        return render_expression(
            root,
            self.symbols,
            constant_format=self.config.constant_format,
            registry=self.registry,
        )

    def value_of(self, variable: Variable) -> float:
        check_index(variable.index, len(self.state), "state buffer")
        return float(self.state[variable.index])

    def reset(self) -> None:
        """Restore every variable to its declared initial value."""

        self.state[:] = self.symbols.initial_state()
        logger.debug("Reset %d variables to initial values", len(self.state))

    def snapshot(self) -> dict[str, float]:
        """Map names to current values; a repeated name keeps its first slot."""

        out: dict[str, float] = {}
        for name, value in zip(self.symbols.names, self.state):
            out.setdefault(name, float(value))
        return out
