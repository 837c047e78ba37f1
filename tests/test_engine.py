"""Regression tests for the engine facade and module-level entry points."""

from __future__ import annotations

import logging

import numpy as np
import pytest

import exprcalc
from exprcalc import (
    DivisionByZeroError,
    EngineConfig,
    ExpressionEngine,
    OutOfRangeError,
    SymbolTable,
    ValidationError,
    Variable,
    VariableDeclaration,
    add,
    add_assign,
    assign,
    div,
    evaluate,
    mul,
    negate,
    render,
    sub,
)


def test_end_to_end_scenario() -> None:
    engine = ExpressionEngine()
    a = engine.declare("a", 2)
    b = engine.declare("b", 3)
    c = engine.declare("c", 0)

    assert engine.evaluate(assign(c, sub(b, a))) == 1.0
    assert engine.value_of(c) == 1.0

    step = add_assign(c, sub(b, mul(a, c)))
    assert engine.render(step) == "c+=b-a*c"
    assert engine.evaluate(step) == 2.0
    assert engine.value_of(c) == 2.0
    assert engine.evaluate(step) == 1.0
    assert engine.value_of(c) == 1.0


def test_division_by_zero_leaves_state_unchanged() -> None:
    engine = ExpressionEngine()
    a = engine.declare("a", 2)
    c = engine.declare("c", 0)
    with pytest.raises(DivisionByZeroError):
        engine.evaluate(div(a, c))
    assert engine.snapshot() == {"a": 2.0, "c": 0.0}


def test_state_grows_with_declarations() -> None:
    engine = ExpressionEngine()
    assert engine.state.shape == (0,)
    engine.declare("x", 1.5)
    engine.declare("y")
    assert engine.state.dtype == np.float64
    assert engine.state.tolist() == [1.5, 0.0]
    assert len(engine.symbols) == 2


def test_declare_all_extends_state() -> None:
    engine = ExpressionEngine()
    engine.declare("a", 1)
    b, c = engine.declare_all([VariableDeclaration(name="b", initial=2), {"name": "c"}])
    assert engine.state.tolist() == [1.0, 2.0, 0.0]
    assert engine.render(add(b, c)) == "b+c"


def test_reset_restores_initial_values() -> None:
    engine = ExpressionEngine()
    a = engine.declare("a", 2)
    engine.evaluate(assign(a, 40))
    assert engine.value_of(a) == 40.0
    held = engine.state
    engine.reset()
    assert engine.value_of(a) == 2.0
    assert held[a.index] == 2.0


def test_snapshot_keeps_first_of_repeated_names() -> None:
    engine = ExpressionEngine()
    engine.declare("x", 1)
    engine.declare("x", 2)
    assert engine.snapshot() == {"x": 1.0}


def test_value_of_unknown_variable() -> None:
    engine = ExpressionEngine()
    with pytest.raises(OutOfRangeError):
        engine.value_of(Variable(0))


def test_engine_over_existing_table() -> None:
    table = SymbolTable()
    a = table.declare("a", 4)
    engine = ExpressionEngine(symbols=table)
    assert engine.evaluate(negate(a)) == -4.0


def test_config_limits_apply() -> None:
    engine = ExpressionEngine(config=EngineConfig(max_ast_nodes=2))
    a = engine.declare("a", 1)
    with pytest.raises(ValidationError, match="max_nodes"):
        engine.evaluate(add(a, a))


def test_config_constant_format() -> None:
    engine = ExpressionEngine(config=EngineConfig(constant_format=".1f"))
    a = engine.declare("a", 1)
    assert engine.render(mul(a, 3)) == "a*3.0"


def test_module_level_evaluate_and_render() -> None:
    table = SymbolTable()
    a = table.declare("a", 2)
    b = table.declare("b", 3)
    state = table.initial_state()

    assert evaluate(assign(a, add(b, 2)), state) == 5.0
    assert state[a.index] == 5.0
    assert render(assign(a, add(b, 2)), table) == "a<<=b+2"
    assert render(add(a, 0.25), table, EngineConfig(constant_format=".3g")) == "a+0.25"


def test_module_level_evaluate_rejects_overly_deep_trees() -> None:
    tree = add(1, 1)
    for _ in range(300):
        tree = negate(tree)
    with pytest.raises(ValidationError):
        evaluate(tree, [])


def _balanced(levels: int):
    if levels == 0:
        return add(1, 1)
    return add(_balanced(levels - 1), _balanced(levels - 1))


def test_wide_shallow_tree_is_not_capped_by_default() -> None:
    tree = _balanced(14)
    assert evaluate(tree, []) == 32768.0
    assert render(tree, SymbolTable()).count("+") == 32767


def test_node_cap_is_opt_in() -> None:
    with pytest.raises(ValidationError, match="max_nodes"):
        evaluate(_balanced(3), [], EngineConfig(max_ast_nodes=10))


def test_module_level_render_rejects_overly_deep_trees() -> None:
    tree = add(1, 1)
    for _ in range(1200):
        tree = negate(tree)
    with pytest.raises(ValidationError, match="max_depth"):
        render(tree, SymbolTable())
    with pytest.raises(ValidationError):
        ExpressionEngine().render(tree)


def test_assignment_writes_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    engine = ExpressionEngine()
    a = engine.declare("a", 1)
    with caplog.at_level(logging.DEBUG, logger="exprcalc"):
        engine.evaluate(assign(a, 3))
    assert any("<<=" in record.getMessage() for record in caplog.records)


def test_version_is_a_string() -> None:
    assert isinstance(exprcalc.__version__, str)
