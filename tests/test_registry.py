import math

import pytest

from rpncalc.calculator import Calculator
from rpncalc.extra.types import Function, Operator, Registry
from rpncalc.vars import default_registry


def test_default_priorities():
    registry = default_registry()
    assert [registry.priority(op) for op in "+-*/^"] == [1, 1, 2, 2, 3]


def test_unknown_symbol_priority():
    assert default_registry().priority("%") == 0
    assert Registry().priority("+") == 0


def test_registry_is_read_only():
    registry = default_registry()
    with pytest.raises(TypeError):
        registry.operators["%"] = Operator(2, lambda x, y: x % y)  # type: ignore
    with pytest.raises(TypeError):
        registry.functions["tan"] = Function(lambda args: math.tan(args[0]), 1)  # type: ignore


def test_registry_copies_tables():
    operators = {"+": Operator(1, lambda x, y: x + y)}
    registry = Registry.create(operators, {})
    operators["-"] = Operator(1, lambda x, y: x - y)
    assert "-" not in registry.operators


def test_custom_registry():
    registry = Registry.create(
        {
            "%": Operator(2, lambda x, y: math.fmod(x, y)),
            "+": Operator(1, lambda x, y: x + y),
        },
        {
            "max": Function(max, 2),
            "pi": Function(lambda args: math.pi, 0),
        }
    )
    calculator = Calculator(registry)
    assert calculator.calc("7 % 4 + 1") == 4.0
    assert calculator.calc("max(1, 5)") == 5.0
    assert calculator.calc("pi()") == math.pi


@pytest.mark.parametrize("operators, functions",
    [
        ({"**": Operator(3, pow)}, {}),
        ({"a": Operator(1, pow)}, {}),
        ({"1": Operator(1, pow)}, {}),
        ({"(": Operator(1, pow)}, {}),
        ({",": Operator(1, pow)}, {}),
        ({" ": Operator(1, pow)}, {}),
        ({}, {"1x": Function(sum, 1)}),
        ({}, {"my_func": Function(sum, 1)}),
        ({}, {"": Function(sum, 1)}),
        ({}, {"f": Function(sum, -1)}),
    ]
)
def test_invalid_registrations(operators, functions):
    with pytest.raises(ValueError):
        Registry.create(operators, functions)
