from asa import EvaluatorFn, Value
from asa.errors import (
    AsaDivisionByZero, AsaIntegerOverflow, AsaMalformedNode, AsaNegativeExponent, AsaTypeError,
)
from asa.types.node import MathExpression
from asa.types.runtime import Runtime
from asa.types.values import fits_i32, is_number, type_name


def _checked(op: str, result: int) -> int:
    if not fits_i32(result):
        raise AsaIntegerOverflow(f"{op} overflowed: {result} does not fit in a 32-bit integer")
    return result


def _divide(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise AsaDivisionByZero("Division by zero")
    # truncate toward zero, not toward negative infinity
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


def _power(base: int, exponent: int) -> int:
    """Repeated multiplication of base by itself, exponent times."""
    if exponent < 0:
        raise AsaNegativeExponent(f"Negative exponent {exponent}")
    if base in (-1, 0, 1):
        return base ** exponent
    result = 1
    for _ in range(exponent):
        result = _checked("^", result * base)
    return result


OPERATORS = {
    "+": lambda lhs, rhs: lhs + rhs,
    "-": lambda lhs, rhs: lhs - rhs,
    "*": lambda lhs, rhs: lhs * rhs,
    "/": _divide,
    "^": _power,
}


def math_form(node: MathExpression, runtime: Runtime, evaluate_fn: EvaluatorFn) -> Value:
    if len(node.children) != 2:
        raise AsaMalformedNode(f"{node.name} requires exactly 2 operands")
    operator = OPERATORS.get(node.name)
    if operator is None:
        raise AsaMalformedNode(f"Undefined operator {node.name}")

    lhs = evaluate_fn(node.children[0], runtime)
    rhs = evaluate_fn(node.children[1], runtime)
    if not (is_number(lhs) and is_number(rhs)):
        raise AsaTypeError(f"Cannot do math on {type_name(lhs)} and {type_name(rhs)}")
    return _checked(node.name, operator(lhs, rhs))
