import pytest
from hypothesis import given, strategies as st

from asa.errors import AsaParseError
from asa.reader.combinators import NoMatch
from asa.reader.parser import (
    boolean, conditional, expression, function_call, function_definition, function_return,
    identifier, if_statement, math_expression, number, parse_program, statement, string,
    variable_define,
)
from asa.types.node import (
    Bool, Conditional, Expression, FunctionArguments, FunctionCall, FunctionDefine,
    FunctionReturn, Identifier, IfStatement, MathExpression, Number, Program, Statement,
    String, VariableDefine,
)


def num(n):
    return Number(n)


def expr(node):
    return Expression((node,))


@pytest.mark.parametrize(
    "parser,source,expected",
    [
        (identifier, "  abc rest", (Identifier("abc"), " rest")),
        (identifier, "x1(", (Identifier("x1"), "(")),
        (number, "42;", (Number(42), ";")),
        (number, "007", (Number(7), "")),
        (boolean, "true)", (Bool(True), ")")),
        (boolean, "false", (Bool(False), "")),
        (string, '"hi there"x', (String("hi there"), "x")),
        (string, '""', (String(""), "")),
    ]
)
def test_literals(parser, source, expected):
    assert parser(source) == expected


@pytest.mark.parametrize(
    "parser,source",
    [
        (number, " 1"),           # numbers do not skip spaces
        (number, "x"),
        (boolean, "True"),
        (string, '"open'),
        (string, "plain"),
        (identifier, "   "),
        (function_call, "f(1,)"),  # no trailing comma
        (function_call, "f (1)"),
    ]
)
def test_no_match(parser, source):
    with pytest.raises(NoMatch):
        parser(source)


def test_number_out_of_range_is_fatal():
    with pytest.raises(AsaParseError):
        number("2147483648")
    assert number("2147483647") == (Number(2147483647), "")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("x", Identifier("x")),
        ("1 + 2 + 3", MathExpression("+", (num(1), MathExpression("+", (num(2), num(3)))))),
        ("10 - 3 - 2", MathExpression("-", (num(10), MathExpression("-", (num(3), num(2)))))),
        ("1 + 2 * 3", MathExpression("+", (num(1), MathExpression("*", (num(2), num(3)))))),
        ("(1 + 2) * 3", MathExpression("*", (MathExpression("+", (num(1), num(2))), num(3)))),
        ("2 ^ 3 * 4", MathExpression("*", (MathExpression("^", (num(2), num(3))), num(4)))),
        ("2^3", MathExpression("^", (num(2), num(3)))),
        ("f(1) + a", MathExpression("+", (
            FunctionCall("f", (FunctionArguments((expr(num(1)),)),)), Identifier("a")))),
    ]
)
def test_math_expression(source, expected):
    node, rest = math_expression(source)
    assert rest == ""
    assert node == expected


def test_math_expression_does_not_skip_tabs():
    node, rest = math_expression("1 +\t2")
    assert node == num(1)
    assert rest == " +\t2"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("5", expr(num(5))),
        ('"s"', expr(String("s"))),
        ("true", expr(Bool(True))),
        ("f(1, 2)", expr(FunctionCall("f", (FunctionArguments((expr(num(1)), expr(num(2)))),)))),
        ("g()", expr(FunctionCall("g", (FunctionArguments(()),)))),
    ]
)
def test_expression(source, expected):
    assert expression(source) == (expected, "")


def test_conditional():
    node, rest = conditional("a != 2)")
    assert rest == ")"
    assert node == Conditional("!=", (expr(Identifier("a")), expr(num(2))))


def test_variable_define():
    node, rest = variable_define("let x = 1 + 2;")
    assert rest == ""
    assert node == VariableDefine((Identifier("x"), expr(MathExpression("+", (num(1), num(2))))))


def test_variable_define_requires_semicolon():
    with pytest.raises(NoMatch):
        variable_define("let x = 1")


def test_function_return_prefers_bare_call():
    node, rest = function_return("return f();")
    assert rest == ""
    assert node == FunctionReturn((FunctionCall("f", (FunctionArguments(()),)),))


def test_call_statement_accepts_optional_semicolon():
    call = FunctionCall("print", (FunctionArguments((expr(Identifier("x")),)),))
    assert statement("print(x);\n\tnext") == (Statement((call,)), "next")
    assert statement("print(x)\nnext") == (Statement((call,)), "next")


def test_if_statement():
    node, rest = if_statement("if (a == 1) {\n  return 2;\n}")
    assert rest == ""
    assert node == IfStatement((
        Conditional("==", (expr(Identifier("a")), expr(num(1)))),
        Statement((FunctionReturn((expr(num(2)),)),)),
    ))


def test_if_statement_requires_a_body():
    with pytest.raises(NoMatch):
        if_statement("if (a == 1) { }")


def test_function_definition():
    node, rest = function_definition("fn add(a, b) { return a + b; }\n")
    assert rest == ""
    assert node == FunctionDefine((
        Identifier("add"),
        FunctionArguments((expr(Identifier("a")), expr(Identifier("b")))),
        Statement((FunctionReturn((expr(MathExpression("+", (Identifier("a"), Identifier("b")))),)),)),
    ))


def test_parse_program_mixes_functions_and_statements():
    source = "fn id(x){ return x; }\n\nid(42)\n"
    tree = parse_program(source)
    assert isinstance(tree, Program)
    assert [type(child) for child in tree.children] == [FunctionDefine, Statement]


def test_parse_program_bare_expression():
    assert parse_program("1 + 2") == Program((expr(MathExpression("+", (num(1), num(2)))),))


@pytest.mark.parametrize(
    "source,line,column",
    [
        ("", 1, 1),
        ("   \n", 2, 1),
        ('"unterminated', 1, 1),
        ("fn f() { return 1; }\n}", 2, 1),
        ("1 + 2 )", 1, 7),
        ("99999999999", 1, 1),
        ("fn f(a) {\n  let x = 1;\n}}", 3, 2),
        ("1 +\t2", 1, 3),
    ]
)
def test_parse_program_errors(source, line, column):
    with pytest.raises(AsaParseError) as exc:
        parse_program(source)
    assert (exc.value.line, exc.value.column) == (line, column)


def test_parse_error_message_has_location():
    with pytest.raises(AsaParseError, match=r"at line 2, col 1"):
        parse_program("print(1)\n)")


@given(st.integers(min_value=0, max_value=2 ** 31 - 1))
def test_number_literals_in_range(n):
    assert number(str(n)) == (Number(n), "")


@given(st.integers(min_value=2 ** 31, max_value=10 ** 30))
def test_number_literals_out_of_range(n):
    with pytest.raises(AsaParseError):
        parse_program(str(n))
