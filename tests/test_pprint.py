from asa.debug_utils.pprint import (
    COLOR_OPERATOR, DEFAULT_OPTIONS, RESET, colorize, load_options_from_json, plain_options,
    pprint_node,
)
from asa.reader import parse_program
from asa.types.node import Bool, MathExpression, Number


def test_plain_tree():
    tree = parse_program("1 + 2")
    assert pprint_node(tree, plain_options()) == (
        "Program\n"
        "  Expression\n"
        "    MathExpression +\n"
        "      Number 1\n"
        "      Number 2"
    )


def test_colored_label():
    label = colorize(MathExpression("+", (Number(1), Number(2))))
    assert label == f"{COLOR_OPERATOR}MathExpression +{RESET}"


def test_bool_label_uses_source_spelling():
    assert colorize(Bool(False), plain_options()) == "Bool false"


def test_indent_and_depth_options():
    tree = parse_program("1 + 2")
    options = {**plain_options(), "indent": 4, "max_depth": 2}
    assert pprint_node(tree, options) == (
        "Program\n"
        "    Expression\n"
        "        ..."
    )


def test_legend_only_on_first_line():
    tree = parse_program("1")
    out = pprint_node(tree, {**DEFAULT_OPTIONS, "display_legend": True})
    assert out.startswith("Color Key: ")
    assert out.count("Color Key: ") == 1


def test_load_options_from_json():
    assert load_options_from_json('{"indent": 4}')["indent"] == 4
    assert load_options_from_json('{"indent": 4}')["max_depth"] == DEFAULT_OPTIONS["max_depth"]
    assert load_options_from_json("not json") == DEFAULT_OPTIONS
    assert load_options_from_json("[1, 2]") == DEFAULT_OPTIONS


def test_plain_options_keeps_other_settings():
    options = plain_options(load_options_from_json('{"indent": 3, "color_literals": true}'))
    assert options["indent"] == 3
    assert not any(value for key, value in options.items() if key.startswith("color_"))
