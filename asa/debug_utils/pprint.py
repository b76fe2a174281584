import json

from asa.types.node import (
    Bool, Conditional, Expression, FunctionArguments, FunctionCall, FunctionDefine,
    FunctionReturn, Identifier, IfStatement, MathExpression, Node, Number, Program,
    Statement, String, VariableDefine,
)

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_STRUCTURE = "\033[90m"
COLOR_STATEMENT = "\033[94m"
COLOR_EXPRESSION = "\033[96m"
COLOR_OPERATOR = "\033[93m"
COLOR_IDENTIFIER = "\033[92m"
COLOR_LITERAL = "\033[95m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "indent": 2,
    "max_depth": 64,
    "display_legend": False,
    "color_structure": True,
    "color_statements": True,
    "color_expressions": True,
    "color_operators": True,
    "color_identifiers": True,
    "color_literals": True,
}

STRUCTURE_NODES = (Program, FunctionArguments)
STATEMENT_NODES = (Statement, FunctionDefine, FunctionReturn, IfStatement, VariableDefine)
EXPRESSION_NODES = (Expression, FunctionCall)
OPERATOR_NODES = (MathExpression, Conditional)
LITERAL_NODES = (Number, Bool, String)


# ----------------- Colorize utility -----------------
def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{RESET}" if enabled else text


def colorize(node: Node, options: dict = DEFAULT_OPTIONS) -> str:
    """Label for one node: its kind plus its name or literal value."""
    label = type(node).__name__
    if isinstance(node, (MathExpression, Conditional, FunctionCall)):
        label = f"{label} {node.name}"
    elif isinstance(node, String):
        label = f'{label} "{node.value}"'
    elif isinstance(node, Bool):
        label = f"{label} {'true' if node.value else 'false'}"
    elif isinstance(node, (Number, Identifier)):
        label = f"{label} {node.value}"

    if isinstance(node, STRUCTURE_NODES):
        return _paint(label, COLOR_STRUCTURE, options.get("color_structure", True))
    if isinstance(node, STATEMENT_NODES):
        return _paint(label, COLOR_STATEMENT, options.get("color_statements", True))
    if isinstance(node, OPERATOR_NODES):
        return _paint(label, COLOR_OPERATOR, options.get("color_operators", True))
    if isinstance(node, EXPRESSION_NODES):
        return _paint(label, COLOR_EXPRESSION, options.get("color_expressions", True))
    if isinstance(node, Identifier):
        return _paint(label, COLOR_IDENTIFIER, options.get("color_identifiers", True))
    if isinstance(node, LITERAL_NODES):
        return _paint(label, COLOR_LITERAL, options.get("color_literals", True))
    return label


def _children(node: Node) -> tuple:
    return getattr(node, "children", ())


# ----------------- Pretty printer -----------------
def pprint_node(node: Node, options: dict = DEFAULT_OPTIONS, _depth: int = 0) -> str:
    """Render a tree one node per line, children indented under their parent."""
    legend_str = ""
    if options.get("display_legend", False) and _depth == 0:
        legend_items = [
            f"{COLOR_STRUCTURE}Structure{RESET}",
            f"{COLOR_STATEMENT}Statement{RESET}",
            f"{COLOR_EXPRESSION}Expression{RESET}",
            f"{COLOR_OPERATOR}Operator{RESET}",
            f"{COLOR_IDENTIFIER}Identifier{RESET}",
            f"{COLOR_LITERAL}Literal{RESET}",
        ]
        legend_str = "Color Key: " + " | ".join(legend_items) + "\n"

    pad = " " * (options.get("indent", 2) * _depth)
    if _depth >= options.get("max_depth", 64):
        return legend_str + pad + "..."

    lines = [pad + colorize(node, options)]
    for child in _children(node):
        lines.append(pprint_node(child, options, _depth + 1))
    return legend_str + "\n".join(lines)


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return dict(DEFAULT_OPTIONS)
    if not isinstance(user_opts, dict):
        return dict(DEFAULT_OPTIONS)
    return {**DEFAULT_OPTIONS, **user_opts}


def plain_options(options: dict = DEFAULT_OPTIONS) -> dict:
    """`options` with every color switched off, for logs and redirected output."""
    return {key: (False if key.startswith("color_") else value) for key, value in options.items()}
