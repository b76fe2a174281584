"""Registry of node forms for the asa evaluator.

Maps each AST node class to the handler that evaluates it. Every handler has
the signature handler(node, runtime, evaluate_fn) -> Value.
"""

from asa.types.node import (
    Bool, Conditional, Expression, FunctionCall, FunctionDefine, FunctionReturn,
    Identifier, IfStatement, MathExpression, Number, Program, Statement, String,
    VariableDefine,
)
from asa.evaluation.node_forms.program_form import program_form
from asa.evaluation.node_forms.math_form import math_form
from asa.evaluation.node_forms.conditional_form import conditional_form
from asa.evaluation.node_forms.call_form import call_form
from asa.evaluation.node_forms.if_form import if_form
from asa.evaluation.node_forms.define_forms import function_define_form, variable_define_form
from asa.evaluation.node_forms.wrapper_forms import expression_form, return_form, statement_form
from asa.evaluation.node_forms.literal_forms import identifier_form, literal_form

NODE_FORMS = {
    Program: program_form,
    MathExpression: math_form,
    Conditional: conditional_form,
    FunctionCall: call_form,
    IfStatement: if_form,
    FunctionDefine: function_define_form,
    FunctionReturn: return_form,
    Identifier: identifier_form,
    VariableDefine: variable_define_form,
    Statement: statement_form,
    Expression: expression_form,
    Number: literal_form,
    Bool: literal_form,
    String: literal_form,
}
