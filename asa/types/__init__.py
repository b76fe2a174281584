from asa.types.node import (
    Node, Program, Statement, FunctionDefine, FunctionArguments, FunctionReturn,
    IfStatement, Conditional, Expression, MathExpression, FunctionCall,
    VariableDefine, Identifier, Number, Bool, String,
)
from asa.types.function import Function
from asa.types.call_stack import CallStack
from asa.types.runtime import Runtime
