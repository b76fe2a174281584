from __future__ import annotations


class AsaError(Exception):
    """ Base class for all asa errors"""
    pass


class AsaSyntaxError(AsaError):
    """ Raised when source text cannot be turned into a tree"""


class AsaParseError(AsaSyntaxError):
    """ Raised when the parse must be abandoned (malformed literal, unparsed input)"""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        remaining: str | None = None,
    ):
        self.message = message
        if line is not None:
            message = f"{message} at line {line}, col {column}"
        super().__init__(message)
        self.line = line
        self.column = column
        # unparsed text at the point of failure; the reader turns it into line/column
        self.remaining = remaining


class AsaEvaluationError(AsaError):
    """ Base class for errors raised while walking the tree"""


class AsaTypeError(AsaEvaluationError):
    """ Raised when an operator receives values of the wrong type"""


class AsaConditionError(AsaTypeError):
    """ Raised when an if-condition does not evaluate to a Bool"""


class AsaUnboundVariable(AsaEvaluationError):
    """ Raised when a variable is not bound in the current frame"""


class AsaUndefinedFunction(AsaEvaluationError):
    """ Raised when a called function was never defined"""


class AsaMalformedNode(AsaEvaluationError):
    """ Raised when a node does not have the shape the evaluator expects"""


class AsaEmptyIf(AsaEvaluationError):
    """ Raised when an if-statement's condition is false and nothing else produced a value"""

    def __init__(self, message: str, node=None):
        super().__init__(message)
        # the IfStatement whose condition was false
        self.node = node


class AsaArityError(AsaEvaluationError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class AsaArithmeticError(AsaEvaluationError):
    """ Base class for integer arithmetic failures"""


class AsaDivisionByZero(AsaArithmeticError):
    """ Raised when dividing by zero"""


class AsaNegativeExponent(AsaArithmeticError):
    """ Raised when raising to a negative power"""


class AsaIntegerOverflow(AsaArithmeticError):
    """ Raised when a result does not fit in a signed 32-bit integer"""
