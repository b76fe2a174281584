from __future__ import annotations

from asa import Value
from asa.evaluation.evaluator import execute
from asa.reader.parser import parse_program
from asa.types.node import Program
from asa.types.runtime import Runtime


class Interpreter:
    """
    Orchestrates reading and evaluating asa programs.
    Each run gets a fresh Runtime; the last one stays available for inspection.
    """

    def __init__(self):
        self.runtime: Runtime = Runtime()

    def parse(self, code: str) -> Program:
        return parse_program(code)

    def run(self, program: Program) -> Value:
        self.runtime = Runtime()
        return execute(program, self.runtime)

    def eval(self, code: str) -> Value:
        return self.run(self.parse(code))


def run(program: Program) -> Value:
    """Evaluate an already parsed program with a fresh runtime."""
    return execute(program)
