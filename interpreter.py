import re
import sys

from environment import Environment
from lexer import tokenize
from parser import parse
from statements import InStatement, OutStatement

INVALID_INPUT_MESSAGE = "Invalid input. Please enter an integer."

# Mesmo comportamento de stoi: espaços iniciais, sinal opcional, dígitos;
# o que vier depois dos dígitos é ignorado.
INTEGER_PREFIX = re.compile(r'[ \t\n\r\v\f]*([+-]?[0-9]+)')

def parse_integer(text):
    """Retorna o inteiro no início de `text` ou None se não houver."""
    match = INTEGER_PREFIX.match(text)
    if not match:
        return None
    return int(match.group(1))

class Interpreter:
    def __init__(self, program, input_stream=None, output_stream=None, error_stream=None):
        self.program = program
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self.error_stream = error_stream if error_stream is not None else sys.stderr
        self.environment = Environment()

    def resolve_target(self, target):
        if target in self.environment:
            return self.environment.get(target)
        return target

    def assign_input(self, var, text):
        """Guarda o valor lido em `var`; retorna False quando caiu no valor padrão."""
        value = parse_integer(text)
        if value is None:
            self.environment.set(var, Environment.FALLBACK)
            return False
        self.environment.set(var, str(value))
        return True

    def execute(self, stmt):
        if isinstance(stmt, OutStatement):
            for target in stmt.targets:
                print(self.resolve_target(target), file=self.output_stream)

        elif isinstance(stmt, InStatement):
            line = self.input_stream.readline()  # '' no fim da entrada
            if not self.assign_input(stmt.var, line):
                print(INVALID_INPUT_MESSAGE, file=self.error_stream)

        else:
            raise TypeError(f"Comando desconhecido: {stmt!r}")

    def run(self):
        self.environment = Environment()
        for stmt in self.program:
            self.execute(stmt)
        return self.environment

def run(statements, input_stream=None, output_stream=None, error_stream=None):
    return Interpreter(statements, input_stream, output_stream, error_stream).run()

def run_source(source, input_stream=None, output_stream=None, error_stream=None):
    # Todo o programa é analisado antes de qualquer comando ser executado.
    program = parse(tokenize(source))
    return run(program, input_stream, output_stream, error_stream)
