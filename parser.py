from lexer import TokenType
from statements import InStatement, OutStatement, Program
from errors import ParseError

OUT_TARGETS = (TokenType.STRING_LITERAL, TokenType.VAR_NAME)

class Parser:
    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.pos = 0
        self.current_token = self.tokens[0] if self.tokens else None

    def advance(self):
        self.pos += 1
        if self.pos < len(self.tokens):
            self.current_token = self.tokens[self.pos]
        else:
            self.current_token = None

    def check(self, *token_types):
        return self.current_token is not None and self.current_token.type in token_types

    def expect(self, token_type):
        if not self.check(token_type):
            if self.current_token:
                where = f"Linha {self.current_token.line}:{self.current_token.column}"
                found = self.current_token.type.name
                line, column = self.current_token.line, self.current_token.column
            else:
                where, found, line, column = "Linha ?:?", "fim da entrada", None, None
            raise ParseError(
                f"{where} - Comando 'in' inválido: esperado {token_type.name}, encontrado {found}",
                line, column
            )
        token = self.current_token
        self.advance()
        return token

    def parse_out_statement(self):
        self.advance()  # 'out'
        targets = []
        while self.check(TokenType.GREATER_THAN, *OUT_TARGETS):
            if self.current_token.type == TokenType.GREATER_THAN:
                self.advance()
                continue
            targets.append(self.current_token.value)
            self.advance()

        if self.check(TokenType.STOP):
            self.advance()

        return OutStatement(tuple(targets))

    def parse_in_statement(self):
        self.advance()  # 'in'
        self.expect(TokenType.LESS_THAN)
        var = self.expect(TokenType.VAR_NAME).value
        return InStatement(var)

    def parse(self):
        """
        Constrói a lista de comandos do programa.

        Tokens fora de um comando reconhecido (';', 'int', '>>' solto, ...)
        são descartados sem erro.
        """
        statements = []
        while self.current_token is not None:
            if self.current_token.type == TokenType.OUT:
                statements.append(self.parse_out_statement())
            elif self.current_token.type == TokenType.IN:
                statements.append(self.parse_in_statement())
            else:
                self.advance()
        return Program(statements)

def parse(tokens):
    return Parser(tokens).parse()
