import string
from dataclasses import dataclass
from enum import Enum, auto

from errors import LexError

WHITESPACE = ' \t\n\r\v\f'
LETTERS = string.ascii_letters
ALNUM = string.ascii_letters + string.digits

class TokenType(Enum):
    OUT = auto()
    IN = auto()
    GREATER_THAN = auto()
    LESS_THAN = auto()
    STRING_LITERAL = auto()
    VAR_NAME = auto()
    STOP = auto()
    END_STATEMENT = auto()
    INT_KEYWORD = auto()
    UNKNOWN = auto()

# Ordem importa: 'in' antes de 'int' e de qualquer identificador.
FIXED_TOKENS = [
    ('out', TokenType.OUT, 'out'),
    ('>>', TokenType.GREATER_THAN, ''),
    ('in', TokenType.IN, 'in'),
    ('<<', TokenType.LESS_THAN, ''),
    ('stop', TokenType.STOP, 'stop'),
    ('int', TokenType.INT_KEYWORD, 'int'),
]

@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str = ''
    line: int = 1
    column: int = 1

class Lexer:
    def __init__(self, source):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.source[0] if source else None

    def advance(self, count=1):
        for _ in range(count):
            if self.current_char == '\n':
                self.line += 1
                self.column = 0
            self.pos += 1
            self.column += 1
            if self.pos < len(self.source):
                self.current_char = self.source[self.pos]
            else:
                self.current_char = None

    def skip_whitespace(self):
        while self.current_char and self.current_char in WHITESPACE:
            self.advance()

    def string_literal(self):
        self.advance()  # abre aspas
        start_pos = self.pos
        while self.current_char and self.current_char != '"':
            self.advance()
        value = self.source[start_pos:self.pos]
        self.advance()  # fecha aspas
        return value

    def identifier(self):
        start_pos = self.pos
        while self.current_char and self.current_char in ALNUM:
            self.advance()
        return self.source[start_pos:self.pos]

    def next_token(self):
        """
        Lê o próximo token a partir da posição atual.

        Fim da entrada (após espaços) gera um END_STATEMENT implícito, igual
        ao produzido por ';'. Um caractere não reconhecido gera UNKNOWN e
        cabe a quem chama tratá-lo como erro.
        """
        self.skip_whitespace()
        line, column = self.line, self.column

        if self.current_char is None:
            return Token(TokenType.END_STATEMENT, '', line, column)

        for text, token_type, value in FIXED_TOKENS:
            if self.source.startswith(text, self.pos):
                self.advance(len(text))
                return Token(token_type, value, line, column)

        if self.current_char == '"':
            return Token(TokenType.STRING_LITERAL, self.string_literal(), line, column)

        if self.current_char in LETTERS:
            return Token(TokenType.VAR_NAME, self.identifier(), line, column)

        if self.current_char == ';':
            self.advance()
            return Token(TokenType.END_STATEMENT, '', line, column)

        char = self.current_char
        self.advance()
        return Token(TokenType.UNKNOWN, char, line, column)

    def tokenize(self):
        tokens = []
        while self.pos < len(self.source):
            token = self.next_token()
            if token.type == TokenType.UNKNOWN:
                raise LexError(
                    f"Linha {token.line}:{token.column} - "
                    f"Caractere inválido: '{token.value}'",
                    token.line, token.column
                )
            tokens.append(token)
        return tokens

def tokenize(source):
    return Lexer(source).tokenize()
