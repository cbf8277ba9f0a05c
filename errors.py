class OutInSyntaxError(SyntaxError):
    def __init__(self, message, kind, line=None, column=None):
        super().__init__(message)
        self.kind = kind
        self.line = line
        self.column = column

class LexError(OutInSyntaxError):
    UNKNOWN_TOKEN = "UnknownToken"

    def __init__(self, message, line=None, column=None):
        super().__init__(message, self.UNKNOWN_TOKEN, line, column)

class ParseError(OutInSyntaxError):
    MALFORMED_INPUT_STATEMENT = "MalformedInputStatement"

    def __init__(self, message, line=None, column=None):
        super().__init__(message, self.MALFORMED_INPUT_STATEMENT, line, column)
