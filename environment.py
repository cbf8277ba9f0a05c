class Environment:
    """Variáveis de uma execução: nome -> valor inteiro em texto decimal."""

    FALLBACK = "0"

    def __init__(self):
        self.variables = {}

    def __contains__(self, name):
        return name in self.variables

    def get(self, name):
        return self.variables[name]

    def set(self, name, value):
        self.variables[name] = value

    def as_dict(self):
        return dict(self.variables)
