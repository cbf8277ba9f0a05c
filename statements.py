from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class OutStatement:
    """out >> alvo >> alvo ... ; cada alvo é um nome de variável ou um literal."""
    targets: Tuple[str, ...]

@dataclass(frozen=True)
class InStatement:
    var: str

class Program:
    def __init__(self, statements):
        self.statements = tuple(statements)

    def __iter__(self):
        return iter(self.statements)

    def __len__(self):
        return len(self.statements)

    def __getitem__(self, index):
        return self.statements[index]

def statement_to_dict(node):
    if isinstance(node, Program):
        return {"type": "Program", "statements": [statement_to_dict(s) for s in node]}
    if isinstance(node, OutStatement):
        return {"type": "OutStatement", "targets": list(node.targets)}
    if isinstance(node, InStatement):
        return {"type": "InStatement", "var": node.var}
    return {"type": "Unknown", "value": str(node)}
