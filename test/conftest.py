"""
Configuração dos testes do interpretador out/in
"""

import sys
from io import StringIO
from pathlib import Path

import pytest

# Coloca a raiz do projeto no path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from interpreter import run_source


@pytest.fixture
def execute():
    """Executa um programa e devolve (saída, diagnósticos, ambiente)."""
    def _execute(source, stdin=""):
        out, err = StringIO(), StringIO()
        env = run_source(source, StringIO(stdin), out, err)
        return out.getvalue().splitlines(), err.getvalue().splitlines(), env
    return _execute
