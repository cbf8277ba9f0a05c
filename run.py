#!/usr/bin/env python3
"""
Executa programas da linguagem out/in, ou inicia a IDE web.
"""
import argparse
import sys
import webbrowser
from threading import Timer

from lexer import tokenize
from parser import parse
from interpreter import Interpreter
from errors import OutInSyntaxError

EXAMPLE_PROGRAM = 'out >> "enter a number:"; in << a; out >> a;'

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description="Interpretador da linguagem out/in",
    )
    parser.add_argument(
        "file", nargs="?",
        help="arquivo com o programa (padrão: programa de exemplo embutido)",
    )
    parser.add_argument(
        "--tokens", action="store_true",
        help="mostra os tokens em vez de executar",
    )
    parser.add_argument(
        "--serve", action="store_true",
        help="inicia a IDE web com uvicorn",
    )
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    return parser

def open_browser(port):
    """Abre o navegador após um pequeno delay"""
    print("🌐 Abrindo navegador...")
    webbrowser.open(f'http://localhost:{port}/docs')

def serve(host, port):
    import uvicorn

    print("🚀 out/in Language IDE")
    print("=" * 50)
    Timer(2.0, open_browser, args=(port,)).start()
    try:
        uvicorn.run("main:app", host=host, port=port)
    except KeyboardInterrupt:
        print("\n👋 Servidor interrompido. Até logo!")

def load_source(path):
    if path is None:
        return EXAMPLE_PROGRAM
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()

def main(argv=None):
    args = create_arg_parser().parse_args(argv)

    if args.serve:
        serve(args.host, args.port)
        return

    try:
        source = load_source(args.file)
    except OSError as e:
        print(f"Erro ao ler '{args.file}': {e}", file=sys.stderr)
        sys.exit(1)

    try:
        tokens = tokenize(source)
        if args.tokens:
            for token in tokens:
                print(f"{token.line}:{token.column}\t{token.type.name}\t{token.value}")
            return
        program = parse(tokens)
    except OutInSyntaxError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)

    Interpreter(program).run()

if __name__ == "__main__":
    main()
