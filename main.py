from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from pydantic import BaseModel
from typing import List
from io import StringIO
import asyncio

from lexer import Lexer
from parser import Parser
from interpreter import Interpreter, INVALID_INPUT_MESSAGE
from statements import InStatement, OutStatement, statement_to_dict
from errors import OutInSyntaxError

app = FastAPI(title="out/in Language IDE", version="1.0.0")

INPUT_TIMEOUT = 120.0

# Marca de parada na fila de entrada; nenhum valor do cliente é igual a ela.
STOP_INPUT = object()

EXAMPLES = {
    "echo": {"name": "Eco de um número", "code": 'out >> "enter a number:"; in << a; out >> a;'},
    "hello": {"name": "Olá", "code": 'out >> "hi"; out >> "bye";'},
    "two_numbers": {"name": "Dois números", "code": 'in << a; in << b; out >> "a:" >> a >> "b:" >> b stop;'},
}

# --- Modelos de Dados ---
class CodeRequest(BaseModel):
    code: str

class RunRequest(BaseModel):
    code: str
    inputs: List[str] = []

def compile_source(code):
    tokens = Lexer(code).tokenize()
    return tokens, Parser(tokens).parse()

# --- Execução interativa ---
class WebInterpreter(Interpreter):
    """Interpretador que troca entrada e saída com o cliente via WebSocket."""

    def __init__(self, program, websocket: WebSocket):
        super().__init__(program)
        self.websocket = websocket
        self.input_queue = asyncio.Queue()
        self.waiting_for_input = False
        self.should_stop = False

    async def run_async(self):
        for stmt in self.program:
            if self.should_stop:
                break
            if isinstance(stmt, OutStatement):
                for target in stmt.targets:
                    await self._output(self.resolve_target(target))
            elif isinstance(stmt, InStatement):
                await self._handle_input_async(stmt)
            else:
                raise TypeError(f"Comando desconhecido: {stmt!r}")
            await asyncio.sleep(0.01)

    async def _handle_input_async(self, stmt):
        self.waiting_for_input = True
        await self.websocket.send_json({"type": "input_request", "message": "? ", "variable": stmt.var})
        try:
            value = await asyncio.wait_for(self.input_queue.get(), timeout=INPUT_TIMEOUT)
        finally:
            self.waiting_for_input = False
        if value is STOP_INPUT:  # stop / desconexão
            self.should_stop = True
            return
        if not self.assign_input(stmt.var, str(value)):
            await self.websocket.send_json({"type": "diagnostic", "data": INVALID_INPUT_MESSAGE})

    async def _output(self, text):
        await self.websocket.send_json({"type": "output", "data": text})

    async def provide_input(self, value):
        await self.input_queue.put(value)

    async def stop(self):
        self.should_stop = True
        await self.input_queue.put(STOP_INPUT)

async def handle_execution(websocket: WebSocket, code: str):
    interpreter = None

    async def message_handler():
        try:
            while True:
                data = await websocket.receive_json()
                if data.get("type") == "input":
                    await interpreter.provide_input(data.get("value", ""))
                elif data.get("type") == "stop":
                    await interpreter.stop()
                    break
        except WebSocketDisconnect:
            await interpreter.stop()

    try:
        _, program = compile_source(code)
        interpreter = WebInterpreter(program, websocket)
        await websocket.send_json({"type": "execution_started"})
        message_task = asyncio.create_task(message_handler())
        try:
            await interpreter.run_async()
        finally:
            message_task.cancel()
            await asyncio.gather(message_task, return_exceptions=True)
        await websocket.send_json({"type": "execution_finished", "success": True})

    except (OutInSyntaxError, asyncio.TimeoutError) as e:
        await websocket.send_json({"type": "execution_finished", "success": False, "error": f"{type(e).__name__}: {e}"})

# --- Endpoints da API ---
@app.websocket("/api/execute-interactive")
async def execute_interactive(websocket: WebSocket):
    await websocket.accept()
    try:
        code = (await websocket.receive_json()).get("code", "")
        await handle_execution(websocket, code)
    except WebSocketDisconnect:
        pass
    except Exception as e:
        try:
            await websocket.send_json({"type": "error", "message": f"{type(e).__name__}: {e}"})
        except RuntimeError:
            pass

@app.post("/api/compile")
async def compile_code(request: CodeRequest):
    try:
        tokens, program = compile_source(request.code)
    except OutInSyntaxError as e:
        return {"success": False, "errors": [f"{type(e).__name__}: {e}"]}
    token_list = [{"type": t.type.name, "value": t.value, "line": t.line, "column": t.column} for t in tokens]
    return {"success": True, "tokens": token_list, "ast": statement_to_dict(program)}

@app.post("/api/run")
async def run_code(request: RunRequest):
    try:
        _, program = compile_source(request.code)
    except OutInSyntaxError as e:
        return {"success": False, "errors": [f"{type(e).__name__}: {e}"]}
    # Cada valor vira exatamente uma linha da entrada.
    stdin = StringIO("".join(value.replace("\n", " ") + "\n" for value in request.inputs))
    stdout, stderr = StringIO(), StringIO()
    Interpreter(program, stdin, stdout, stderr).run()
    return {
        "success": True,
        "output": stdout.getvalue().splitlines(),
        "diagnostics": stderr.getvalue().splitlines(),
    }

@app.get("/api/examples")
async def get_examples():
    return EXAMPLES
