from fastapi import FastAPI, Request, Form
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from typing import Annotated

from container.errors import InvalidCapacity, StackEmpty, StackError, StackFull
from container.stack import DEFAULT_CAPACITY
from registry.stack_registry import MAX_STACKS as DEFAULT_MAX_STACKS, RegistryFull, StackRegistry, UnknownStack

import logging
import os

MAX_STACKS = int(os.environ.get("STACK_MAX_STACKS", DEFAULT_MAX_STACKS))
TEMPLATES_DIR = os.environ.get(
    "STACK_TEMPLATES_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")
)

app = FastAPI()
manager = StackRegistry(MAX_STACKS)
templates = Jinja2Templates(TEMPLATES_DIR)

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

logger = logging.getLogger(__name__)


def error_response(stack_id: str, action: str, e: Exception) -> JSONResponse:
    if isinstance(e, UnknownStack):
        status, code = 404, "UNKNOWN_STACK"
    elif isinstance(e, StackFull):
        status, code = 409, "STACK_FULL"
    elif isinstance(e, StackEmpty):
        status, code = 409, "STACK_EMPTY"
    elif isinstance(e, InvalidCapacity):
        status, code = 422, "INVALID_CAPACITY"
    elif isinstance(e, RegistryFull):
        status, code = 503, "REGISTRY_FULL"
    else:
        status, code = 500, "ERROR"

    logger.error(f"@{stack_id}: failed to {action} due to: {e}")
    return JSONResponse({"error": code, "detail": str(e)}, status_code=status)


@app.get("/index", response_class=HTMLResponse)
def index(request: Request):
    stacks = manager.describe_all()
    return templates.TemplateResponse(request, "index.html", {"stacks": stacks, "stats": manager.stats()})


@app.get("/stats")
async def get_stats():
    return manager.stats()


@app.post("/stacks")
async def create_stack(capacity: Annotated[int, Form()] = DEFAULT_CAPACITY):
    try:
        stack_id = manager.create(capacity)
        return {"stack_id": stack_id}
    except (StackError, RegistryFull) as e:
        return error_response("new", "create stack", e)


@app.get("/stacks/{stack_id}")
async def get_stack(stack_id: str):
    try:
        return manager.describe(stack_id)
    except UnknownStack as e:
        return error_response(stack_id, "describe stack", e)


@app.post("/stacks/{stack_id}/push")
async def push(stack_id: str, value: Annotated[int, Form()]):
    try:
        manager.push(stack_id, value)
        return {"status": "OK", "top": manager.get(stack_id).top}
    except (StackError, UnknownStack) as e:
        return error_response(stack_id, f"push {value}", e)


@app.post("/stacks/{stack_id}/pop")
async def pop(stack_id: str):
    try:
        return {"value": manager.pop(stack_id)}
    except (StackError, UnknownStack) as e:
        return error_response(stack_id, "pop", e)


@app.get("/stacks/{stack_id}/peek")
async def peek(stack_id: str):
    try:
        return {"value": manager.peek(stack_id)}
    except (StackError, UnknownStack) as e:
        return error_response(stack_id, "peek", e)


@app.post("/stacks/{stack_id}/copy")
async def copy_stack(stack_id: str):
    try:
        return {"stack_id": manager.copy(stack_id)}
    except (StackError, UnknownStack, RegistryFull) as e:
        return error_response(stack_id, "copy stack", e)


@app.post("/stacks/{stack_id}/assign/{source_id}")
async def assign_stack(stack_id: str, source_id: str):
    try:
        manager.assign(stack_id, source_id)
        return manager.describe(stack_id)
    except (StackError, UnknownStack) as e:
        return error_response(stack_id, f"assign from {source_id}", e)


@app.delete("/stacks/{stack_id}")
async def release_stack(stack_id: str):
    try:
        manager.release(stack_id)
        return {"status": "OK"}
    except UnknownStack as e:
        return error_response(stack_id, "release stack", e)
