from fastapi import FastAPI,Depends,Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging,time
from app import config
from app.errors import InternalError,NotFoundError,TaskServiceError
from app.models import Envelope,TaskCreate,TaskUpdate
from app.store import TaskStore
from app.validation import check_status,require_fields
from typing import Optional
logger = logging.getLogger(__name__)
app = FastAPI(title="Task Service")
app.state.store = TaskStore()
app.state.strict_update = config.TASKS_STRICT_UPDATE


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


def envelope_response(status_code: int, message: str, data=None) -> JSONResponse:
    body = Envelope(success=status_code < 400, message=message, data=data)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


def parse_task_id(task_id: str) -> int:
    # plain ASCII digits only; int() would also take "1_0", " 1" or non-ASCII digits
    if not (task_id.isascii() and task_id.isdigit()):
        raise NotFoundError()
    return int(task_id)


def request_target(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


# request stages: the last middleware registered runs first
@app.middleware("http")
async def catch_unhandled(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return envelope_response(500, InternalError.message)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = (time.perf_counter() - start) * 1000
    logger.info("%s %s -> %s (%.1f ms)", request.method, request_target(request), response.status_code, elapsed)
    return response


@app.exception_handler(TaskServiceError)
async def task_service_error_handler(request: Request, exc: TaskServiceError):
    return envelope_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug("rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    return envelope_response(400, "Invalid request body")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return envelope_response(exc.status_code, str(exc.detail))


def validate_create(task: Optional[TaskCreate] = None) -> TaskCreate:
    task = task or TaskCreate()
    require_fields(task.title, task.description)
    check_status(task.status)
    return task


def validate_update(request: Request, updates: Optional[TaskUpdate] = None) -> TaskUpdate:
    updates = updates or TaskUpdate()
    if request.app.state.strict_update:
        require_fields(updates.title, updates.description)
    check_status(updates.status)
    return updates


@app.get("/health")
async def health():
    return {"status":"healthy"}


@app.post("/tasks", status_code=201, response_model=Envelope, response_model_exclude_none=True)
async def create_task(task: TaskCreate = Depends(validate_create), store: TaskStore = Depends(get_store)):
    created = store.create(task.title, task.description, task.status)
    return Envelope(success=True, message="Task created successfully", data=created)


@app.get("/tasks", response_model=Envelope, response_model_exclude_none=True)
async def list_tasks(status: Optional[str] = None,
                     sort: Optional[str] = None,
                     store: TaskStore = Depends(get_store)):
    tasks = store.list(status=status, sort=sort)
    return Envelope(success=True, message="Tasks retrieved successfully", data=tasks)


@app.get("/tasks/{task_id}", response_model=Envelope, response_model_exclude_none=True)
async def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    task = store.get(parse_task_id(task_id))
    return Envelope(success=True, message="Task retrieved successfully", data=task)


@app.put("/tasks/{task_id}", response_model=Envelope, response_model_exclude_none=True)
async def update_task(task_id: str,
                      updates: TaskUpdate = Depends(validate_update),
                      store: TaskStore = Depends(get_store)):
    task = store.update(parse_task_id(task_id), updates.title, updates.description, updates.status)
    return Envelope(success=True, message="Task updated successfully", data=task)


@app.delete("/tasks/{task_id}", response_model=Envelope, response_model_exclude_none=True)
async def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    store.delete(parse_task_id(task_id))
    return Envelope(success=True, message="Task deleted successfully")
