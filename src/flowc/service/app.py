"""
flowc HTTP + WebSocket service.

Accepts Flow programs, translates them to C++, compiles and runs the
result, and reports the output. Request/response over ``POST /api/compile``
and a long-lived conversation over ``/ws``.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request, WebSocket, WebSocketDisconnect
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

from .. import __version__
from ..compiler import transpile
from .config import Settings, get_settings
from .counter import CompilationCounter
from .history import CompilationHistory, CompilationRecord
from .models import CompileRequest, CompileResponse, HealthResponse, IdeasResponse
from .runner import compile_and_run

PHI = 1.618033988749895
SERVICE_NAME = "flow-chat"
WELCOME_MESSAGE = "FLOW COMPILER v2.0 - Flow-to-C++17. Type Flow code."

logger = logging.getLogger(__name__)
router = APIRouter()


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


class CompilerService:
    """State shared by every request of one application instance."""

    def __init__(self, settings: Settings, counter: CompilationCounter,
                 history: CompilationHistory) -> None:
        self.settings = settings
        self.counter = counter
        self.history = history
        self.started = time.monotonic()

    def compile(self, source: str) -> CompilationRecord:
        """Translate, build and run one program. Blocks on the compiler."""
        compilation_id = self.counter.next()
        cpp = transpile(source)
        result = compile_and_run(cpp, compilation_id, self.settings)

        record = CompilationRecord(
            id=compilation_id,
            flow=source,
            cpp=cpp,
            success=result.success,
            output=result.output,
        )
        self.history.add(record)
        logger.info("flow #%d %s %s", compilation_id,
                    "✓" if result.success else "✗", source.split("\n", 1)[0][:60])
        return record

    def uptime(self) -> float:
        return round(time.monotonic() - self.started, 1)


def get_service(request: Request) -> CompilerService:
    return request.app.state.service


@router.get("/health", response_model=HealthResponse)
@router.get("/status", response_model=HealthResponse)
def health(service: CompilerService = Depends(get_service)) -> HealthResponse:
    return HealthResponse(
        service=SERVICE_NAME,
        version=__version__,
        phi=PHI,
        compilations=service.counter.current,
        uptime_seconds=service.uptime(),
        ideas_in_stream=len(service.history),
    )


@router.post("/api/compile", response_model=CompileResponse)
def compile_flow(request: CompileRequest,
                 service: CompilerService = Depends(get_service)) -> CompileResponse:
    record = service.compile(request.source)
    return CompileResponse(
        cpp=record.cpp,
        output=record.output,
        success=record.success,
        compilation_id=record.id,
    )


@router.get("/ideas", response_model=IdeasResponse)
def ideas(service: CompilerService = Depends(get_service)) -> IdeasResponse:
    return IdeasResponse(
        ideas=[r.to_dict() for r in service.history.recent(50)],
        total=len(service.history),
    )


@router.websocket("/ws")
async def compile_stream(websocket: WebSocket) -> None:
    service: CompilerService = websocket.app.state.service
    await websocket.accept()
    logger.info("ws client connected")
    await websocket.send_json({
        "type": "info",
        "message": WELCOME_MESSAGE,
        "phi": PHI,
        "compilations": service.counter.current,
    })

    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            break
        # Binary frames are ignored
        source = (message.get("text") or "").strip()
        if not source:
            continue

        record = await run_in_threadpool(service.compile, source)
        try:
            await websocket.send_json({
                "type": "compiled",
                "flow": source,
                "cpp": record.cpp,
                "output": record.output,
                "compiled": record.success,
                "compilation_id": record.id,
            })
        except WebSocketDisconnect:
            # Client left while its program was compiling
            break

    logger.info("ws client disconnected")


def create_app(settings: Optional[Settings] = None,
               counter: Optional[CompilationCounter] = None) -> FastAPI:
    """Build an application with its own counter and history."""
    settings = settings or get_settings()
    service = CompilerService(
        settings,
        counter or CompilationCounter(),
        CompilationHistory(settings.history_limit),
    )

    app = FastAPI(
        title="flowc",
        description="Flow-to-C++ compile and run service",
        version=__version__,
    )
    app.state.service = service
    app.include_router(router)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


def run() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("[%s] Listening on %s:%d", SERVICE_NAME, settings.host, settings.port)
    logger.info("[%s] phi = %s", SERVICE_NAME, PHI)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
