"""
API server exposing the clarification pipeline over POST /api/chat.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from clarifychat import __version__
from clarifychat.config import Config
from clarifychat.errors import ChatError, InvalidRequest, chat_error_response, error_response
from clarifychat.pipeline import ClarifyGraph
from clarifychat.pipeline.graph import INVALID_REQUEST, require_api_key
from clarifychat.schemas import ClarificationResponse

# Configure logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Starting up ClarifyChat API...")
    if not Config.OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not configured; /api/chat will return 500")
    if Config.OPENAI_MODEL_IS_DEFAULT:
        logger.warning(f"OPENAI_MODEL is not set, using default: {Config.OPENAI_MODEL}")

    yield

    logger.info("Shutting down ClarifyChat API...")


async def _read_messages(request: Request) -> Any:
    try:
        payload = await request.json()
    except ValueError as exc:
        raise InvalidRequest(INVALID_REQUEST, details="Body is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise InvalidRequest(INVALID_REQUEST)
    return payload.get("messages")


def create_app(graph: ClarifyGraph | None = None) -> FastAPI:
    app = FastAPI(title="ClarifyChat API", version=__version__, lifespan=lifespan)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Initialize graph once; no per-request state lives on it
    graph = graph or ClarifyGraph()
    app.state.clarify_graph = graph

    @app.exception_handler(ChatError)
    async def chat_error_handler(request: Request, exc: ChatError) -> JSONResponse:
        logger.warning(f"[API] {request.url.path} -> {exc.status_code}: {exc.message}")
        return chat_error_response(exc)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.post("/api/chat")
    async def chat_endpoint(request: Request) -> Any:
        start_time = time.time()
        try:
            require_api_key()
            raw_messages = await _read_messages(request)
            reply = await run_in_threadpool(graph.run_once, raw_messages)
        except ChatError:
            raise
        except Exception as e:
            logger.error(f"[API] Unhandled error: {e}", exc_info=True)
            return error_response("Internal Server Error", 500)

        kind = "clarification" if isinstance(reply, ClarificationResponse) else "answer"
        logger.info(f"[API] Request complete in {time.time() - start_time:.3f}s ({kind})")
        return reply.model_dump()

    return app
