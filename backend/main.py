from dotenv import load_dotenv
load_dotenv()

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from errors import InvalidParameter, RelayError
from gemini.client import build_chat_factory
from relay import MoveRelay
from routes import game, move
from store import ChatFactory, SessionStore

_UNSET = object()


def _cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [str(err["loc"][-1]) for err in exc.errors() if err.get("loc")]
    return await relay_error_handler(request, InvalidParameter(fields or ["body"]))


def create_app(chat_factory=_UNSET, store: Optional[SessionStore] = None) -> FastAPI:
    """
    Build the API. Without arguments the Gemini client is configured from
    the environment; tests pass their own chat_factory (or None for the
    unconfigured case) and store.
    """
    if chat_factory is _UNSET:
        chat_factory = build_chat_factory()
    factory: Optional[ChatFactory] = chat_factory

    app = FastAPI(title="Chess Move Relay", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = store if store is not None else SessionStore(factory)
    app.state.relay = MoveRelay(app.state.store, factory)

    app.add_exception_handler(RelayError, relay_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(move.router)
    app.include_router(game.router)

    @app.get("/")
    def status(request: Request):
        relay: MoveRelay = request.app.state.relay
        return {
            "status": "ok",
            "message": "Chess move relay is running. POST a FEN to /move.",
            "move_endpoint": "/move",
            "gemini": "ready" if relay.ready else "credential-error",
            "active_sessions": len(relay.store),
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
    uvicorn.run(
        app,
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "3000")),
    )
