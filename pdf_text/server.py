"""FastAPI application exposing the PDF Text method channel over HTTP."""

from __future__ import annotations

from contextlib import asynccontextmanager
from json import JSONDecodeError
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .channel import METHODS, MethodNotImplementedError, PdfTextChannel
from .exceptions import PdfTextException

ERROR_STATUS: Dict[str, int] = {
    "INVALID_ARGUMENTS": 400,
    "INVALID_PATH": 400,
    "INVALID_PASSWORD": 401,
    "PAGE_NOT_FOUND": 404,
}


def _error_response(exc: PdfTextException) -> JSONResponse:
    return JSONResponse(exc.to_dict(), status_code=ERROR_STATUS.get(exc.code, 500))


def create_app(channel: Optional[PdfTextChannel] = None) -> FastAPI:
    """Build the HTTP application around ``channel``.

    Without a ``channel`` the application creates its own when it starts up
    and shuts its worker pool down when it stops. A supplied channel stays
    owned by the caller.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if channel is not None:
            yield
            return
        with PdfTextChannel() as owned:
            app.state.channel = owned
            yield

    app = FastAPI(title="PDF Text API", version="1.0.0", lifespan=lifespan)
    if channel is not None:
        app.state.channel = channel

    @app.get("/health", response_class=JSONResponse)
    async def health() -> dict[str, str]:
        """Lightweight health endpoint for uptime checks."""
        return {"status": "ok"}

    @app.get("/methods", response_class=JSONResponse)
    async def list_methods() -> dict[str, list[str]]:
        """List the method names accepted by ``POST /methods/{method}``."""
        return {"methods": list(METHODS)}

    @app.post("/methods/{method}", response_class=JSONResponse, response_model=None)
    async def call_method(method: str, request: Request) -> Any:
        """Run one channel method with the JSON object body as its arguments.

        Every call opens the document afresh on a background worker; the
        response is either ``{"result": ...}`` or ``{"code", "message"}``.
        """

        try:
            arguments = await request.json()
        except (JSONDecodeError, UnicodeDecodeError):
            arguments = None

        try:
            result = await request.app.state.channel.invoke(method, arguments)
        except PdfTextException as exc:
            return _error_response(exc)
        except MethodNotImplementedError as exc:
            return JSONResponse(
                {"code": "NOT_IMPLEMENTED", "message": str(exc)},
                status_code=501,
            )
        return {"result": result}

    return app


app = create_app()
