"""In-process stand-in for the document analysis backend.

Implements the three endpoints the client consumes with FastAPI, so the
real BackendClient can be exercised through httpx.ASGITransport.
"""

import asyncio
from typing import Any

from fastapi import FastAPI, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel


class _UrlBody(BaseModel):
    url: str


class _AskBody(BaseModel):
    question: str
    session_id: str


class FakeBackend:
    """Scriptable fake backend.

    Attributes:
        app: The FastAPI application to mount on an ASGITransport.
        calls: (path, payload) for every request received, in order.
        sessions: session_id -> display name for every ingested document.
        answers: Canned answers keyed by question text.
        overrides: path -> (status, body) forcing a response for that path.
                   A dict body is sent as JSON, a str body as plain text.
        gate: When set, ``/ask`` waits on this event before answering.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.sessions: dict[str, str] = {}
        self.answers: dict[str, str] = {}
        self.overrides: dict[str, tuple[int, dict[str, Any] | str]] = {}
        self.gate: asyncio.Event | None = None
        self.app = self._create_app()

    def _next_session_id(self) -> str:
        return f"s{len(self.sessions) + 1}"

    def _override(self, path: str) -> Response | None:
        if path not in self.overrides:
            return None
        status_code, body = self.overrides[path]
        if isinstance(body, str):
            return PlainTextResponse(body, status_code=status_code)
        return JSONResponse(body, status_code=status_code)

    def _create_app(self) -> FastAPI:
        app = FastAPI(title="Fake analysis backend")

        @app.post("/upload")
        async def upload(file: UploadFile) -> Any:
            content = await file.read()
            self.calls.append(
                (
                    "/upload",
                    {
                        "filename": file.filename,
                        "content_type": file.content_type,
                        "size": len(content),
                    },
                )
            )
            if (forced := self._override("/upload")) is not None:
                return forced
            if file.content_type != "application/pdf":
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Only PDF files are accepted",
                )
            session_id = self._next_session_id()
            self.sessions[session_id] = file.filename or ""
            return {"session_id": session_id, "filename": file.filename}

        @app.post("/upload-url")
        async def upload_url(body: _UrlBody) -> Any:
            self.calls.append(("/upload-url", body.model_dump()))
            if (forced := self._override("/upload-url")) is not None:
                return forced
            session_id = self._next_session_id()
            self.sessions[session_id] = body.url
            return {"session_id": session_id, "source": body.url}

        @app.post("/ask")
        async def ask(body: _AskBody) -> Any:
            self.calls.append(("/ask", body.model_dump()))
            if self.gate is not None:
                await self.gate.wait()
            if (forced := self._override("/ask")) is not None:
                return forced
            if body.session_id not in self.sessions:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="Session not found. Please upload a document first.",
                )
            answer = self.answers.get(body.question, f"Answer to: {body.question}")
            return {"answer": answer}

        return app
