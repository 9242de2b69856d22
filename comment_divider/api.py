from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from comment_divider.commands import COMMANDS, LineInfo, UnknownCommandError, complete_argument, run_command
from comment_divider.logging_setup import ensure_file_logging
from comment_divider.models import (
    ArgumentCompletionOut,
    CommandOutputOut,
    CommandRequest,
    CompletionRequest,
    CompletionsResponse,
    ErrorEnvelope,
    LanguagesResponse,
    OutputSectionOut,
    SettingsResponse,
    StyleSettings,
)
from comment_divider.settings_store import load_settings, settings_path

logger = logging.getLogger(__name__)

_ENV_WORKDIR = "COMMENT_DIVIDER_WORKDIR"


def workdir() -> Path:
    """Directory holding the settings file and `logs/`; defaults to the process cwd."""

    override = str(os.getenv(_ENV_WORKDIR, "") or "").strip()
    if override:
        return Path(override)
    return Path.cwd()


def _error_code_for_status(status_code: int) -> str:
    if status_code == 404:
        return "not_found"
    if status_code in {400, 422}:
        return "bad_request"
    return "internal_error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": ErrorEnvelope(code=_error_code_for_status(status_code), message=message).model_dump()},
    )


def _current_settings() -> StyleSettings:
    path = settings_path(workdir=workdir())
    try:
        return load_settings(path)
    except ValueError as e:
        logger.error("failed to load settings from %s: %s", path, e)
        raise HTTPException(status_code=500, detail=str(e)) from e


@asynccontextmanager
async def _lifespan(_app: FastAPI) -> AsyncIterator[None]:
    log_file = ensure_file_logging(log_dir=workdir() / "logs")
    logger.info("file logging enabled: %s", log_file)
    yield


app = FastAPI(lifespan=_lifespan)


@app.exception_handler(HTTPException)
async def _http_exception_handler(_request: Request, exc: HTTPException):
    return _error(int(exc.status_code), str(exc.detail))


@app.exception_handler(RequestValidationError)
async def _validation_exception_handler(_request: Request, exc: RequestValidationError):
    msg = "bad request"
    errors = exc.errors()
    if errors:
        msg = errors[0].get("msg") or msg
    return _error(400, msg)


@app.exception_handler(Exception)
async def _unhandled_exception_handler(_request: Request, exc: Exception):
    logger.exception("unhandled error")
    return _error(500, str(exc))


@app.get("/healthz")
async def healthz():
    return {"ok": True}


@app.get("/api/v1/settings", response_model=SettingsResponse)
async def get_settings():
    return SettingsResponse(settings=_current_settings())


@app.get("/api/v1/languages", response_model=LanguagesResponse)
async def get_languages():
    settings = _current_settings()
    return LanguagesResponse(languages=settings.to_language_table().to_dict())


@app.post("/api/v1/commands/{name}", response_model=CommandOutputOut)
async def invoke_command(name: str, body: CommandRequest = Body(...)):
    if name not in COMMANDS:
        raise HTTPException(status_code=404, detail=str(UnknownCommandError(name)))

    settings = _current_settings()
    line = LineInfo.from_line(body.line, body.language, tab_size=body.tab_size)
    if body.indent_size is not None:
        line = LineInfo(text=body.line, indent_size=body.indent_size, language=body.language)

    out = run_command(
        name,
        body.args,
        line=line,
        config=settings.to_style_config(),
        languages=settings.to_language_table(),
    )

    return CommandOutputOut(
        text=out.text,
        sections=[OutputSectionOut(start=s.start, end=s.end, label=s.label) for s in out.sections],
    )


@app.post("/api/v1/commands/{name}/completions", response_model=CompletionsResponse)
async def complete_command(name: str, body: CompletionRequest = Body(default_factory=CompletionRequest)):
    completions = complete_argument(name, body.args)
    return CompletionsResponse(
        completions=[
            ArgumentCompletionOut(label=c.label, new_text=c.new_text, run_command=c.run_command) for c in completions
        ]
    )
