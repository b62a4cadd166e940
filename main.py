"""Monitorias API - academic monitoring administration backend."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.config import get_settings
from app.errors import ApiError, ErrorKind
from app.routers import (
    auth_router,
    dependencias_router,
    justificaciones_router,
    monitorias_router,
    periodos_router,
    personas_router,
    tipos_justificacion_router,
    tipos_monitoria_router,
)

settings = get_settings()

# Logging
logger = logging.getLogger("monitorias")
logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

for warning in settings.validate():
    logger.warning("Config: %s", warning)

app = FastAPI(title="Monitorias API", version="0.1.0")


# --- Security headers middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers["Cache-Control"] = "no-store"
        return response


# --- Request size limit middleware ---
class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    MAX_BODY_SIZE = settings.MAX_BODY_SIZE_KB * 1024

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.MAX_BODY_SIZE:
            return JSONResponse(
                status_code=413,
                content={"success": False, "message": "Request body too large", "error": "PAYLOAD_TOO_LARGE"},
            )
        return await call_next(request)


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestSizeLimitMiddleware)

# API routers
app.include_router(auth_router)
app.include_router(personas_router)
app.include_router(dependencias_router)
app.include_router(periodos_router)
app.include_router(tipos_monitoria_router)
app.include_router(tipos_justificacion_router)
app.include_router(monitorias_router)
app.include_router(justificaciones_router)


# --- Exception handlers ---
@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render typed API errors."""
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.kind.value, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Turn request validation errors into a field -> messages map."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error["loc"]]
        if loc and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        field = ".".join(loc) or "body"
        message = error["msg"].removeprefix("Value error, ")
        errors.setdefault(field, []).append(message)
    return JSONResponse(status_code=422, content=ApiError.validation(errors).to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework HTTP errors (unknown route, wrong method) in the API envelope."""
    code = ErrorKind.NOT_FOUND.value if exc.status_code == 404 else "HTTP_ERROR"
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail), "error": code},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Unexpected store failure outside the transactional auth paths."""
    logger.exception("Database error on %s %s", request.method, request.url.path)
    error = ApiError(ErrorKind.INTERNAL, "Error interno del servidor")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log and answer with the 500 envelope."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = ApiError(ErrorKind.INTERNAL, "Error interno del servidor")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


# --- Health check ---
@app.get("/api/health")
def health_check() -> dict:
    """Health check endpoint."""
    return {"success": True, "status": "ok", "app": "monitorias", "version": "0.1.0"}
