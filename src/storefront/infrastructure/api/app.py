"""FastAPI application: middleware, error mapping and routers."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)
from storefront.infrastructure.api import product_routes, store_routes
from storefront.infrastructure.config import settings

logger = logging.getLogger(__name__)

app = FastAPI(title="Storefront Admin API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- Error mapping ----------

def _status_for(exc: DomainException) -> int:
    if isinstance(exc, EntityNotFoundError):
        return 404
    if isinstance(exc, PersistenceError):
        return 500
    return 400


@app.exception_handler(DomainException)
async def handle_domain_error(request: Request, exc: DomainException):
    status = _status_for(exc)
    if isinstance(exc, ValidationError):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    elif status == 404:
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status, content={"message": str(exc)})


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        where = ".".join(str(p) for p in err["loc"] if p != "body")
        problems.append(f"{where}: {err['msg']}" if where else err["msg"])
    return JSONResponse(status_code=400, content={"message": "; ".join(problems)})


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# ---------- Routes ----------

@app.get("/api/health")
def health():
    return {"status": "ok"}


app.include_router(store_routes.router)
app.include_router(product_routes.router)
