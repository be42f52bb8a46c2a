from __future__ import annotations  # FastAPI server exposing the mock interview simulator

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import router as interview_router
from api.schemas import DomainsResp, HealthResp, RolesResp
from config import DOMAINS, GENERATE_KEY, ROLES, bind_model, is_bound, route_from_settings
from config.settings import settings
from llm_gateway import generate
from observability import configure_logging


logger = logging.getLogger(__name__)


def generate_with_settings(prompt: str) -> str:  # Default text generator bound to current settings
    return generate(prompt, cfg=route_from_settings(settings))


async def _http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:  # Render {"error": ...} envelope
    detail = exc.detail
    if exc.status_code == 404 and detail == "Not Found":
        detail = "Endpoint not found"
    return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=getattr(exc, "headers", None))


async def _request_error(_request: Request, exc: RequestValidationError) -> JSONResponse:  # Malformed request bodies
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_errors(exc)},
    )


async def _unhandled_error(_request: Request, exc: Exception) -> JSONResponse:  # Last-resort 500
    logger.exception("Unhandled error while serving request")
    return JSONResponse(
        status_code=500,
        content={"error": "Something went wrong!", "details": "Internal server error"},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:  # Keep location and message of each error
    return [{"loc": list(err.get("loc", ())), "msg": str(err.get("msg", ""))} for err in exc.errors()]


def create_app() -> FastAPI:  # Assemble the application with middleware and routes
    configure_logging()
    if not is_bound(GENERATE_KEY):
        bind_model(GENERATE_KEY, generate_with_settings)

    application = FastAPI(title="Interview Simulator API")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(StarletteHTTPException, _http_error)
    application.add_exception_handler(RequestValidationError, _request_error)
    application.add_exception_handler(Exception, _unhandled_error)

    @application.get("/api/health", response_model=HealthResp)
    def health() -> HealthResp:
        return HealthResp(status="OK", message="Interview Simulator API is running")

    @application.get("/api/roles", response_model=RolesResp)
    def list_roles() -> RolesResp:
        return RolesResp(roles=list(ROLES))

    @application.get("/api/domains", response_model=DomainsResp)
    def list_domains() -> DomainsResp:
        return DomainsResp(domains=list(DOMAINS))

    application.include_router(interview_router)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    if not route_from_settings(settings).api_key:
        logger.warning("GOOGLE_API_KEY is not set; interviews cannot be started")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
