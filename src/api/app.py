import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from libs.result import Error
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


def _error_body(error: Error) -> dict:
    error_dict = {"code": error.code, "message": error.message}
    if error.details:
        error_dict["details"] = error.details
    return {"error": error_dict}


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code} on {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.base_error))


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code} on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """
    Map FastAPI's request validation failures onto the service's error shape:
    undecodable or non-object bodies are MALFORMED_INPUT, bad path ids are
    404, anything else is a VALIDATION_ERROR naming the field.
    """
    first = exc.errors()[0] if exc.errors() else {}
    loc = tuple(first.get("loc", ()))
    error_type = first.get("type", "")

    if loc and loc[0] == "path":
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=_error_body(Error("ACCOUNT_NOT_FOUND", "Not found")),
        )

    if error_type == "json_invalid" or len(loc) <= 1:
        error = Error("MALFORMED_INPUT", "Invalid JSON data")
    else:
        field = str(loc[-1])
        rule = "REQUIRED" if error_type == "missing" else "INVALID_TYPE"
        message = f"{field} is required" if rule == "REQUIRED" else f"{field} is invalid"
        error = Error("VALIDATION_ERROR", message, details={"field": field, "rule": rule})

    logger.warning(f"Client error: {error.code} on {request.url.path}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(error))


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.depends import init_db

    await init_db()
    yield


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Travel Identity API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import users

    app.include_router(users.router, prefix=ApplicationConfig.API_PREFIX, tags=["Users"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
