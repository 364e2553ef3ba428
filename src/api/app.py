from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from src.domain.errors import InvalidEmailField
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    if exc.base_error.details:
        logger.warning(f"Client error: {exc.base_error.code} {exc.base_error.details}")
        return JSONResponse(
            status_code=exc.status_code, content={"errors": exc.base_error.details}
        )
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_invalid_email_field(request: Request, exc: InvalidEmailField):
    error_dict = {"code": "INVALID_EMAIL_FIELD", "message": "Internal server error"}
    logger.error(f"Configuration error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.depends import init_models

    await init_models()
    yield


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)

    app = FastAPI(title="Auth API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import confirmations, health_check, passwords, registration, session, unlocks, user

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(session.router, tags=["Session"])
    app.include_router(registration.router, tags=["Registration"])
    app.include_router(user.router, tags=["User"])
    app.include_router(passwords.router, tags=["Passwords"])
    app.include_router(confirmations.router, tags=["Confirmations"])
    app.include_router(unlocks.router, tags=["Unlocks"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(InvalidEmailField, handle_invalid_email_field)

    return app
