import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def log_requests(request: Request, call_next):
    start_time = time.perf_counter()
    response = await call_next(request)
    duration = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({duration:.1f}ms)"
    )
    return response


def build_lifespan(ApplicationConfig):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from src.app.use_cases.auth import BootstrapAdminUseCase
        from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
        from src.depends import AsyncSessionLocal, engine
        from src.domain.credentials import CredentialError

        if ApplicationConfig.AUTO_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables created")

        if ApplicationConfig.DEFAULT_ADMIN_EMAIL and ApplicationConfig.DEFAULT_ADMIN_PASSWORD:
            async with AsyncSessionLocal() as session:
                use_case = BootstrapAdminUseCase(SqlAlchemyUnitOfWork(session))
                try:
                    result = await use_case.execute(
                        ApplicationConfig.DEFAULT_ADMIN_EMAIL,
                        ApplicationConfig.DEFAULT_ADMIN_PASSWORD,
                    )
                except CredentialError as exc:
                    logger.error(f"DEFAULT_ADMIN_PASSWORD is not usable: {exc}")
                    raise
            if result.value.created:
                logger.info("Default admin user bootstrapped")

        yield

        await engine.dispose()

    return lifespan


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)

    app = FastAPI(
        title="SaaS Starter API",
        version="0.1.0",
        lifespan=build_lifespan(ApplicationConfig),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.middleware("http")(log_requests)

    from src.api.routes import (
        api_key,
        audit,
        auth,
        domain,
        health_check,
        notification_preference,
        organization,
        plan,
        role,
        seat,
        subscription,
        user,
        workflow,
    )

    app.include_router(health_check.router)

    api_routers = (
        auth.router,
        user.router,
        organization.router,
        domain.router,
        seat.router,
        role.router,
        role.permission_router,
        subscription.router,
        plan.router,
        plan.feature_router,
        api_key.router,
        notification_preference.router,
        audit.router,
        audit.activity_router,
        workflow.router,
        workflow.report_router,
    )
    for router in api_routers:
        app.include_router(router, prefix=ApplicationConfig.API_PREFIX)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
