import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from src.infrastructure.config.settings import get_settings
from src.infrastructure.persistence.database import AsyncSessionLocal, create_tables, engine
from src.infrastructure.persistence.seed import seed_authors
from src.presentation.api.rate_limit import limiter, rate_limit_exceeded_handler
from src.presentation.api.v1.result_mapper import problem_response
from src.presentation.api.v1.routes import health, posts
from src.presentation.middleware.correlation import CorrelationIDMiddleware
from src.presentation.middleware.error_handler import ExceptionHandlingMiddleware
from src.presentation.middleware.security import SecurityHeadersMiddleware
from src.shared.telemetry.logging import setup_logging
from src.shared.telemetry.telemetry import TelemetryConfig, get_telemetry, set_telemetry

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for application initialization and cleanup"""
    # Initialize logging
    setup_logging()

    # Initialize OpenTelemetry distributed tracing
    if settings.telemetry_enabled:
        telemetry = TelemetryConfig.from_settings(settings)
        try:
            telemetry.setup_telemetry(
                exporter_type=settings.telemetry_exporter,
                otlp_endpoint=settings.telemetry_otlp_endpoint,
                sample_rate=settings.telemetry_sample_rate,
            )
            telemetry.instrument_all(app, engine)
            set_telemetry(telemetry)
        except Exception as e:
            logger.warning("Telemetry initialization failed: %s. Continuing without tracing.", e)
    else:
        logger.info("Distributed tracing disabled in configuration")

    # No migrations: the schema is created from the models
    if settings.database_auto_create:
        await create_tables()
        logger.info("Database tables ensured")

    if settings.seed_data:
        async with AsyncSessionLocal() as session:
            await seed_authors(session)

    yield

    # Shutdown telemetry (flush remaining spans)
    telemetry_instance = get_telemetry()
    if telemetry_instance:
        telemetry_instance.shutdown()
        set_telemetry(None)

    await engine.dispose()
    logger.info("Database engine disposed")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Configure rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and parameters are reported as 400 problem details"""
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return problem_response(400, "Validation Error", detail)


# Middleware (order matters - applied in reverse)
# 1. Unhandled exceptions (innermost, sees the correlation id)
app.add_middleware(ExceptionHandlingMiddleware)

# 2. Security headers
app.add_middleware(SecurityHeadersMiddleware)

# 3. Correlation ID for request tracing
app.add_middleware(CorrelationIDMiddleware)

# 4. CORS middleware
# Security: Using allow_credentials=True requires specific origins (not wildcard)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", "X-Correlation-ID", "Retry-After"],
)

# Routers
app.include_router(posts.router, prefix="/api/posts", tags=["posts"])
app.include_router(health.router, prefix="/api/health", tags=["health"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }
