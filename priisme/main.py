from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging

from priisme.core.config import settings, validate_server_settings
from priisme.core.exceptions import StyleAnalysisError
from priisme.database import connect_to_mongo, close_mongo_connection, db
from priisme.middleware.cors import PreflightCORSMiddleware, ALLOWED_METHODS
from priisme.api.v1 import auth, analyze_style, style_analyses

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

validate_server_settings(settings)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting PRIISME Style AI Backend...")
    connect_to_mongo()
    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Closing database connections...")
    close_mongo_connection()
    logger.info("Application shutdown complete")

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="PRIISME - AI style analysis backend API",
    lifespan=lifespan
)

# CORS middleware - pre-flights must succeed before content-type dispatch
app.add_middleware(
    PreflightCORSMiddleware,
    allow_origins=["*"],
    allow_methods=ALLOWED_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

# Include routers
app.include_router(auth.router, prefix="/api/v1/auth", tags=["Authentication"])
app.include_router(analyze_style.router, prefix="/api/v1", tags=["Style Analysis"])
app.include_router(style_analyses.router, prefix="/api/v1/style-analyses", tags=["Style History"])

# Health check endpoint
@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Health check with database ping"""
    db_status = "healthy"
    try:
        if db.client is None:
            db_status = "not_connected"
        else:
            db.client.admin.command('ping')
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": "development" if settings.DEBUG else "production",
        "database": db_status,
        "ai_configured": bool(settings.style_api_key)
    }

@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Welcome to PRIISME Style AI Backend",
        "version": settings.APP_VERSION,
        "docs": "/docs"
    }

# Every error leaves the API as {"error": "..."}
@app.exception_handler(StyleAnalysisError)
async def style_analysis_exception_handler(request: Request, exc: StyleAnalysisError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    first_error = exc.errors()[0] if exc.errors() else {}
    return JSONResponse(
        status_code=422,
        content={"error": first_error.get("msg", "Invalid request")}
    )

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )
