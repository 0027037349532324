import structlog
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# IMPORT ROUTERS
from eoq_platform.routers.analysis import router as analysis_router
from eoq_platform.routers.eoq import router as eoq_router
from eoq_platform.routers.errors import validation_exception_handler
from eoq_platform.routers.health import router as health_router
from eoq_platform.routers.memes import router as memes_router
from eoq_platform.routers.nn_logic import router as nn_logic_router
load_dotenv()

from eoq_platform.config import get_settings
from eoq_platform.core.logging import configure_logging

logger = structlog.get_logger(__name__)


# SWAGGER UI: tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "EOQ Scoring"},
    {"name": "N/NN Logic"},
    {"name": "Memes"},
    {"name": "Analysis"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title="EOQ Meme Platform API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)           # Health
app.include_router(eoq_router)              # EOQ Scoring
app.include_router(nn_logic_router)         # N/NN Logic
app.include_router(memes_router)            # Memes
app.include_router(analysis_router)         # Analysis


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    settings = get_settings()
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# STARTUP EVENT
@app.on_event("startup")
async def startup_event():
    settings = get_settings()
    configure_logging(settings)
    logger.info(
        "startup",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        llm_provider=settings.LLM_PROVIDER.value,
    )


# SHUTDOWN EVENT
@app.on_event("shutdown")
async def shutdown_event():
    logger.info("shutdown", app=get_settings().APP_NAME)


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "eoq_platform.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
