"""Main FastAPI application"""
from fastapi import FastAPI
from app.config import Settings, get_settings
from app.middleware.cors import setup_cors
from app.middleware.error_handler import ErrorHandlerMiddleware, register_exception_handlers
from app.routers import forms
from contextlib import asynccontextmanager
import logging

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def log_delivery_config(current: Settings) -> None:
    """Log the resolved delivery setup without secrets"""
    logger.info(
        f"Inquiry relay starting (record_backend={current.record_backend}, "
        f"from_email={'set' if current.from_email else 'missing'}, "
        f"to_email={'set' if current.to_email else 'missing'})"
    )
    if current.record_backend == "webhook" and not current.record_webhook_url:
        logger.warning(
            "RECORD_BACKEND is 'webhook' but RECORD_WEBHOOK_URL is empty; "
            "every submission will report sheet=false"
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    log_delivery_config(get_settings())
    yield
    # Shutdown
    logger.info("Inquiry relay stopped")


app = FastAPI(
    title="Inquiry Relay API",
    description="Relays website inquiries to email and a spreadsheet log",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Setup CORS
setup_cors(app, settings)

# Add error handling
app.add_middleware(ErrorHandlerMiddleware)
register_exception_handlers(app)


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "inquiry-relay", "record_backend": get_settings().record_backend}


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Inquiry Relay API",
        "version": VERSION,
        "docs": "/docs"
    }


app.include_router(forms.router, prefix="/api", tags=["Forms"])

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Backend running at http://localhost:{settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
