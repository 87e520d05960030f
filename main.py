import time

from dotenv import load_dotenv

# Load environment variables before the config module reads them
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from swatchbook import __version__
from swatchbook.api.colors import router as colors_router
from swatchbook.config import config
from swatchbook.schemas import HealthResponse
from swatchbook.services.catalog import get_catalog
from swatchbook.utils.ids import generate_request_id
from swatchbook.utils.logging import get_logger
from swatchbook.utils.metrics import get_metrics

logger = get_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags every request with an id, logs it and counts it."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or generate_request_id()
        start_time = time.time()

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        if config.METRICS_ENABLED:
            metrics = get_metrics()
            metrics.increment_request_count()
            metrics.record_timing("request", duration_ms)

        logger.info("Request handled", extra={
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(duration_ms, 2)
        })

        response.headers["X-Request-ID"] = request_id
        return response


app = FastAPI(
    title="Swatchbook",
    description="Color catalog with filtering, hex similarity and descriptive search",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "Content-Disposition"]
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(colors_router)


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(ok=True, version=__version__, catalog_size=len(get_catalog()))


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "Swatchbook API",
        "version": __version__,
        "docs": "/docs"
    }


@app.get("/metrics")
def metrics_summary():
    """In-process counters and timing statistics"""
    return get_metrics().get_summary()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
