import logging

from fastapi import FastAPI

from apps.api.middleware import RequestLoggingMiddleware, TraceIdMiddleware
from infra.settings import get_settings
from modules.phone_compare.adapters.http.router import router as comparison_router

settings = get_settings()
logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s %(message)s")

app = FastAPI(title="Phone Compare API")
app.add_middleware(TraceIdMiddleware)
app.add_middleware(RequestLoggingMiddleware)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "environment": settings.environment}


app.include_router(comparison_router)
