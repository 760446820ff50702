from fastapi import FastAPI
from contextlib import asynccontextmanager

from fetchaller.api.routes import router
from fetchaller.core.config import APP_NAME, APP_VERSION
from fetchaller.core.diagnostics import log


@asynccontextmanager
async def lifespan(app: FastAPI):
    log(f"{APP_NAME} HTTP API starting")
    yield
    log(f"{APP_NAME} HTTP API shutting down")

app = FastAPI(
    title=APP_NAME,
    description="Fetch any URL and return its content as clean markdown",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": APP_NAME,
        "version": APP_VERSION,
        "endpoints": {
            "fetch": "POST /fetch",
            "health": "GET /health",
        },
    }
