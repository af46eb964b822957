"""FastAPI app: /health, /scan, /validate, /optimize."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_host, get_port
from .logging_setup import setup_logging
from .routes import (
    health_router,
    optimize_router,
    root_router,
    scan_router,
    validate_router,
)
from .startup import validate_config

setup_logging()

app = FastAPI(
    title="Skript Scanner API",
    description="Heuristic Skript analysis: issues, features, suggestions, plus AI optimization.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(scan_router)
app.include_router(validate_router)
app.include_router(optimize_router)


@app.on_event("startup")
def _validate_config() -> None:
    validate_config()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("app.main:app", host=get_host(), port=get_port())
