"""Health check route."""

from fastapi import APIRouter

from ..config import get_ai_model
from ..services import AIService

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check plus AI availability."""
    return {
        "status": "ok",
        "ai": {"available": AIService().is_available(), "model": get_ai_model()},
    }
