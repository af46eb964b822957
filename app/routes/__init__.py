"""Route handlers."""

from .health import router as health_router
from .optimize import router as optimize_router
from .root import router as root_router
from .scan import router as scan_router
from .validate import router as validate_router

__all__ = ["root_router", "health_router", "scan_router", "validate_router", "optimize_router"]
