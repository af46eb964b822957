"""Optimize route (AI rewrite of a single file)."""

from deps import HTTPException, logging
from fastapi import APIRouter

from ..schemas import ErrorDetail, OptimizeRequest, OptimizeResponse
from ..services import AIService, AIServiceError, ScannerService
from ..services.file_reader import check_texts

router = APIRouter()
ai_svc = AIService()
scanner_svc = ScannerService()
logger = logging.getLogger(__name__)


@router.post(
    "/optimize",
    response_model=OptimizeResponse,
    responses={422: {"model": ErrorDetail}, 502: {"model": ErrorDetail}, 503: {"model": ErrorDetail}},
)
def optimize(req: OptimizeRequest) -> OptimizeResponse:
    """Pre-validate, then ask the AI backend for an optimized version of the file."""
    check_texts({req.file_name: req.content})
    if not req.skip_validation:
        verdict = scanner_svc.validate(req.file_name, req.content)
        if not verdict.valid:
            blocking = sum(1 for i in verdict.issues if i.severity in ("critical", "high"))
            raise HTTPException(
                422,
                f"Validation failed with {blocking} error(s):\n{verdict.summary}",
            )
    try:
        result = ai_svc.optimize(req.file_name, req.content, req.options)
    except AIServiceError as e:
        logger.warning("Optimization of %s failed: %s", req.file_name, e)
        raise HTTPException(e.status_code, f"Failed to optimize {req.file_name}: {e}")
    return OptimizeResponse(file_name=req.file_name, **result)
