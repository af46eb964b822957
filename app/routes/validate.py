"""Pre-validation route."""

from fastapi import APIRouter

from ..schemas import ValidateRequest, ValidateResponse
from ..services import ScannerService

router = APIRouter()
scanner_svc = ScannerService()


@router.post("/validate", response_model=ValidateResponse)
def validate(req: ValidateRequest) -> ValidateResponse:
    """Syntax-only verdict on a single file."""
    return scanner_svc.validate(req.file_name, req.content)
