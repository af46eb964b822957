"""Scan routes (issues, features and suggestions for a batch of files)."""

from deps import File, Form, List, PlainTextResponse, UploadFile, logging
from fastapi import APIRouter

from ..report_formatter import format_scan_report
from ..schemas import ScanRequest, ScanResponse
from ..services import ScannerService
from ..services.file_reader import check_texts, read_uploads
from ..services.scanner import run_to_response

router = APIRouter()
scanner_svc = ScannerService()
logger = logging.getLogger(__name__)


def _scan(req: ScanRequest) -> ScanResponse:
    check_texts(req.files)
    run = scanner_svc.scan(
        req.files,
        scan_issues=req.scan_issues,
        scan_features=req.scan_features,
        scan_suggestions=req.scan_suggestions,
    )
    return run_to_response(run)


@router.post("/scan", response_model=ScanResponse)
def scan(req: ScanRequest) -> ScanResponse:
    """Scan a JSON batch of files."""
    return _scan(req)


@router.post("/scan/upload", response_model=ScanResponse)
async def scan_upload(
    files: List[UploadFile] = File(...),
    scan_issues: bool = Form(True),
    scan_features: bool = Form(True),
    scan_suggestions: bool = Form(True),
) -> ScanResponse:
    """Scan uploaded files. Files are read one after another, then analyzed."""
    texts = await read_uploads(files)
    logger.info("Scanning %d uploaded file(s)", len(texts))
    run = scanner_svc.scan(
        texts,
        scan_issues=scan_issues,
        scan_features=scan_features,
        scan_suggestions=scan_suggestions,
    )
    return run_to_response(run)


@router.post("/scan/report", response_class=PlainTextResponse)
def scan_report(req: ScanRequest) -> PlainTextResponse:
    """Scan a JSON batch and return the results as Markdown."""
    return PlainTextResponse(format_scan_report(_scan(req)), media_type="text/markdown")
