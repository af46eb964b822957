"""File reading service: validates uploads and decodes them to text."""

from deps import Dict, HTTPException, List, UploadFile, logging

from skript_analyzer.results import SourceFile
from skript_analyzer.utils import file_extension

from ..config import SUPPORTED_EXTENSIONS, get_max_file_size, get_max_files, get_max_total_size

logger = logging.getLogger(__name__)


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def check_file_name(name: str) -> None:
    """Reject names without a supported extension."""
    if file_extension(name) not in SUPPORTED_EXTENSIONS:
        raise HTTPException(
            400,
            f"Unsupported file type: {name}. Accepted: {', '.join(SUPPORTED_EXTENSIONS)}",
        )


def _too_large(name: str, size: int, max_size: int) -> HTTPException:
    return HTTPException(413, f"{name} is too large ({_format_size(size)}, max {_format_size(max_size)})")


def check_batch(sizes: Dict[str, int]) -> None:
    """Enforce file count, per-file and total size limits."""
    max_files = get_max_files()
    if len(sizes) > max_files:
        raise HTTPException(400, f"Too many files (max {max_files})")
    max_size = get_max_file_size()
    for name, size in sizes.items():
        if size > max_size:
            raise _too_large(name, size, max_size)
    total = sum(sizes.values())
    max_total = get_max_total_size()
    if total > max_total:
        raise HTTPException(413, f"Upload too large ({_format_size(total)}, max {_format_size(max_total)})")


def check_texts(files: Dict[str, str]) -> None:
    """Validate a JSON batch of name -> text."""
    sources = [SourceFile(name, text) for name, text in files.items()]
    for source in sources:
        check_file_name(source.name)
    check_batch({source.name: source.size for source in sources})


async def read_uploads(uploads: List[UploadFile]) -> Dict[str, str]:
    """Read uploads one at a time into name -> text. Duplicate names keep the first.

    Reads are capped at the per-file limit plus one byte; the running total is
    checked after each file.
    """
    if len(uploads) > get_max_files():
        raise HTTPException(400, f"Too many files (max {get_max_files()})")
    max_size = get_max_file_size()
    max_total = get_max_total_size()
    sources: Dict[str, SourceFile] = {}
    total = 0
    for upload in uploads:
        name = upload.filename or ""
        check_file_name(name)
        if name in sources:
            logger.info("Skipping duplicate upload %s", name)
            continue
        if upload.size is not None and upload.size > max_size:
            raise _too_large(name, upload.size, max_size)
        data = await upload.read(max_size + 1)
        if len(data) > max_size:
            raise _too_large(name, len(data), max_size)
        total += len(data)
        if total > max_total:
            raise HTTPException(413, f"Upload too large (over {_format_size(max_total)})")
        try:
            sources[name] = SourceFile(name, data.decode("utf-8"))
        except UnicodeDecodeError:
            raise HTTPException(400, f"{name} is not valid UTF-8 text")
    return {name: source.text for name, source in sources.items()}
