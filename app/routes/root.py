"""Root route."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

_ENDPOINTS = (
    ("GET", "/health", "liveness and AI availability"),
    ("POST", "/scan", "JSON batch of files: issues, features, project stats, suggestions"),
    ("POST", "/scan/upload", "same scan for multipart .sk uploads"),
    ("POST", "/scan/report", "scan rendered as a Markdown report"),
    ("POST", "/validate", "syntax pre-check of one file"),
    ("POST", "/optimize", "AI rewrite of one file (needs AI_API_KEY)"),
)

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Skript Scanner API</title>
  <style>
    body {{ font-family: system-ui, sans-serif; max-width: 46rem; margin: 2rem auto; color: #1e293b; }}
    table {{ border-collapse: collapse; width: 100%; }}
    td {{ padding: 0.35rem 0.6rem; border-bottom: 1px solid #e2e8f0; vertical-align: top; }}
    code {{ color: #0f766e; }}
  </style>
</head>
<body>
  <h1>Skript Scanner API</h1>
  <p>Heuristic analysis for Skript (.sk) server scripts. Schemas: <a href="/docs">/docs</a>, <a href="/redoc">/redoc</a>.</p>
  <table>
{rows}
  </table>
</body>
</html>
"""


def _render_root() -> str:
    rows = "\n".join(
        f"    <tr><td>{method}</td><td><code>{path}</code></td><td>{what}</td></tr>"
        for method, path, what in _ENDPOINTS
    )
    return _PAGE.format(rows=rows)


@router.get("/", response_class=HTMLResponse)
def root() -> str:
    """Index page listing the endpoints."""
    return _render_root()
