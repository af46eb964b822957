"""Pydantic request/response models."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# --- Request ---


class ScanRequest(BaseModel):
    """Request body for a JSON scan of one or more files."""

    files: Dict[str, str] = Field(..., description="File name -> UTF-8 source text")
    scan_issues: bool = Field(default=True, description="Detect issues")
    scan_features: bool = Field(default=True, description="Extract features")
    scan_suggestions: bool = Field(default=True, description="Generate suggestions")


class ValidateRequest(BaseModel):
    """Request body for pre-validation."""

    file_name: str = Field(..., description="File name, used for dialect detection")
    content: str = Field(..., description="Source text")


class OptimizeOptions(BaseModel):
    """What the AI optimization should do."""

    fix_syntax: bool = True
    optimize_code: bool = True
    add_comments: bool = True
    modernize: bool = True
    security_check: bool = True
    best_practices: bool = True


class OptimizeRequest(BaseModel):
    """Request body for AI optimization of one file."""

    file_name: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    options: OptimizeOptions = Field(default_factory=OptimizeOptions)
    skip_validation: bool = Field(default=False, description="Send even if pre-validation fails")


# --- Results (response) ---


class IssueOut(BaseModel):
    """Single flagged issue."""

    severity: str = Field(..., description="critical, high, medium or low")
    line: int
    message: str
    code: str
    fix: str
    category: str


class FeatureOut(BaseModel):
    """Single extracted feature; detail fields depend on the category."""

    name: str
    category: str
    line: int
    icon: str
    arguments: Optional[List[str]] = None
    has_permission: Optional[bool] = None
    has_cooldown: Optional[bool] = None
    has_condition: Optional[bool] = None
    complexity: Optional[int] = None
    parameters: Optional[List[str]] = None
    returns: Optional[bool] = None
    length: Optional[int] = None
    default_value: Optional[str] = None
    value_type: Optional[str] = None
    usage: Optional[int] = None


class FileStatsOut(BaseModel):
    lines: int
    non_empty: int
    comments: int
    size: int
    complexity: int


class DependenciesOut(BaseModel):
    variables: List[str] = Field(default_factory=list)
    libraries: List[str] = Field(default_factory=list)


class FileResult(BaseModel):
    """Everything found in a single file."""

    file_name: str
    issues: List[IssueOut] = Field(default_factory=list)
    features: List[FeatureOut] = Field(default_factory=list)
    stats: FileStatsOut
    dependencies: DependenciesOut


class ProjectStatsOut(BaseModel):
    """Totals across all files of the run."""

    files: int
    total_lines: int
    total_commands: int
    total_events: int
    total_functions: int
    categories: Dict[str, int] = Field(default_factory=dict)
    issues: Dict[str, int] = Field(default_factory=dict)
    variables: List[str] = Field(default_factory=list)
    libraries: List[str] = Field(default_factory=list)


class SuggestionOut(BaseModel):
    title: str
    icon: str
    priority: str
    description: str
    reason: str
    example: str
    impact: str


class FileFailureOut(BaseModel):
    file_name: str
    error: str


class ScanResponse(BaseModel):
    """Response for POST /scan and /scan/upload."""

    files: List[FileResult] = Field(default_factory=list)
    project: ProjectStatsOut
    suggestions: Optional[List[SuggestionOut]] = Field(
        default=None, description="Ranked suggestions; null when not requested"
    )
    failures: List[FileFailureOut] = Field(default_factory=list)


class ValidateResponse(BaseModel):
    """Response for POST /validate."""

    is_skript: bool
    valid: bool
    language: str
    issues: List[IssueOut] = Field(default_factory=list)
    summary: str


class OptimizeResponse(BaseModel):
    """Response for POST /optimize."""

    file_name: str
    optimized_code: str
    changes: List[str] = Field(default_factory=list)
    issues: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    language: str


class ErrorDetail(BaseModel):
    """Error response detail."""

    detail: str = Field(..., description="Error message")
